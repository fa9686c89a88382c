"""Filesystem scanning and classification for one directory listing."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import DirectoryUnreadableError
from .types import DirectoryEntry, Entry, FileEntry, UpEntry, entry_sort_key

logger = logging.getLogger(__name__)


def classify_child(child: os.DirEntry, child_path: Path) -> Entry | None:
    """Classify one scandir child, or return ``None`` for unsupported types.

    ``DirEntry.is_*`` fall back to ``lstat`` when the OS reports an unknown
    type, so every child gets an explicit answer. Symlinks are classified by
    their target; dangling links list as files.
    """
    try:
        if child.is_symlink():
            if child_path.is_dir():
                return DirectoryEntry(name=child.name, path=child_path)
            return FileEntry(name=child.name, path=child_path)
        if child.is_dir(follow_symlinks=False):
            return DirectoryEntry(name=child.name, path=child_path)
        if child.is_file(follow_symlinks=False):
            return FileEntry(name=child.name, path=child_path)
    except OSError as exc:
        logger.debug("Skipping %s: %s", child_path, exc)
    return None


def list_directory_entries(
    directory: Path,
    show_hidden: bool,
) -> tuple[tuple[Entry, ...], DirectoryUnreadableError | None]:
    """List direct children of ``directory`` as sorted entries.

    Returns ``(entries, scan_error)``. ``scan_error`` is set when the
    directory cannot be opened; entries are then empty. The Up entry is
    included whenever the directory could be read, independent of
    ``show_hidden``.
    """
    entries: list[Entry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                entry = classify_child(child, directory / name)
                if entry is not None:
                    entries.append(entry)
    except OSError as exc:
        return (), DirectoryUnreadableError(directory, exc)

    entries.append(UpEntry())
    entries.sort(key=entry_sort_key)
    return tuple(entries), None


__all__ = [
    "classify_child",
    "list_directory_entries",
]
