"""Themed icon names for listing entries.

Names follow the freedesktop icon naming convention: a content type such as
``text/x-python`` becomes ``text-x-python``, followed by the generic icon for
its media class (``text-x-generic``).
"""

from __future__ import annotations

import mimetypes
import os
import stat
from pathlib import Path

from ..file_model.types import Entry, EntryKind

ERROR_ICON = "error"
UP_ICON = "go-up"

DIRECTORY_ICONS = ("inode-directory", "folder")

_GENERIC_ICONS = {
    "text": "text-x-generic",
    "image": "image-x-generic",
    "audio": "audio-x-generic",
    "video": "video-x-generic",
    "font": "font-x-generic",
    "application": "application-x-generic",
    "inode": "inode-x-generic",
}

_SPECIAL_FILE_TYPES = (
    (stat.S_ISFIFO, "inode/fifo"),
    (stat.S_ISSOCK, "inode/socket"),
    (stat.S_ISBLK, "inode/blockdevice"),
    (stat.S_ISCHR, "inode/chardevice"),
)


def content_type_for_path(path: Path) -> str:
    """Guess a MIME content type for ``path``.

    Raises ``OSError`` when the path cannot be stat'ed.
    """
    st = os.stat(path)
    mode = st.st_mode
    if stat.S_ISDIR(mode):
        return "inode/directory"
    for predicate, content_type in _SPECIAL_FILE_TYPES:
        if predicate(mode):
            return content_type

    guessed, _encoding = mimetypes.guess_type(path.name, strict=False)
    if guessed:
        return guessed
    if st.st_size == 0:
        return "application/x-zerosize"
    if os.access(path, os.X_OK):
        return "application/x-executable"
    return "application/octet-stream"


def icon_names_for_content_type(content_type: str) -> list[str]:
    """Themed icon names for ``content_type``, most specific first."""
    if content_type == "inode/directory":
        return list(DIRECTORY_ICONS)
    names = [content_type.replace("/", "-")]
    major = content_type.split("/", 1)[0]
    generic = _GENERIC_ICONS.get(major)
    if generic and generic not in names:
        names.append(generic)
    return names


def icon_candidates(entry: Entry) -> list[str]:
    """Ordered icon names to try for ``entry``."""
    if entry.kind == EntryKind.UP:
        return [UP_ICON]
    if entry.path is None:
        return [ERROR_ICON]
    try:
        content_type = content_type_for_path(entry.path)
    except OSError:
        return [ERROR_ICON]
    return icon_names_for_content_type(content_type)


__all__ = [
    "ERROR_ICON",
    "UP_ICON",
    "DIRECTORY_ICONS",
    "content_type_for_path",
    "icon_names_for_content_type",
    "icon_candidates",
]
