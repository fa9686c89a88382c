"""Domain datatypes for one classified directory listing row."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import ClassVar


class EntryKind(IntEnum):
    """Entry classification; the integer value is the listing sort rank."""

    UP = 0
    DIRECTORY = 1
    FILE = 2


UP_NAME = ".."


@dataclass(frozen=True)
class UpEntry:
    """Synthetic row that navigates to the parent of the current directory."""

    kind: ClassVar[EntryKind] = EntryKind.UP
    name: ClassVar[str] = UP_NAME
    path: ClassVar[Path | None] = None


@dataclass(frozen=True)
class DirectoryEntry:
    """Child directory, or a symlink whose target is a directory."""

    name: str
    path: Path
    kind: ClassVar[EntryKind] = EntryKind.DIRECTORY


@dataclass(frozen=True)
class FileEntry:
    """Any other listed child: regular files and non-directory symlinks."""

    name: str
    path: Path
    kind: ClassVar[EntryKind] = EntryKind.FILE


Entry = UpEntry | DirectoryEntry | FileEntry


def entry_sort_key(entry: Entry) -> tuple[int, str]:
    """Order by kind rank, then codepoint-wise name (locale independent)."""
    return (int(entry.kind), entry.name)


__all__ = [
    "EntryKind",
    "UP_NAME",
    "UpEntry",
    "DirectoryEntry",
    "FileEntry",
    "Entry",
    "entry_sort_key",
]
