"""Domain model for one flat directory listing.

This package contains non-UI listing primitives:
- the closed entry variant (up, directory, file) and its sort order
- filesystem scanning and child classification
- path resolution for typed input and directory changes
"""

from __future__ import annotations

from .types import UP_NAME, DirectoryEntry, Entry, EntryKind, FileEntry, UpEntry, entry_sort_key
from .fs import classify_child, list_directory_entries
from .paths import canonicalize, expand_user_input, resolve_absolute

__all__ = [
    "UP_NAME",
    "EntryKind",
    "UpEntry",
    "DirectoryEntry",
    "FileEntry",
    "Entry",
    "entry_sort_key",
    "classify_child",
    "list_directory_entries",
    "canonicalize",
    "expand_user_input",
    "resolve_absolute",
]
