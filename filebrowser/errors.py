"""Exception types for the file browser core.

None of these abort a session: callers catch them and degrade to an empty
listing, an unchanged state, the next icon candidate, or fallback themes.
"""

from __future__ import annotations

from pathlib import Path


class FileBrowserError(Exception):
    """Base class for recoverable file browser failures."""


class PathNotFoundError(FileBrowserError, FileNotFoundError):
    """Typed or programmatic path exists neither as given nor under the current directory."""

    def __init__(self, path: str | Path, current_dir: Path) -> None:
        super().__init__(f"Path not found: {path} (relative to {current_dir})")
        self.path = path
        self.current_dir = current_dir


class DirectoryUnreadableError(FileBrowserError):
    """Directory could not be enumerated (permissions, race, deletion)."""

    def __init__(self, path: Path, reason: OSError | None = None) -> None:
        message = f"Cannot read directory: {path}"
        if reason is not None:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path
        self.reason = reason


class IconDecodeError(FileBrowserError):
    """Icon asset exists but could not be decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot decode icon {path}: {reason}")
        self.path = path
        self.reason = reason


class ThemeDetectionError(FileBrowserError):
    """No desktop icon theme could be determined."""


__all__ = [
    "FileBrowserError",
    "PathNotFoundError",
    "DirectoryUnreadableError",
    "IconDecodeError",
    "ThemeDetectionError",
]
