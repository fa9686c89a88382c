"""Resolved session options handed to the browser core."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_OPEN_COMMAND = "xdg-open '%s'"
DEFAULT_HIDDEN_SYMBOL = "[+]"
DEFAULT_NO_HIDDEN_SYMBOL = "[-]"
DEFAULT_PATH_SEP = " / "
DEFAULT_DEPTH_LIMIT = 1
DEFAULT_FILE_FORMAT = "%s"
DEFAULT_DIRECTORY_FORMAT = "%s"


@dataclass(frozen=True)
class BrowserOptions:
    """Everything the session needs from command line and config file."""

    start_dir: Path
    show_hidden: bool = False
    show_icons: bool = True
    show_status: bool = True
    print_path: bool = False
    use_mode_keys: bool = True
    open_command: str = DEFAULT_OPEN_COMMAND
    hidden_symbol: str = DEFAULT_HIDDEN_SYMBOL
    no_hidden_symbol: str = DEFAULT_NO_HIDDEN_SYMBOL
    path_sep: str = DEFAULT_PATH_SEP
    icon_themes: tuple[str, ...] | None = None
    # Accepted for compatibility; listings are always flat.
    depth_limit: int = DEFAULT_DEPTH_LIMIT
    file_format: str = DEFAULT_FILE_FORMAT
    directory_format: str = DEFAULT_DIRECTORY_FORMAT


__all__ = [
    "DEFAULT_OPEN_COMMAND",
    "DEFAULT_HIDDEN_SYMBOL",
    "DEFAULT_NO_HIDDEN_SYMBOL",
    "DEFAULT_PATH_SEP",
    "DEFAULT_DEPTH_LIMIT",
    "DEFAULT_FILE_FORMAT",
    "DEFAULT_DIRECTORY_FORMAT",
    "BrowserOptions",
]
