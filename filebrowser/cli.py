"""Command-line front door for file-browser.

Merges config-file defaults with command-line flags into ``BrowserOptions``,
checks the start directory, then either prints the listing or runs the
interactive terminal host.
"""

from __future__ import annotations

import argparse
import logging
import logging.handlers
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME, load_option_overrides
from .host import run_terminal_host
from .session import BrowserOptions, FileBrowserSession, FileOpener


def _non_negative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse a directory, toggle hidden files, and open files with a command."
    )
    parser.add_argument("--dir", dest="start_dir", default=None, help="Start directory. Defaults to current directory.")
    parser.add_argument("--show-hidden", dest="show_hidden", action="store_true", default=None, help="Show hidden files.")
    parser.add_argument(
        "--disable-icons", dest="show_icons", action="store_false", default=None, help="Do not resolve entry icons."
    )
    parser.add_argument(
        "--disable-status", dest="show_status", action="store_false", default=None, help="Hide the status message."
    )
    parser.add_argument(
        "--dmenu",
        dest="print_path",
        action="store_true",
        default=None,
        help="Print the absolute path of the selected file instead of opening it.",
    )
    parser.add_argument(
        "--disable-mode-keys",
        dest="use_mode_keys",
        action="store_false",
        default=None,
        help="Do not use Shift+Right/Shift+Left to toggle hidden files.",
    )
    parser.add_argument(
        "--cmd",
        dest="open_command",
        default=None,
        help="Command used to open files; %%s is replaced with the path.",
    )
    parser.add_argument("--hidden-symbol", default=None, help="Status prefix while hidden files are shown.")
    parser.add_argument("--no-hidden-symbol", default=None, help="Status prefix while hidden files are hidden.")
    parser.add_argument("--path-sep", default=None, help="Separator between path components in the status message.")
    parser.add_argument(
        "--theme",
        dest="icon_themes",
        action="append",
        default=None,
        help="Icon theme to use (repeatable). Defaults to the detected desktop theme.",
    )
    parser.add_argument(
        "--depth",
        dest="depth_limit",
        type=_non_negative_int,
        default=None,
        help="Accepted for compatibility; listings only show direct children.",
    )
    parser.add_argument("--list", action="store_true", help="Print the listing of the start directory and exit.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details (to stderr, or to the log file while browsing).")
    return parser


_OPTION_FIELDS = (
    "start_dir",
    "show_hidden",
    "show_icons",
    "show_status",
    "print_path",
    "use_mode_keys",
    "open_command",
    "hidden_symbol",
    "no_hidden_symbol",
    "path_sep",
    "icon_themes",
    "depth_limit",
)


def resolve_options(args: argparse.Namespace, default_dir: Path | None = None) -> BrowserOptions:
    """Combine defaults, config-file values and explicit flags, in that order."""
    overrides = load_option_overrides()
    for field_name in _OPTION_FIELDS:
        value = getattr(args, field_name)
        if value is not None:
            overrides[field_name] = value
    if "icon_themes" in overrides:
        overrides["icon_themes"] = tuple(overrides["icon_themes"])

    start_dir = overrides.pop("start_dir", None)
    if start_dir is None:
        start_dir = default_dir if default_dir is not None else Path.cwd()
    start_dir = Path(start_dir).expanduser()
    if not start_dir.exists():
        raise SystemExit(f"Start directory does not exist: {start_dir}")
    if not start_dir.is_dir():
        raise SystemExit(f"Start directory is not a directory: {start_dir}")
    return BrowserOptions(start_dir=start_dir, **overrides)


def render_listing(session: FileBrowserSession) -> str:
    """Status message and display values, one per line."""
    lines: list[str] = []
    message = session.status_message()
    if message is not None:
        lines.append(message)
    lines.extend(session.display_value(index) for index in range(session.entry_count))
    return "".join(f"{line}\n" for line in lines)


LOG_FORMAT = "[file-browser] %(levelname)s %(name)s: %(message)s"
LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / "file-browser.log"


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


@contextmanager
def logging_to_file(path: Path) -> Iterator[None]:
    """Send root-logger records to ``path`` instead of the terminal.

    Used while the host owns the screen. Records are dropped when the log
    file cannot be opened.
    """
    handler: logging.Handler
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(path, maxBytes=1_000_000, backupCount=1, encoding="utf-8")
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s " + LOG_FORMAT))

    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    root.handlers = [handler]
    try:
        yield
    finally:
        root.handlers = saved_handlers
        handler.close()


def main(default_dir: Path | None = None) -> None:
    """Parse CLI arguments and browse the start directory.

    ``default_dir`` is primarily for tests; when omitted and no ``--dir`` or
    config value is given the current working directory is used.
    """
    args = build_parser().parse_args()
    configure_logging(args.verbose)
    options = resolve_options(args, default_dir)

    if args.list:
        session = FileBrowserSession(replace(options, show_icons=False))
        sys.stdout.write(render_listing(session))
        return

    if not sys.stdin.isatty() or not sys.stdout.isatty():
        raise SystemExit("Interactive mode needs a terminal; use --list to print the listing.")

    pending_output: list[str] = []
    opener = FileOpener(options.open_command, options.print_path, write_line=pending_output.append)
    session = FileBrowserSession(options, opener=opener)
    with logging_to_file(LOG_PATH):
        run_terminal_host(session)
    for line in pending_output:
        sys.stdout.write(line + "\n")
    sys.stdout.flush()


if __name__ == "__main__":
    main()
