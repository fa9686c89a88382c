"""Open-file action: print the path or spawn the open command detached."""

from __future__ import annotations

import logging
import shlex
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)

PATH_PLACEHOLDER = "%s"


def _write_stdout(line: str) -> None:
    sys.stdout.write(line + "\n")
    sys.stdout.flush()


def build_command_line(template: str, path: Path) -> str:
    """Fill ``template`` with ``path``.

    Templates containing ``%s`` own their quoting; otherwise the shell-quoted
    path is appended after a space.
    """
    if PATH_PLACEHOLDER in template:
        return template.replace(PATH_PLACEHOLDER, str(path))
    return f"{template} {shlex.quote(str(path))}"


class FileOpener:
    """Open files for the session, or print their paths in print-path mode."""

    def __init__(
        self,
        command: str,
        print_path: bool = False,
        write_line: Callable[[str], None] = _write_stdout,
    ) -> None:
        self.command = command
        self.print_path = print_path
        self.write_line = write_line

    def open(self, path: Path, cwd: Path) -> None:
        if self.print_path:
            self.write_line(str(path))
            return

        command_line = build_command_line(self.command, path)
        try:
            subprocess.Popen(
                command_line,
                shell=True,
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as exc:
            logger.warning("Failed to run %r: %s", command_line, exc)


__all__ = [
    "PATH_PLACEHOLDER",
    "build_command_line",
    "FileOpener",
]
