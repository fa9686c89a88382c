"""Interactive terminal host for a browser session.

Turns key tokens into session events, keeps the prompt text and the
highlighted row, and applies the directive returned for each event. Icons
are not rendered here.
"""

from __future__ import annotations

import shutil
import sys

from .input import read_key
from .session import (
    AwaitingCustomCommand,
    Cancel,
    Confirm,
    CustomInput,
    Directive,
    Event,
    FileBrowserSession,
    NavigateNext,
    NavigatePrevious,
    Select,
    ShiftSelect,
)
from .terminal import TerminalController

PROMPT = "> "
CANCEL_KEYS = frozenset({"ESC", "CTRL_C"})
HEADER_ROWS = 2


class BrowserHost:
    """Prompt and selection state layered over one session."""

    def __init__(self, session: FileBrowserSession) -> None:
        self.session = session
        self.query = ""
        self.selected = 0

    @property
    def awaiting_command(self) -> bool:
        return isinstance(self.session.state, AwaitingCustomCommand)

    def visible_indices(self) -> list[int]:
        return [index for index in range(self.session.entry_count) if self.session.matches(index, self.query)]

    def _selected_index(self) -> int | None:
        visible = self.visible_indices()
        if not visible:
            return None
        return visible[max(0, min(self.selected, len(visible) - 1))]

    def _set_query(self, query: str) -> None:
        self.query = query
        self.selected = 0

    def event_for_key(self, key: str) -> Event | None:
        """Return the session event for ``key``, editing the prompt for other keys."""
        if key in CANCEL_KEYS:
            return Cancel()
        if key == "SHIFT_RIGHT":
            return NavigateNext()
        if key == "SHIFT_LEFT":
            return NavigatePrevious()
        if key in {"ENTER_CR", "ENTER_LF"}:
            if self.awaiting_command:
                return Confirm(self.query)
            selected = self._selected_index()
            if key == "ENTER_LF" or selected is None:
                return CustomInput(self.query)
            return Select(selected, self.query)
        if key == "TAB":
            selected = self._selected_index()
            if self.awaiting_command or selected is None:
                return None
            return ShiftSelect(selected, self.query)

        if key == "UP":
            self.selected = max(0, self.selected - 1)
        elif key == "DOWN":
            self.selected = min(max(0, len(self.visible_indices()) - 1), self.selected + 1)
        elif key == "BACKSPACE":
            self._set_query(self.query[:-1])
        elif key == "CTRL_U":
            self._set_query("")
        elif len(key) == 1 and key.isprintable():
            self._set_query(self.query + key)
        return None

    def apply_directive(self, directive: Directive) -> bool:
        """Update prompt state for ``directive``; return ``False`` on exit."""
        if directive == Directive.EXIT:
            return False
        if directive == Directive.RESET:
            self._set_query("")
        else:
            self.selected = max(0, min(self.selected, len(self.visible_indices()) - 1))
        return True

    def handle_key(self, key: str) -> bool:
        event = self.event_for_key(key)
        if event is None:
            return True
        return self.apply_directive(self.session.handle_event(event))

    def render_lines(self, width: int, height: int) -> list[str]:
        """Plain screen rows; the highlighted row is wrapped in reverse video."""
        width = max(1, width)
        rows_available = max(1, height - HEADER_ROWS)
        lines = [(self.session.status_message() or "")[:width], (PROMPT + self.query)[:width]]

        visible = self.visible_indices()
        selected = max(0, min(self.selected, len(visible) - 1))
        start = max(0, selected - rows_available + 1)
        for position in range(start, min(len(visible), start + rows_available)):
            text = self.session.display_value(visible[position])[:width]
            if position == selected:
                text = f"\x1b[7m{text}\x1b[0m"
            lines.append(text)
        return lines


def run_terminal_host(session: FileBrowserSession, stdin_fd: int | None = None, stdout_fd: int | None = None) -> None:
    """Drive ``session`` from raw terminal keys until it exits or input ends."""
    stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
    stdout_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
    terminal = TerminalController(stdin_fd, stdout_fd)
    host = BrowserHost(session)

    with terminal.raw_mode():
        while True:
            size = shutil.get_terminal_size((80, 24))
            lines = host.render_lines(size.columns, size.lines)
            terminal.write("\x1b[H\x1b[2J" + "\r\n".join(lines))
            key = read_key(stdin_fd)
            if not key:
                break
            if not host.handle_key(key):
                break


__all__ = [
    "BrowserHost",
    "run_terminal_host",
]
