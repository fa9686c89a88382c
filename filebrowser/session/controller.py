"""Browser session: directory state, interaction state machine and host queries.

The session is the only owner of the current directory, listing, hidden-file
flag, icon cache and interaction state. Hosts construct it once, feed events
through ``handle_event`` one at a time, and render from the read-only query
methods.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from PIL import Image

from ..errors import PathNotFoundError
from ..file_model import (
    UP_NAME,
    Entry,
    EntryKind,
    canonicalize,
    expand_user_input,
    list_directory_entries,
    resolve_absolute,
)
from ..icons import IconResolver, IconThemeLookup, build_theme_list
from .events import (
    AwaitingCustomCommand,
    Cancel,
    Confirm,
    CustomInput,
    Directive,
    Event,
    Idle,
    InteractionState,
    NavigateNext,
    NavigatePrevious,
    Select,
    ShiftSelect,
)
from .matching import matches_query
from .opener import FileOpener
from .options import BrowserOptions

logger = logging.getLogger(__name__)

OPEN_CUSTOM_MESSAGE_FORMAT = "Enter command to open '%s' with, or cancel to go back."


def build_icon_resolver(options: BrowserOptions) -> IconResolver:
    """Create the default resolver for ``options``."""
    return IconResolver(build_theme_list(options.icon_themes), lookup=IconThemeLookup())


class FileBrowserSession:
    """One interactive browsing session."""

    def __init__(
        self,
        options: BrowserOptions,
        opener: FileOpener | None = None,
        icon_resolver: IconResolver | None = None,
    ) -> None:
        self.options = options
        self.opener = opener if opener is not None else FileOpener(options.open_command, options.print_path)
        # Built on first icon request so hosts without icons skip theme detection.
        self._icon_resolver = icon_resolver

        self._current_path = canonicalize(options.start_dir)
        self._show_hidden = options.show_hidden
        self._entries: tuple[Entry, ...] = ()
        self._state: InteractionState = Idle()
        self._reload()

    # ---- read-only state ----

    @property
    def current_path(self) -> Path:
        return self._current_path

    @property
    def show_hidden(self) -> bool:
        return self._show_hidden

    @property
    def entries(self) -> tuple[Entry, ...]:
        return self._entries

    @property
    def state(self) -> InteractionState:
        return self._state

    # ---- directory state ----

    def _reload(self) -> None:
        entries, scan_error = list_directory_entries(self._current_path, self._show_hidden)
        if scan_error is not None:
            logger.debug("%s", scan_error)
        self._entries = entries

    def _change_dir(self, path: Path) -> None:
        self._current_path = canonicalize(path)
        self._reload()

    def _entry_path(self, entry: Entry) -> Path:
        if entry.kind == EntryKind.UP:
            return self._current_path / UP_NAME
        return entry.path

    def _open_file(self, path: Path) -> None:
        self.opener.open(path, self._current_path)

    def _set_show_hidden(self, show_hidden: bool) -> None:
        self._show_hidden = show_hidden
        self._reload()

    # ---- events ----

    def handle_event(self, event: Event) -> Directive:
        """Apply one host event and return the directive for the host."""
        if isinstance(self._state, AwaitingCustomCommand):
            return self._handle_custom_command_event(self._state.target_index, event)
        return self._handle_idle_event(event)

    def _handle_idle_event(self, event: Event) -> Directive:
        if isinstance(event, Select):
            if not 0 <= event.index < len(self._entries):
                return Directive.RELOAD
            entry = self._entries[event.index]
            if entry.kind == EntryKind.FILE:
                self._open_file(self._entry_path(entry))
                return Directive.EXIT
            self._change_dir(self._entry_path(entry))
            return Directive.RESET

        if isinstance(event, ShiftSelect):
            if not 0 <= event.index < len(self._entries):
                return Directive.RELOAD
            self._state = AwaitingCustomCommand(event.index)
            return Directive.RESET

        if isinstance(event, CustomInput):
            return self._handle_custom_input(event.text)

        if isinstance(event, NavigateNext):
            if self.options.use_mode_keys and not self._show_hidden:
                self._set_show_hidden(True)
                return Directive.RELOAD
            return Directive.NEXT

        if isinstance(event, NavigatePrevious):
            if self.options.use_mode_keys and self._show_hidden:
                self._set_show_hidden(False)
                return Directive.RELOAD
            return Directive.PREVIOUS

        if isinstance(event, Cancel):
            return Directive.EXIT

        return Directive.RELOAD

    def _handle_custom_input(self, text: str) -> Directive:
        if not text:
            self._set_show_hidden(not self._show_hidden)
            return Directive.RELOAD

        try:
            path = resolve_absolute(expand_user_input(text), self._current_path)
        except PathNotFoundError as exc:
            logger.debug("%s", exc)
            return Directive.RELOAD

        if os.path.isdir(path):
            self._change_dir(path)
            return Directive.RESET
        if os.path.isfile(path):
            self._open_file(path)
            return Directive.EXIT
        return Directive.RELOAD

    def _handle_custom_command_event(self, target_index: int, event: Event) -> Directive:
        if isinstance(event, Cancel):
            self._state = Idle()
            return Directive.RESET

        if isinstance(event, (Confirm, Select, ShiftSelect, CustomInput)):
            if event.text:
                self.opener.command = event.text
            self._open_file(self._entry_path(self._entries[target_index]))
            return Directive.EXIT

        return Directive.RELOAD

    # ---- host queries ----

    def _display_index(self, index: int) -> int:
        if isinstance(self._state, AwaitingCustomCommand):
            return self._state.target_index
        return index

    @property
    def entry_count(self) -> int:
        if isinstance(self._state, AwaitingCustomCommand):
            return 1
        return len(self._entries)

    def display_value(self, index: int) -> str:
        entry = self._entries[self._display_index(index)]
        if entry.kind == EntryKind.UP:
            return UP_NAME
        if entry.kind == EntryKind.DIRECTORY:
            return self.options.directory_format.replace("%s", entry.name)
        return self.options.file_format.replace("%s", entry.name)

    def icon(self, index: int, size: int) -> Image.Image | None:
        if not self.options.show_icons:
            return None
        if self._icon_resolver is None:
            self._icon_resolver = build_icon_resolver(self.options)
        entry = self._entries[self._display_index(index)]
        return self._icon_resolver.get_icon(entry, size)

    def status_message(self) -> str | None:
        if isinstance(self._state, AwaitingCustomCommand):
            target = self._entries[self._state.target_index]
            return OPEN_CUSTOM_MESSAGE_FORMAT.replace("%s", target.name)
        if not self.options.show_status:
            return None
        symbol = self.options.hidden_symbol if self._show_hidden else self.options.no_hidden_symbol
        return symbol + self.options.path_sep.join(str(self._current_path).split(os.sep))

    def matches(self, index: int, query: str) -> bool:
        """Return whether row ``index`` passes the prompt filter ``query``."""
        if isinstance(self._state, AwaitingCustomCommand):
            return True
        return matches_query(self._entries[index].name, query)


__all__ = [
    "OPEN_CUSTOM_MESSAGE_FORMAT",
    "build_icon_resolver",
    "FileBrowserSession",
]
