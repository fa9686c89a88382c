"""Interaction layer: session state machine, events, directives and open-file action."""

from __future__ import annotations

from .controller import OPEN_CUSTOM_MESSAGE_FORMAT, FileBrowserSession, build_icon_resolver
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
from .opener import FileOpener, build_command_line
from .options import BrowserOptions

__all__ = [
    "OPEN_CUSTOM_MESSAGE_FORMAT",
    "FileBrowserSession",
    "build_icon_resolver",
    "AwaitingCustomCommand",
    "Cancel",
    "Confirm",
    "CustomInput",
    "Directive",
    "Event",
    "Idle",
    "InteractionState",
    "NavigateNext",
    "NavigatePrevious",
    "Select",
    "ShiftSelect",
    "matches_query",
    "FileOpener",
    "build_command_line",
    "BrowserOptions",
]
