"""Host event vocabulary, dialog directives and interaction states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Directive(Enum):
    """How the host should refresh or close after an event."""

    RESET = "reset"
    RELOAD = "reload"
    NEXT = "next"
    PREVIOUS = "previous"
    EXIT = "exit"


@dataclass(frozen=True)
class Select:
    """Return on a listing row. ``text`` is the prompt content at the time."""

    index: int
    text: str = ""


@dataclass(frozen=True)
class ShiftSelect:
    """Open-with request on a listing row."""

    index: int
    text: str = ""


@dataclass(frozen=True)
class CustomInput:
    """Prompt text submitted without picking a row."""

    text: str


@dataclass(frozen=True)
class Confirm:
    """Prompt text submitted while the custom-command prompt is open."""

    text: str


@dataclass(frozen=True)
class NavigateNext:
    pass


@dataclass(frozen=True)
class NavigatePrevious:
    pass


@dataclass(frozen=True)
class Cancel:
    pass


Event = Select | ShiftSelect | CustomInput | Confirm | NavigateNext | NavigatePrevious | Cancel


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class AwaitingCustomCommand:
    """Custom-command prompt open for ``entries[target_index]``."""

    target_index: int


InteractionState = Idle | AwaitingCustomCommand


__all__ = [
    "Directive",
    "Select",
    "ShiftSelect",
    "CustomInput",
    "Confirm",
    "NavigateNext",
    "NavigatePrevious",
    "Cancel",
    "Event",
    "Idle",
    "AwaitingCustomCommand",
    "InteractionState",
]
