"""Data shared by the installer screens: summary state and user actions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

SPINNER_LEN = 4
SPINNER = ("|", "/", "-", "\\")
KWIMY_ART = (
    " _   _      _           _       ",
    "| \\ | | ___| |__  _   _| | __ _ ",
    "|  \\| |/ _ \\ '_ \\| | | | |/ _` |",
    "| |\\  |  __/ |_) | |_| | | (_| |",
    "|_| \\_|\\___|_.__/ \\__,_|_|\\__,_|",
    "",
)

# The number of steps shown in the summary view.
SUMMARY_STEP_COUNT = 8


@dataclass
class ReviewItem:
    """One label/value row on the final review screen."""

    label: str
    value: str


@dataclass
class InstallSummary:
    """The user's choices so far, shown in the summary panel."""

    current_index: int = 0
    network: str | None = None
    drivers: str | None = None
    disk: str | None = None
    keymap: str | None = None
    timezone: str | None = None
    hostname: str | None = None
    username: str | None = None
    encryption: str | None = None
    zram_swap: str | None = None
    include_drivers: bool = False


class ActionKind(Enum):
    SUBMIT = "submit"
    BACK = "back"
    SKIP = "skip"
    QUIT = "quit"


@dataclass(frozen=True)
class SelectionAction:
    """Outcome of a selection or input screen; only ``SUBMIT`` carries a value."""

    kind: ActionKind
    value: Any = None

    def __post_init__(self) -> None:
        if self.kind is ActionKind.SUBMIT and self.value is None:
            raise ValueError("a submit action needs a value")
        if self.kind is not ActionKind.SUBMIT and self.value is not None:
            raise ValueError(f"a {self.kind.value} action carries no value")

    @classmethod
    def submit(cls, value: Any) -> SelectionAction:
        return cls(ActionKind.SUBMIT, value)

    @classmethod
    def back(cls) -> SelectionAction:
        return cls(ActionKind.BACK)

    @classmethod
    def skip(cls) -> SelectionAction:
        return cls(ActionKind.SKIP)

    @classmethod
    def quit(cls) -> SelectionAction:
        return cls(ActionKind.QUIT)


class ReviewAction(Enum):
    CONFIRM = "confirm"
    BACK = "back"
    EDIT = "edit"
    QUIT = "quit"


class ConfirmAction(Enum):
    YES = "yes"
    NO = "no"
    BACK = "back"
    QUIT = "quit"


class NetworkAction(Enum):
    RETRY = "retry"
    QUIT = "quit"