"""Target disk selection screen."""

from __future__ import annotations

from typing import Any, Sequence

from .common import HIGHLIGHT_STYLE, KEY_STYLE, titled_block
from .confirm import draw_step_with_summary, move_cursor
from .model import InstallSummary, SelectionAction
from .terminal import KeyCode, KeyEvent, run_screen
from .widgets import Color, Frame, Line, Span, Style

_CONTROLS = (
    Line(
        [
            Span("󰁞/󰁆", KEY_STYLE),
            Span(" to move, "),
            Span("Enter", KEY_STYLE),
            Span(" to select, "),
            Span("Esc", KEY_STYLE),
            Span(" to go back."),
        ]
    ),
    Line(
        Span(
            "Warning: selecting the wrong disk will erase its data",
            Style(fg=Color.WHITE),
        )
    ),
)

_ICON_STYLE = Style(fg=Color.BLUE)


def _disk_label(disk: Any) -> str:
    """The display label of a disk: a string, or an object with a ``label``."""
    if isinstance(disk, str):
        return disk
    label = getattr(disk, "label", None)
    if callable(label):
        return str(label())
    return str(disk if label is None else label)


class DiskScreen:
    """A list of disks to install onto."""

    def __init__(
        self,
        labels: Sequence[str],
        initial: int = 0,
        summary: InstallSummary | None = None,
    ) -> None:
        if not labels:
            raise ValueError("there are no disks to choose from")
        self.labels = tuple(labels)
        self.summary = summary if summary is not None else InstallSummary()
        self.cursor = min(max(initial, 0), len(self.labels) - 1)

    def handle_key(self, key: KeyEvent) -> SelectionAction | None:
        """Apply a key press; return an action once the user decides."""
        if key.code is KeyCode.ENTER:
            return SelectionAction.submit(self.cursor)
        if key.code is KeyCode.ESC:
            return SelectionAction.back()
        if key.is_quit():
            return SelectionAction.quit()
        self.cursor = move_cursor(self.cursor, key, len(self.labels))
        return None

    def draw(self, frame: Frame) -> None:
        rows = draw_step_with_summary(
            frame, self.summary, "Select disk", "Controls", _CONTROLS, body_min=7
        )
        items = [
            Line([Span(f"{number:>2}) "), Span("󰋊  ", _ICON_STYLE), Span(label)])
            for number, label in enumerate(self.labels, start=1)
        ]
        frame.render_list(
            rows[4],
            items,
            block=titled_block("Disks", Style(fg=Color.GREEN, bold=True)),
            selected=self.cursor,
            highlight=HIGHLIGHT_STYLE,
        )


def run_disk_selector(
    terminal: Any,
    disks: Sequence[Any],
    initial: int,
    summary: InstallSummary,
) -> SelectionAction:
    """Let the user pick a disk; submits its index, or quits when there are none."""
    if not disks:
        return SelectionAction.quit()
    labels = [_disk_label(disk) for disk in disks]
    return run_screen(terminal, DiskScreen(labels, initial, summary))