"""NVIDIA driver variant selection screen."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .common import (
    HIGHLIGHT_STYLE,
    KEY_STYLE,
    aligned_summary_area,
    art_lines,
    draw_install_summary,
    split_main_and_summary,
    step_title,
    titled_block,
)
from .model import KWIMY_ART, InstallSummary, SelectionAction
from .terminal import KeyCode, KeyEvent, run_screen
from .widgets import Color, Constraint, Direction, Frame, Line, Span, Style, split


class NvidiaVariant(Enum):
    OPEN = "open"
    PROPRIETARY = "proprietary"
    NOUVEAU = "nouveau"


OPTIONS = (
    ("Open kernel module (Turing+)", NvidiaVariant.OPEN),
    ("Proprietary driver", NvidiaVariant.PROPRIETARY),
    ("Open-source nouveau", NvidiaVariant.NOUVEAU),
)

_CONTROLS = (
    Line(
        [
            Span("󰁞/󰁆", KEY_STYLE),
            Span(" to move, "),
            Span("Enter", KEY_STYLE),
            Span(" to select."),
        ]
    ),
    Line(
        [
            Span("Esc", KEY_STYLE),
            Span(" to go back, "),
            Span("S", KEY_STYLE),
            Span(" to skip."),
        ]
    ),
)

_BULLET = Style(fg=Color.YELLOW, bold=True)

_INFO = (
    Line(
        [
            Span("- ", _BULLET),
            Span("Open module:", Style(fg=Color.MAGENTA, bold=True)),
            Span(" Open-source kernel driver for modern GPUs (Turing and newer)"),
        ]
    ),
    Line(
        [
            Span("- ", _BULLET),
            Span("Proprietary:", Style(fg=Color.BLUE, bold=True)),
            Span(
                " Fully proprietary driver. Best compatibility and performance. "
                "Support for gaming, CUDA"
            ),
        ]
    ),
    Line(
        [
            Span("- ", _BULLET),
            Span("Nouveau:", Style(fg=Color.GREEN, bold=True)),
            Span(" Community developed open-source driver. Limited features"),
        ]
    ),
)


class NvidiaScreen:
    """Lets the user choose which NVIDIA driver to install, or skip."""

    def __init__(self, summary: InstallSummary | None = None) -> None:
        self.summary = summary if summary is not None else InstallSummary()
        self.cursor = 0

    def handle_key(self, key: KeyEvent) -> SelectionAction | None:
        """Apply a key press; submits the chosen ``NvidiaVariant``."""
        if key.code is KeyCode.UP:
            if self.cursor > 0:
                self.cursor -= 1
        elif key.code is KeyCode.DOWN:
            if self.cursor + 1 < len(OPTIONS):
                self.cursor += 1
        elif key.code is KeyCode.ENTER:
            return SelectionAction.submit(OPTIONS[self.cursor][1])
        elif key.code is KeyCode.ESC:
            return SelectionAction.back()
        elif key.code is KeyCode.CHAR and key.char in ("s", "S"):
            return SelectionAction.skip()
        elif key.is_quit():
            return SelectionAction.quit()
        return None

    def draw(self, frame: Frame) -> None:
        main_area, summary_area = split_main_and_summary(frame.area)
        layout = split(
            main_area,
            [
                Constraint.length(len(KWIMY_ART)),
                Constraint.length(1),
                Constraint.length(1),
                Constraint.length(5),
                Constraint.min(6),
                Constraint.length(1),
            ],
            Direction.VERTICAL,
        )
        frame.render_paragraph(layout[0], art_lines())
        frame.render_paragraph(layout[1], [step_title("Choose NVIDIA Driver")])
        frame.render_paragraph(
            layout[3], _CONTROLS, block=titled_block("Controls"), wrap=True
        )

        list_area, info_area = split(
            layout[4], [Constraint.min(4), Constraint.length(6)], Direction.VERTICAL
        )
        items = [
            Line(f"{number:>2}) {label}")
            for number, (label, _) in enumerate(OPTIONS, start=1)
        ]
        frame.render_list(
            list_area,
            items,
            block=titled_block("NVIDIA options"),
            selected=min(self.cursor, len(OPTIONS) - 1),
            highlight=HIGHLIGHT_STYLE,
        )
        frame.render_paragraph(info_area, _INFO, block=titled_block("Info"), wrap=True)

        frame.render_paragraph(
            layout[5],
            [Line(Span("Choose the driver variant you prefer", Style(fg=Color.WHITE)))],
        )

        draw_install_summary(
            aligned_summary_area(summary_area, main_area, layout[3]), frame, self.summary
        )


def run_nvidia_selector(terminal: Any, summary: InstallSummary) -> SelectionAction:
    """Show the driver choice until the user selects, skips, goes back or quits."""
    return run_screen(terminal, NvidiaScreen(summary))