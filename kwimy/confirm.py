"""Yes/No confirmation screen and the layout shared by the step screens.

Every step screen shows the logo, a step title, a boxed help area, a body
and a footer. Most also show the install summary panel on the right.
"""

from __future__ import annotations

from typing import Any, Sequence

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
from .model import KWIMY_ART, ConfirmAction, InstallSummary
from .terminal import KeyCode, KeyEvent, run_screen
from .widgets import Color, Constraint, Direction, Frame, Line, Rect, Span, Style, split

OPTIONS = ("Yes", "No")

_QUICK_ANSWERS = {"1": ConfirmAction.YES, "2": ConfirmAction.NO}

_CONTROLS = (
    Line(
        [
            Span("󰁞/󰁆", KEY_STYLE),
            Span(" to move, "),
            Span("Enter", KEY_STYLE),
            Span(" to select, "),
            Span("1/2", KEY_STYLE),
            Span(" quick select"),
        ]
    ),
    Line([Span("Esc", KEY_STYLE), Span(" to go back")]),
)

_SECTION_PERCENTAGES = {
    (True, True): (45, 25, 30),
    (True, False): (60, 40),
    (False, True): (60, 40),
    (False, False): (100,),
}


def move_cursor(cursor: int, key: KeyEvent, count: int) -> int:
    """The cursor after an Up or Down key in a list of ``count`` entries."""
    if key.code is KeyCode.UP:
        return max(cursor - 1, 0)
    if key.code is KeyCode.DOWN and cursor + 1 < count:
        return cursor + 1
    return cursor


def draw_step_header(
    frame: Frame,
    area: Rect,
    title: str,
    box_title: str,
    box_lines: Sequence[Line],
    *,
    box_height: int = 5,
    body_min: int = 6,
    footer_height: int = 1,
    padded: bool = True,
) -> Sequence[Rect]:
    """Lay out a step screen and draw its logo, title and help box.

    Returns the six rows: logo, title, spacer, help box, body and footer.
    """
    heights = (len(KWIMY_ART), 1, 1, box_height)
    rows = split(
        area,
        [
            *map(Constraint.length, heights),
            Constraint.min(body_min),
            Constraint.length(footer_height),
        ],
        Direction.VERTICAL,
    )
    frame.render_paragraph(rows[0], art_lines())
    frame.render_paragraph(rows[1], [step_title(title)])
    frame.render_paragraph(
        rows[3], box_lines, block=titled_block(box_title, padded=padded), wrap=True
    )
    return rows


def draw_step_with_summary(
    frame: Frame,
    summary: InstallSummary,
    title: str,
    box_title: str,
    box_lines: Sequence[Line],
    **layout: Any,
) -> Sequence[Rect]:
    """Draw a step header on the left and the install summary on the right."""
    main_area, summary_area = split_main_and_summary(frame.area)
    rows = draw_step_header(frame, main_area, title, box_title, box_lines, **layout)
    draw_install_summary(
        aligned_summary_area(summary_area, main_area, rows[3]), frame, summary
    )
    return rows


def _as_lines(lines: Sequence[Line | str]) -> tuple[Line, ...]:
    return tuple(line if isinstance(line, Line) else Line(line) for line in lines)


class ConfirmScreen:
    """A titled Yes/No prompt with optional warning and info boxes."""

    def __init__(
        self,
        title: str,
        warning_lines: Sequence[Line | str] = (),
        info_lines: Sequence[Line | str] = (),
        summary: InstallSummary | None = None,
    ) -> None:
        self.title = title
        self.warning_lines = _as_lines(warning_lines)
        self.info_lines = _as_lines(info_lines)
        self.summary = summary if summary is not None else InstallSummary()
        self.cursor = 0

    def handle_key(self, key: KeyEvent) -> ConfirmAction | None:
        """Apply a key press; return the chosen action once the user decides."""
        if key.code is KeyCode.ENTER:
            return ConfirmAction.YES if self.cursor == 0 else ConfirmAction.NO
        if key.code is KeyCode.ESC:
            return ConfirmAction.BACK
        if key.code is KeyCode.CHAR and key.char in _QUICK_ANSWERS:
            return _QUICK_ANSWERS[key.char]
        if key.is_quit():
            return ConfirmAction.QUIT
        self.cursor = move_cursor(self.cursor, key, len(OPTIONS))
        return None

    def draw(self, frame: Frame) -> None:
        rows = draw_step_with_summary(
            frame, self.summary, self.title, "Controls", _CONTROLS, body_min=7
        )
        percentages = _SECTION_PERCENTAGES[
            (bool(self.warning_lines), bool(self.info_lines))
        ]
        sections = iter(
            split(
                rows[4],
                [Constraint.percentage(p) for p in percentages],
                Direction.VERTICAL,
            )
        )
        for lines, heading in ((self.warning_lines, "Warning"), (self.info_lines, "Info")):
            if lines:
                frame.render_paragraph(
                    next(sections), lines, block=titled_block(heading), wrap=True
                )

        items = [
            Line([Span(f"{number:>2}) "), Span(label)])
            for number, label in enumerate(OPTIONS, start=1)
        ]
        frame.render_list(
            next(sections),
            items,
            block=titled_block("Confirm", Style(fg=Color.GREEN, bold=True)),
            selected=min(self.cursor, len(OPTIONS) - 1),
            highlight=HIGHLIGHT_STYLE,
        )


def run_confirm_selector(
    terminal: Any,
    title: str,
    warning_lines: Sequence[Line | str],
    info_lines: Sequence[Line | str],
    summary: InstallSummary,
) -> ConfirmAction:
    """Show the confirmation screen until the user answers."""
    return run_screen(terminal, ConfirmScreen(title, warning_lines, info_lines, summary))