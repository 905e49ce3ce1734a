"""Searchable list screens for choosing a keymap or a timezone."""

from __future__ import annotations

from typing import Any, Sequence

from .common import (
    BORDER_STYLE,
    HIGHLIGHT_STYLE,
    KEY_STYLE,
    aligned_summary_area,
    art_lines,
    draw_install_summary,
    filter_items,
    split_main_and_summary,
    step_title,
)
from .common import titled_block
from .model import KWIMY_ART, InstallSummary, SelectionAction
from .terminal import KeyCode, KeyEvent, run_screen
from .widgets import (
    Block,
    Color,
    Constraint,
    Direction,
    Frame,
    Line,
    Rect,
    Span,
    Style,
    split,
)

PAGE_STEP = 15

_CONTROLS = (
    Line(
        [
            Span("󰁞/󰁆", KEY_STYLE),
            Span(" to move, "),
            Span("PgUp/PgDn", KEY_STYLE),
            Span(" to scroll, "),
            Span("Enter", KEY_STYLE),
            Span(" to select"),
        ]
    ),
    Line(
        [
            Span("Ctrl+U", KEY_STYLE),
            Span(" or "),
            Span("/", KEY_STYLE),
            Span(" clear search, "),
            Span("Esc", KEY_STYLE),
            Span(" go back"),
        ]
    ),
)


def _main_layout(main_area: Rect) -> list[Rect]:
    return split(
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


def visible_window(cursor: int, total: int, height: int) -> tuple[int, int]:
    """The ``(start, end)`` slice of a list of ``total`` rows shown in ``height`` rows.

    The cursor is kept near the middle of the window where possible.
    """
    window = max(height, 1)
    max_start = max(0, total - window)
    start = min(max(0, cursor - window // 2), max_start)
    end = min(start + window, total)
    return start, end


def _is_printable_ascii(ch: str) -> bool:
    return len(ch) == 1 and " " <= ch <= "~"


class SearchSelectScreen:
    """A long list of names narrowed down by typing a search query."""

    def __init__(
        self,
        title: str,
        list_label: str,
        items: Sequence[str],
        initial: int = 0,
        summary: InstallSummary | None = None,
    ) -> None:
        if not items:
            raise ValueError("there are no items to choose from")
        self.title = title
        self.list_label = list_label
        self.items = tuple(items)
        self.summary = summary if summary is not None else InstallSummary()
        self.query = ""
        self.filtered = filter_items(self.items, self.query)
        self.cursor = self.filtered.index(initial) if initial in self.filtered else 0

    def _refilter(self) -> None:
        self.filtered = filter_items(self.items, self.query)
        self.cursor = 0

    def handle_key(self, key: KeyEvent) -> SelectionAction | None:
        """Apply a key press; submits the index into the unfiltered items."""
        code = key.code
        if code is KeyCode.UP:
            if self.cursor > 0:
                self.cursor -= 1
        elif code is KeyCode.DOWN:
            if self.cursor + 1 < len(self.filtered):
                self.cursor += 1
        elif code is KeyCode.PAGE_UP:
            self.cursor = max(0, self.cursor - PAGE_STEP)
        elif code is KeyCode.PAGE_DOWN:
            if self.filtered:
                self.cursor = min(self.cursor + PAGE_STEP, len(self.filtered) - 1)
        elif code is KeyCode.HOME:
            self.cursor = 0
        elif code is KeyCode.END:
            if self.filtered:
                self.cursor = len(self.filtered) - 1
        elif code is KeyCode.ENTER:
            if self.cursor < len(self.filtered):
                return SelectionAction.submit(self.filtered[self.cursor])
        elif code is KeyCode.ESC:
            return SelectionAction.back()
        elif code is KeyCode.BACKSPACE:
            self.query = self.query[:-1]
            self._refilter()
        elif code is KeyCode.CHAR:
            if key.is_quit():
                return SelectionAction.quit()
            if key.char == "/" or (key.char == "u" and key.ctrl):
                self.query = ""
                self._refilter()
            elif _is_printable_ascii(key.char):
                self.query += key.char
                self._refilter()
        return None

    def draw(self, frame: Frame) -> None:
        main_area, summary_area = split_main_and_summary(frame.area)
        layout = _main_layout(main_area)
        frame.render_paragraph(layout[0], art_lines())
        frame.render_paragraph(layout[1], [step_title(self.title)])
        frame.render_paragraph(
            layout[3], _CONTROLS, block=titled_block("Controls"), wrap=True
        )

        list_height = max(0, layout[4].height - 2)
        start, end = visible_window(self.cursor, len(self.filtered), list_height)
        rows = [
            Line([Span(f"{number:>4}) "), Span(self.items[idx])])
            for number, idx in enumerate(self.filtered[start:end], start=start + 1)
        ]
        heading = (
            f"{self.list_label} ({len(self.filtered)} / {len(self.items)} total)"
        )
        block = Block(
            title=Line(Span(heading, Style(fg=Color.BLUE, bold=True))),
            border_style=BORDER_STYLE,
        )
        frame.render_list(
            layout[4],
            rows,
            block=block,
            selected=max(0, self.cursor - start) if self.filtered else None,
            highlight=HIGHLIGHT_STYLE,
        )

        frame.render_paragraph(
            layout[5], [Line(Span(f"Search: {self.query}", Style(fg=Color.WHITE)))]
        )

        draw_install_summary(
            aligned_summary_area(summary_area, main_area, layout[3]), frame, self.summary
        )


def run_keymap_selector(
    terminal: Any, keymaps: Sequence[str], initial: int, summary: InstallSummary
) -> SelectionAction:
    """Let the user pick a keyboard layout; quits when there are none."""
    if not keymaps:
        return SelectionAction.quit()
    screen = SearchSelectScreen("Select keyboard layout", "Keymaps", keymaps, initial, summary)
    return run_screen(terminal, screen)


def run_timezone_selector(
    terminal: Any, zones: Sequence[str], initial: int, summary: InstallSummary
) -> SelectionAction:
    """Let the user pick a timezone; quits when there are none."""
    if not zones:
        return SelectionAction.quit()
    screen = SearchSelectScreen("Select timezone", "Timezones", zones, initial, summary)
    return run_screen(terminal, screen)


def draw_timezone_loading(frame: Frame, summary: InstallSummary) -> None:
    """Draw the screen shown while the timezone is being detected."""
    main_area, summary_area = split_main_and_summary(frame.area)
    layout = _main_layout(main_area)
    frame.render_paragraph(layout[0], art_lines())
    frame.render_paragraph(
        layout[1], [Line(Span("Select timezone", Style(fg=Color.LIGHT_RED, bold=True)))]
    )

    status = (
        Line(
            [
                Span("Loading", Style(fg=Color.YELLOW)),
                Span(" timezone from ipapi.co..."),
            ]
        ),
        Line("This may take a few seconds."),
    )
    frame.render_paragraph(
        layout[3],
        status,
        block=Block(
            title=Line(Span("Status", Style(fg=Color.WHITE, bold=True))),
            border_style=BORDER_STYLE,
        ),
        wrap=True,
    )
    frame.render_paragraph(
        layout[4],
        [Line(Span("Loading...", Style(fg=Color.BLUE, bold=True)))],
        block=Block(border_style=BORDER_STYLE),
    )

    draw_install_summary(
        aligned_summary_area(summary_area, main_area, layout[3]), frame, summary
    )


def render_timezone_loading(terminal: Any, summary: InstallSummary) -> None:
    """Draw the timezone loading screen once."""
    terminal.draw(lambda frame: draw_timezone_loading(frame, summary))