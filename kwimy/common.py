"""Pieces shared by the installer screens: art, titles, summary and keybinds."""

from __future__ import annotations

import re
import string
from typing import Sequence

from .model import KWIMY_ART, InstallSummary
from .widgets import (
    PURE_WHITE,
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

KEYBINDS = (
    "SuperKey + Enter opens a terminal",
    "SuperKey + Q close terminal window",
)
KEYBINDS_KEYS = ("SuperKey", "Enter", "Q")

BORDER_STYLE = Style(fg=Color.BLACK)
TITLE_STYLE = Style(fg=PURE_WHITE, bold=True)
HIGHLIGHT_STYLE = Style(fg=Color.YELLOW, bold=True)
KEY_STYLE = Style(fg=Color.CYAN)

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_KEYBIND_PARTS = re.compile(r"[^ ]* |[^ ]+$")


def art_lines() -> list[Line]:
    """The banner art, one bold blue line per row."""
    style = Style(fg=Color.BLUE, bold=True)
    return [Line(Span(row, style)) for row in KWIMY_ART]


def step_title(title: str) -> Line:
    """A step heading of the form ``/- title -/``."""
    return Line(["/- ", Span(title, Style(fg=Color.RED, bold=True)), " -/"])


def titled_block(title: str, title_style: Style = TITLE_STYLE, padded: bool = True) -> Block:
    """A bordered box with a ``[ title ]`` heading."""
    heading = Line(
        [Span("[", BORDER_STYLE), Span(f" {title} ", title_style), Span("]", BORDER_STYLE)]
    )
    return Block(
        title=heading,
        border_style=BORDER_STYLE,
        padding=(1, 0, 1, 0) if padded else (0, 0, 0, 0),
    )


def summary_lines(summary: InstallSummary) -> list[Line]:
    """Lines of the summary panel, marking steps done, current or pending."""
    entries: list[tuple[str, str, str | None]] = [("Network", " ", summary.network)]
    if summary.include_drivers:
        entries.append(("Drivers", " ", summary.drivers))
    entries.extend(
        [
            ("Disk", " ", summary.disk),
            ("Keymap", " ", summary.keymap),
            ("Timezone", " ", summary.timezone),
            ("Hostname", " ", summary.hostname),
            ("Username", " ", summary.username),
            ("Encryption", " ", summary.encryption),
            ("Zram swap", " ", summary.zram_swap),
        ]
    )
    all_done = summary.current_index >= len(entries)
    lines = []
    for idx, (label, icon, value) in enumerate(entries):
        if all_done or idx < summary.current_index:
            spans = [
                Span("[OK]", Style(fg=Color.GREEN, bold=True)),
                Span(" "),
                Span(icon, Style(fg=Color.BLUE)),
                Span(" "),
                Span(f"{label}:", Style(fg=Color.WHITE, bold=True)),
            ]
            if value is not None:
                spans.append(Span(f" {value}", Style(fg=Color.BLUE)))
        else:
            if idx == summary.current_index:
                style = Style(fg=Color.YELLOW, bold=True)
            else:
                style = Style(fg=Color.WHITE)
            spans = [Span("[..]", style), Span(" ", style), Span(f"{icon} {label}:", style)]
        lines.append(Line(spans))
    return lines


def split_main_and_summary(area: Rect) -> tuple[Rect, Rect]:
    """Split an area into main content and a summary sidebar."""
    main, side = split(
        area, [Constraint.percentage(74), Constraint.percentage(26)], Direction.HORIZONTAL
    )
    return main, side


def aligned_summary_area(summary_area: Rect, main_area: Rect, anchor: Rect) -> Rect:
    """Move the summary panel down to line up with ``anchor`` in the main area."""
    offset = max(0, anchor.y - main_area.y)
    return Rect(
        summary_area.x,
        summary_area.y + offset,
        summary_area.width,
        max(0, summary_area.height - offset),
    )


def draw_install_summary(area: Rect, frame: Frame, summary: InstallSummary) -> None:
    """Render the summary panel with the keybinds box below it."""
    lines = summary_lines(summary)
    summary_rect, keybinds_rect, _ = split(
        area,
        [
            Constraint.length(len(lines) + 3),
            Constraint.length(keybinds_height()),
            Constraint.min(0),
        ],
        Direction.VERTICAL,
    )
    frame.render_paragraph(summary_rect, lines, block=titled_block("Summary"), wrap=True)
    draw_keybinds(keybinds_rect, frame)


def filter_items(items: Sequence[str], query: str) -> list[int]:
    """Indexes of items containing ``query``, ignoring ASCII case."""
    if not query:
        return list(range(len(items)))
    needle = query.translate(_ASCII_LOWER)
    return [idx for idx, item in enumerate(items) if needle in item.translate(_ASCII_LOWER)]


def styled_keybind_line(line: str) -> list[Span]:
    """Split a keybind hint into spans, colouring the key names."""
    spans = []
    for part in _KEYBIND_PARTS.findall(line):
        token = part[:-1] if part.endswith(" ") else part
        spans.append(Span(token, KEY_STYLE) if token in KEYBINDS_KEYS else Span(token))
        if part.endswith(" "):
            spans.append(Span(" "))
    return spans


def keybinds_lines() -> list[Line]:
    return [Line(styled_keybind_line(line)) for line in KEYBINDS]


def keybinds_height() -> int:
    return len(KEYBINDS) + 3


def draw_keybinds(area: Rect, frame: Frame) -> None:
    frame.render_paragraph(area, keybinds_lines(), block=titled_block("Keybinds"), wrap=True)