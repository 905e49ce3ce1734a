"""Cell-based layout and widgets used to draw the installer screens."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum
from itertools import groupby
from typing import Iterable, Sequence


class Color(Enum):
    """Terminal colours: ANSI palette indexes or an RGB triple."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    LIGHT_RED = 9
    LIGHT_GREEN = 10
    LIGHT_BLUE = 12
    PURE_WHITE = (255, 255, 255)


PURE_WHITE = Color.PURE_WHITE


def _char_width(ch: str) -> int:
    if unicodedata.combining(ch) or ch == "\u200b":
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


@dataclass(frozen=True)
class Style:
    """Foreground, background and boldness of a piece of text."""

    fg: Color | None = None
    bg: Color | None = None
    bold: bool = False

    def patch(self, other: Style) -> Style:
        """Return this style with the set parts of ``other`` laid over it."""
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            bold=self.bold or other.bold,
        )


@dataclass(frozen=True)
class Span:
    """A run of text sharing one style."""

    content: str
    style: Style = Style()

    def width(self) -> int:
        return sum(_char_width(ch) for ch in self.content)


@dataclass(frozen=True)
class Line:
    """One line of styled text; accepts a string, a span or a sequence of them."""

    spans: tuple[Span, ...] = ()

    def __post_init__(self) -> None:
        spans = self.spans
        if isinstance(spans, (str, Span)):
            spans = (spans,)
        normalized = tuple(Span(s) if isinstance(s, str) else s for s in spans)
        object.__setattr__(self, "spans", normalized)

    def text(self) -> str:
        return "".join(span.content for span in self.spans)

    def width(self) -> int:
        return sum(span.width() for span in self.spans)


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def inner(self, left: int, right: int, top: int, bottom: int) -> Rect:
        """Shrink the rectangle by the given margins, never below zero size."""
        return Rect(
            self.x + left,
            self.y + top,
            max(0, self.width - left - right),
            max(0, self.height - top - bottom),
        )


class Direction(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class ConstraintKind(Enum):
    LENGTH = "length"
    PERCENTAGE = "percentage"
    MIN = "min"


@dataclass(frozen=True)
class Constraint:
    """Size rule for one slot of a layout split."""

    kind: ConstraintKind
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("constraint value must not be negative")
        if self.kind is ConstraintKind.PERCENTAGE and self.value > 100:
            raise ValueError("percentage must be at most 100")

    @classmethod
    def length(cls, value: int) -> Constraint:
        return cls(ConstraintKind.LENGTH, value)

    @classmethod
    def percentage(cls, value: int) -> Constraint:
        return cls(ConstraintKind.PERCENTAGE, value)

    @classmethod
    def min(cls, value: int) -> Constraint:
        return cls(ConstraintKind.MIN, value)


def split(area: Rect, constraints: Sequence[Constraint], direction: Direction) -> list[Rect]:
    """Divide ``area`` into consecutive slots following ``constraints``.

    Spare space goes to the first ``min`` slot, or to the last slot when there
    is none; missing space is taken from the end.
    """
    if not constraints:
        return []
    total = area.width if direction is Direction.HORIZONTAL else area.height
    sizes = [
        total * c.value // 100 if c.kind is ConstraintKind.PERCENTAGE else c.value
        for c in constraints
    ]
    excess = total - sum(sizes)
    if excess > 0:
        target = next(
            (i for i, c in enumerate(constraints) if c.kind is ConstraintKind.MIN),
            len(sizes) - 1,
        )
        sizes[target] += excess
    elif excess < 0:
        missing = -excess
        for i in reversed(range(len(sizes))):
            taken = min(sizes[i], missing)
            sizes[i] -= taken
            missing -= taken
            if not missing:
                break

    rects = []
    offset = 0
    for size in sizes:
        if direction is Direction.HORIZONTAL:
            rects.append(Rect(area.x + offset, area.y, size, area.height))
        else:
            rects.append(Rect(area.x, area.y + offset, area.width, size))
        offset += size
    return rects


def _merge_cells(cells: Iterable[tuple[str, Style]]) -> Line:
    return Line(
        tuple(
            Span("".join(ch for ch, _ in group), style)
            for style, group in groupby(cells, key=lambda cell: cell[1])
        )
    )


def wrap_line(line: Line, width: int) -> list[Line]:
    """Word-wrap a line to ``width`` cells, keeping styles and inner spacing."""
    if width <= 0:
        return []
    cells = [(ch, span.style) for span in line.spans for ch in span.content]
    if not cells:
        return [Line()]

    rows: list[list[tuple[str, Style]]] = []
    row: list[tuple[str, Style]] = []
    row_width = 0
    for is_space, group in groupby(cells, key=lambda cell: cell[0].isspace()):
        token = list(group)
        token_width = sum(_char_width(ch) for ch, _ in token)
        if row_width + token_width <= width:
            row.extend(token)
            row_width += token_width
            continue
        if is_space:
            for cell in token:
                cell_width = _char_width(cell[0])
                if row_width + cell_width > width:
                    break
                row.append(cell)
                row_width += cell_width
            rows.append(row)
            row, row_width = [], 0
            continue
        if row:
            rows.append(row)
            row, row_width = [], 0
        for cell in token:
            cell_width = _char_width(cell[0])
            if row and row_width + cell_width > width:
                rows.append(row)
                row, row_width = [], 0
            row.append(cell)
            row_width += cell_width
    if row or not rows:
        rows.append(row)
    return [_merge_cells(r) for r in rows]


@dataclass(frozen=True)
class Block:
    """Border, title and padding drawn around a widget.

    ``padding`` is ``(left, right, top, bottom)``.
    """

    title: Line | None = None
    borders: bool = True
    border_style: Style = Style()
    padding: tuple[int, int, int, int] = (0, 0, 0, 0)


@dataclass(slots=True)
class _Cell:
    symbol: str
    style: Style


class Frame:
    """A grid of styled cells that widgets render into."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("frame size must not be negative")
        self.area = Rect(0, 0, width, height)
        self.cells = [[_Cell(" ", Style()) for _ in range(width)] for _ in range(height)]

    def _clip(self, area: Rect) -> Rect:
        x0 = max(area.x, 0)
        y0 = max(area.y, 0)
        x1 = min(area.right, self.area.width)
        y1 = min(area.bottom, self.area.height)
        return Rect(x0, y0, max(0, x1 - x0), max(0, y1 - y0))

    def _write_line(self, x: int, y: int, line: Line, max_width: int) -> None:
        if not 0 <= y < self.area.height:
            return
        used = 0
        previous = None
        for span in line.spans:
            for ch in span.content:
                char_width = _char_width(ch)
                if char_width == 0:
                    if previous is not None:
                        previous.symbol += ch
                    continue
                if used + char_width > max_width:
                    return
                cx = x + used
                if 0 <= cx and cx + char_width <= self.area.width:
                    cell = self.cells[y][cx]
                    cell.symbol = ch
                    cell.style = span.style
                    previous = cell
                    if char_width == 2:
                        self.cells[y][cx + 1].symbol = ""
                        self.cells[y][cx + 1].style = span.style
                used += char_width

    def _draw_border(self, area: Rect, style: Style) -> None:
        if area.width < 2 or area.height < 2:
            return
        top, bottom = area.y, area.bottom - 1
        left, right = area.x, area.right - 1
        for x in range(left + 1, right):
            self.cells[top][x] = _Cell("─", style)
            self.cells[bottom][x] = _Cell("─", style)
        for y in range(top + 1, bottom):
            self.cells[y][left] = _Cell("│", style)
            self.cells[y][right] = _Cell("│", style)
        self.cells[top][left] = _Cell("┌", style)
        self.cells[top][right] = _Cell("┐", style)
        self.cells[bottom][left] = _Cell("└", style)
        self.cells[bottom][right] = _Cell("┘", style)

    def _render_block(self, area: Rect, block: Block | None) -> Rect:
        if block is None:
            return area
        if block.borders:
            self._draw_border(area, block.border_style)
            if block.title is not None and area.width > 2:
                self._write_line(area.x + 1, area.y, block.title, area.width - 2)
            inner = area.inner(1, 1, 1, 1)
        elif block.title is not None:
            self._write_line(area.x, area.y, block.title, area.width)
            inner = area.inner(0, 0, 1, 0)
        else:
            inner = area
        return inner.inner(*block.padding)

    def clear(self, area: Rect) -> None:
        """Reset every cell of ``area`` to a blank, unstyled cell."""
        area = self._clip(area)
        for y in range(area.y, area.bottom):
            for x in range(area.x, area.right):
                self.cells[y][x] = _Cell(" ", Style())

    def render_paragraph(
        self,
        area: Rect,
        lines: Sequence[Line],
        block: Block | None = None,
        wrap: bool = False,
        scroll: int = 0,
    ) -> None:
        """Draw lines of text, optionally wrapped and scrolled down by ``scroll`` rows."""
        inner = self._clip(self._render_block(self._clip(area), block))
        if inner.width == 0 or inner.height == 0:
            return
        rows: list[Line] = []
        for line in lines:
            rows.extend(wrap_line(line, inner.width) if wrap else [line])
        for offset, line in enumerate(rows[scroll : scroll + inner.height]):
            self._write_line(inner.x, inner.y + offset, line, inner.width)

    def render_list(
        self,
        area: Rect,
        lines: Sequence[Line],
        block: Block | None = None,
        selected: int | None = None,
        highlight: Style | None = None,
    ) -> None:
        """Draw one item per row, keeping the selected item in view and highlighted."""
        inner = self._clip(self._render_block(self._clip(area), block))
        if inner.width == 0 or inner.height == 0:
            return
        start = 0
        if selected is not None and selected >= inner.height:
            start = selected - inner.height + 1
        for offset, line in enumerate(lines[start : start + inner.height]):
            y = inner.y + offset
            self._write_line(inner.x, y, line, inner.width)
            if highlight is not None and start + offset == selected:
                for cell in self.cells[y][inner.x : inner.right]:
                    cell.style = cell.style.patch(highlight)

    def render_gauge(self, area: Rect, ratio: float, style: Style = Style()) -> None:
        """Draw a horizontal progress bar filled to ``ratio`` with a percentage label."""
        if not 0.0 <= ratio <= 1.0:
            raise ValueError("gauge ratio must be between 0 and 1")
        area = self._clip(area)
        if area.width == 0 or area.height == 0:
            return
        filled = int(area.width * ratio)
        for y in range(area.y, area.bottom):
            for x in range(area.x, area.right):
                symbol = "█" if x - area.x < filled else " "
                self.cells[y][x] = _Cell(symbol, style)
        label = f"{round(ratio * 100)}%"
        mid = area.y + area.height // 2
        start = area.x + max(0, (area.width - len(label)) // 2)
        inverted = Style(fg=style.bg, bg=style.fg, bold=style.bold)
        for offset, ch in enumerate(label):
            x = start + offset
            if x >= area.right:
                break
            cell_style = inverted if x - area.x < filled else style
            self.cells[mid][x] = _Cell(ch, cell_style)

    def row_text(self, y: int) -> str:
        """The plain text of row ``y``."""
        return "".join(cell.symbol for cell in self.cells[y])