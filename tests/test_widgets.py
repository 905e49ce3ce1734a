import pytest

from kwimy.widgets import (
    PURE_WHITE,
    Block,
    Color,
    Constraint,
    ConstraintKind,
    Direction,
    Frame,
    Line,
    Rect,
    Span,
    Style,
    split,
    wrap_line,
)


def test_pure_white_renders_as_rgb():
    frame = Frame(5, 1)
    white = Style(fg=PURE_WHITE)
    frame.render_paragraph(Rect(0, 0, 5, 1), [Line(Span("w", white))])
    assert frame.row_text(0).startswith("w")
    assert frame.cells[0][0].style == white
    assert frame.cells[0][0].style.fg.value == (255, 255, 255)
    assert Color.PURE_WHITE is PURE_WHITE


def test_span_width_counts_wide_characters():
    assert Span("abc").width() == len("abc")
    assert Span("中").width() == 2


def test_line_normalizes_input():
    bold = Style(fg=Color.RED, bold=True)
    line = Line(["/- ", Span("Title", bold), " -/"])
    assert line.text() == "/- Title -/"
    assert line.spans[1].style == bold
    assert Line("plain").spans == (Span("plain"),)
    assert Line(Span("x")).width() == 1


def test_rect_inner_saturates():
    rect = Rect(2, 3, 10, 6)
    inner = rect.inner(1, 1, 1, 1)
    assert (inner.x, inner.y) == (rect.x + 1, rect.y + 1)
    assert inner.width == rect.width - 2
    assert Rect(0, 0, 1, 1).inner(1, 1, 1, 1).width == 0


def test_constraint_validation():
    with pytest.raises(ValueError):
        Constraint.length(-1)
    with pytest.raises(ValueError):
        Constraint.percentage(101)
    assert Constraint.min(4).kind is ConstraintKind.MIN


def test_split_percentages_of_hundred():
    parts = split(
        Rect(0, 0, 100, 10),
        [Constraint.percentage(74), Constraint.percentage(26)],
        Direction.HORIZONTAL,
    )
    assert [p.width for p in parts] == [74, 26]
    assert parts[1].x == parts[0].right


@pytest.mark.parametrize("height", [0, 5, 20, 40, 80])
def test_split_sizes_cover_area(height):
    area = Rect(3, 4, 50, height)
    parts = split(
        area,
        [Constraint.length(6), Constraint.length(1), Constraint.min(6), Constraint.length(1)],
        Direction.VERTICAL,
    )
    assert sum(p.height for p in parts) == height
    for first, second in zip(parts, parts[1:]):
        assert second.y == first.bottom
    assert all(p.width == area.width for p in parts)


def test_split_min_takes_remainder():
    parts = split(
        Rect(0, 0, 10, 30),
        [Constraint.length(5), Constraint.min(2), Constraint.length(5)],
        Direction.VERTICAL,
    )
    assert parts[0].height == 5
    assert parts[2].height == 5
    assert parts[1].height == 30 - 10


def test_wrap_line_breaks_at_words():
    wrapped = wrap_line(Line("hello world"), 5)
    assert [line.text() for line in wrapped] == ["hello", "world"]


def test_wrap_line_hard_breaks_long_words_and_respects_width():
    wrapped = wrap_line(Line("abcdefgh"), 3)
    assert "".join(line.text() for line in wrapped) == "abcdefgh"
    assert all(line.width() <= 3 for line in wrapped)


def test_wrap_line_keeps_styles():
    red = Style(fg=Color.RED)
    wrapped = wrap_line(Line([Span("aa", red), Span(" bb")]), 2)
    assert wrapped[0].spans[0].style == red
    assert wrapped[-1].text() == "bb"


def test_wrap_line_empty_and_zero_width():
    assert wrap_line(Line(), 10) == [Line()]
    assert wrap_line(Line("abc"), 0) == []


def test_paragraph_with_block_draws_border_and_title():
    frame = Frame(20, 5)
    block = Block(title=Line("[ T ]"))
    frame.render_paragraph(Rect(0, 0, 20, 5), [Line("inside")], block=block)
    assert frame.row_text(0).startswith("┌[ T ]")
    assert frame.row_text(1)[1:7] == "inside"
    assert frame.row_text(4)[0] == "└"


def test_paragraph_scroll_and_padding():
    frame = Frame(10, 4)
    frame.render_paragraph(
        Rect(0, 0, 10, 4),
        [Line("one"), Line("two"), Line("three")],
        block=Block(borders=False, padding=(1, 0, 1, 0)),
        scroll=1,
    )
    assert frame.row_text(0).strip() == ""
    assert frame.row_text(1).startswith(" two")
    assert frame.row_text(2).startswith(" three")


def test_list_highlights_selected_row():
    frame = Frame(10, 3)
    highlight = Style(fg=Color.YELLOW, bold=True)
    frame.render_list(Rect(0, 0, 10, 3), [Line("a"), Line("b"), Line("c")], selected=1, highlight=highlight)
    assert frame.cells[1][0].style == highlight
    assert frame.cells[0][0].style == Style()


def test_list_scrolls_to_keep_selection_visible():
    frame = Frame(5, 2)
    items = [Line(str(i)) for i in range(5)]
    frame.render_list(Rect(0, 0, 5, 2), items, selected=4)
    assert frame.row_text(1).startswith("4")
    assert frame.row_text(0).startswith("3")


def test_gauge_rejects_bad_ratio():
    frame = Frame(10, 1)
    with pytest.raises(ValueError):
        frame.render_gauge(Rect(0, 0, 10, 1), 1.5)


def test_gauge_fills_proportionally():
    frame = Frame(10, 1)
    frame.render_gauge(Rect(0, 0, 10, 1), 1.0)
    assert "%" in frame.row_text(0)
    assert frame.row_text(0).startswith("█")


def test_clear_resets_cells():
    frame = Frame(6, 2)
    frame.render_paragraph(Rect(0, 0, 6, 2), [Line(Span("xx", Style(bold=True)))])
    frame.clear(Rect(0, 0, 6, 2))
    assert frame.row_text(0) == " " * 6
    assert frame.cells[0][0].style == Style()