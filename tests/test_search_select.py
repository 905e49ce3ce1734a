import pytest

from kwimy.model import ActionKind, InstallSummary, SelectionAction
from kwimy.search_select import (
    SearchSelectScreen,
    draw_timezone_loading,
    render_timezone_loading,
    run_keymap_selector,
    run_timezone_selector,
    visible_window,
)
from kwimy.terminal import KeyCode, KeyEvent
from kwimy.widgets import Frame

ZONES = ["Europe/Berlin", "Europe/Paris", "America/New_York", "Asia/Tokyo"]


def char(ch, ctrl=False):
    return KeyEvent(KeyCode.CHAR, ch, ctrl=ctrl)


class FakeTerminal:
    def __init__(self, keys=()):
        self.keys = list(keys)
        self.frames = []

    def draw(self, render):
        frame = Frame(120, 40)
        render(frame)
        self.frames.append(frame)
        return frame

    def poll_key(self, timeout):
        return self.keys.pop(0) if self.keys else None


def frame_text(frame):
    return "\n".join(frame.row_text(y) for y in range(frame.area.height))


@pytest.mark.parametrize("total", [0, 1, 5, 30])
@pytest.mark.parametrize("height", [0, 1, 4, 10])
def test_visible_window_keeps_cursor_in_view(total, height):
    for cursor in range(max(total, 1)):
        start, end = visible_window(cursor, total, height)
        assert 0 <= start <= end <= total
        assert end - start == min(max(height, 1), total)
        if total:
            assert start <= cursor < end


def test_visible_window_start_at_top():
    assert visible_window(0, 10, 4) == (0, 4)


def test_empty_items_rejected():
    with pytest.raises(ValueError):
        SearchSelectScreen("Select timezone", "Timezones", [], 0)


def test_initial_cursor():
    assert SearchSelectScreen("t", "L", ZONES, 2).cursor == 2
    assert SearchSelectScreen("t", "L", ZONES, 99).cursor == 0


def test_typing_filters_and_submits_original_index():
    screen = SearchSelectScreen("t", "L", ZONES, 0)
    for ch in "TOKYO":
        assert screen.handle_key(char(ch)) is None
    assert screen.query == "TOKYO"
    assert screen.filtered == [3]
    assert screen.handle_key(KeyEvent(KeyCode.ENTER)) == SelectionAction.submit(3)


def test_enter_without_matches_does_nothing():
    screen = SearchSelectScreen("t", "L", ZONES, 0)
    for ch in "zzz":
        screen.handle_key(char(ch))
    assert screen.filtered == []
    assert screen.handle_key(KeyEvent(KeyCode.ENTER)) is None


def test_clearing_query():
    screen = SearchSelectScreen("t", "L", ZONES, 0)
    screen.handle_key(char("e"))
    screen.handle_key(char("u"))
    assert screen.query == "eu"
    screen.handle_key(KeyEvent(KeyCode.BACKSPACE))
    assert screen.query == "e"
    screen.handle_key(char("/"))
    assert screen.query == ""
    assert screen.filtered == [0, 1, 2, 3]
    screen.handle_key(char("a"))
    screen.handle_key(char("u", ctrl=True))
    assert screen.query == ""
    assert screen.cursor == 0


def test_navigation_bounds():
    items = [f"zone{i}" for i in range(40)]
    screen = SearchSelectScreen("t", "L", items, 0)
    screen.handle_key(KeyEvent(KeyCode.UP))
    assert screen.cursor == 0
    screen.handle_key(KeyEvent(KeyCode.PAGE_DOWN))
    assert screen.cursor == 15
    screen.handle_key(KeyEvent(KeyCode.END))
    assert screen.cursor == 39
    screen.handle_key(KeyEvent(KeyCode.DOWN))
    screen.handle_key(KeyEvent(KeyCode.PAGE_DOWN))
    assert screen.cursor == 39
    screen.handle_key(KeyEvent(KeyCode.PAGE_UP))
    assert screen.cursor == 24
    screen.handle_key(KeyEvent(KeyCode.HOME))
    assert screen.cursor == 0


def test_back_and_quit():
    screen = SearchSelectScreen("t", "L", ZONES, 0)
    assert screen.handle_key(KeyEvent(KeyCode.ESC)).kind is ActionKind.BACK
    assert screen.handle_key(char("q", ctrl=True)).kind is ActionKind.QUIT
    assert screen.query == ""


def test_draw_shows_counts_and_query():
    screen = SearchSelectScreen("Select timezone", "Timezones", ZONES, 0)
    screen.handle_key(char("e"))
    screen.handle_key(char("u"))
    frame = Frame(120, 40)
    screen.draw(frame)
    text = frame_text(frame)
    assert "Timezones (2 / 4 total)" in text
    assert "Search: eu" in text
    assert "Europe/Berlin" in text
    assert "America/New_York" not in text


def test_run_selectors_with_no_items_quit():
    assert run_keymap_selector(FakeTerminal(), [], 0, InstallSummary()).kind is ActionKind.QUIT
    assert run_timezone_selector(FakeTerminal(), [], 0, InstallSummary()).kind is ActionKind.QUIT


def test_run_timezone_selector_submits():
    terminal = FakeTerminal([KeyEvent(KeyCode.DOWN), KeyEvent(KeyCode.ENTER)])
    action = run_timezone_selector(terminal, ZONES, 0, InstallSummary())
    assert action == SelectionAction.submit(1)
    assert "Select timezone" in frame_text(terminal.frames[0])


def test_run_keymap_selector_title():
    terminal = FakeTerminal([KeyEvent(KeyCode.ESC)])
    action = run_keymap_selector(terminal, ["us", "de"], 1, InstallSummary())
    assert action.kind is ActionKind.BACK
    assert "Select keyboard layout" in frame_text(terminal.frames[0])


def test_timezone_loading_screen():
    frame = Frame(120, 40)
    draw_timezone_loading(frame, InstallSummary())
    text = frame_text(frame)
    assert "Loading..." in text
    assert "This may take a few seconds." in text

    terminal = FakeTerminal()
    render_timezone_loading(terminal, InstallSummary())
    assert len(terminal.frames) == 1
    assert "Select timezone" in frame_text(terminal.frames[0])