import pytest

from kwimy.terminal import KeyCode, KeyEvent, _decode_key, run_screen
from kwimy.widgets import Frame, Line


class FakeTerminal:
    def __init__(self, keys):
        self.keys = list(keys)
        self.frames = []

    def draw(self, render):
        frame = Frame(20, 3)
        render(frame)
        self.frames.append(frame)
        return frame

    def poll_key(self, timeout):
        return self.keys.pop(0) if self.keys else None


class CountingScreen:
    def __init__(self):
        self.presses = 0

    def handle_key(self, key):
        if key.code is KeyCode.ENTER:
            return f"done after {self.presses}"
        self.presses += 1
        return None

    def draw(self, frame):
        frame.render_paragraph(frame.area, [Line(f"presses {self.presses}")])


class TickingScreen(CountingScreen):
    def __init__(self, limit):
        super().__init__()
        self.ticks = 0
        self.limit = limit

    def tick(self, now):
        self.ticks += 1
        return "refresh" if self.ticks > self.limit else None


def test_ctrl_q_is_quit():
    assert KeyEvent(KeyCode.CHAR, "q", ctrl=True).is_quit()
    assert KeyEvent(KeyCode.CHAR, "Q", ctrl=True).is_quit()
    assert not KeyEvent(KeyCode.CHAR, "q").is_quit()
    assert not KeyEvent(KeyCode.ENTER, ctrl=True).is_quit()


@pytest.mark.parametrize(
    "name, code",
    [
        ("KEY_UP", KeyCode.UP),
        ("KEY_DOWN", KeyCode.DOWN),
        ("KEY_ENTER", KeyCode.ENTER),
        ("KEY_ESCAPE", KeyCode.ESC),
        ("KEY_PGUP", KeyCode.PAGE_UP),
        ("KEY_NPAGE", KeyCode.PAGE_DOWN),
        ("KEY_HOME", KeyCode.HOME),
        ("KEY_END", KeyCode.END),
    ],
)
def test_decode_named_keys(name, code):
    assert _decode_key("", name) == KeyEvent(code)


def test_decode_control_characters():
    assert _decode_key("\x11", None) == KeyEvent(KeyCode.CHAR, "q", ctrl=True)
    assert _decode_key("\x15", None) == KeyEvent(KeyCode.CHAR, "u", ctrl=True)
    assert _decode_key("\x7f", None).code is KeyCode.BACKSPACE
    assert _decode_key("\r", None).code is KeyCode.ENTER


def test_decode_plain_and_unknown():
    assert _decode_key("a", None) == KeyEvent(KeyCode.CHAR, "a")
    assert _decode_key("\x1b[99~", "KEY_F20").code is KeyCode.OTHER


def test_run_screen_returns_screen_action():
    keys = [KeyEvent(KeyCode.CHAR, "x"), None, KeyEvent(KeyCode.UP), KeyEvent(KeyCode.ENTER)]
    terminal = FakeTerminal(keys)
    result = run_screen(terminal, CountingScreen())
    assert result == "done after 2"
    assert len(terminal.frames) == len(keys)
    assert terminal.frames[-1].row_text(0).startswith("presses 2")


def test_run_screen_stops_on_tick_action():
    terminal = FakeTerminal([None, None, None, None])
    screen = TickingScreen(limit=2)
    assert run_screen(terminal, screen) == "refresh"
    assert len(terminal.frames) == screen.limit