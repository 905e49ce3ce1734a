"""Terminal session, key decoding and the screen event loop."""

from __future__ import annotations

import sys
import time
from contextlib import ExitStack
from dataclasses import dataclass
from enum import Enum
from itertools import groupby
from typing import Any, Callable

import blessed

from .widgets import Color, Frame, Rect, Style

POLL_INTERVAL = 0.1


class KeyCode(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    ESC = "esc"
    BACKSPACE = "backspace"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"
    CHAR = "char"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """A key press; ``char`` is set for ``KeyCode.CHAR``."""

    code: KeyCode
    char: str = ""
    ctrl: bool = False

    def is_quit(self) -> bool:
        """True for Ctrl+Q, the quit key on every screen."""
        return self.code is KeyCode.CHAR and self.char in ("q", "Q") and self.ctrl


_NAMED_KEYS = {
    "KEY_UP": KeyCode.UP,
    "KEY_DOWN": KeyCode.DOWN,
    "KEY_LEFT": KeyCode.LEFT,
    "KEY_RIGHT": KeyCode.RIGHT,
    "KEY_ENTER": KeyCode.ENTER,
    "KEY_ESCAPE": KeyCode.ESC,
    "KEY_BACKSPACE": KeyCode.BACKSPACE,
    "KEY_PGUP": KeyCode.PAGE_UP,
    "KEY_PPAGE": KeyCode.PAGE_UP,
    "KEY_PGDOWN": KeyCode.PAGE_DOWN,
    "KEY_NPAGE": KeyCode.PAGE_DOWN,
    "KEY_HOME": KeyCode.HOME,
    "KEY_END": KeyCode.END,
}

_SPECIAL_CHARS = {
    "\r": KeyCode.ENTER,
    "\n": KeyCode.ENTER,
    "\x1b": KeyCode.ESC,
    "\x7f": KeyCode.BACKSPACE,
    "\x08": KeyCode.BACKSPACE,
    "\t": KeyCode.OTHER,
}


def _decode_key(text: str, name: str | None) -> KeyEvent:
    """Turn a raw key sequence and its terminal name into a ``KeyEvent``."""
    if name in _NAMED_KEYS:
        return KeyEvent(_NAMED_KEYS[name])
    if len(text) == 1:
        if text in _SPECIAL_CHARS:
            return KeyEvent(_SPECIAL_CHARS[text])
        code_point = ord(text)
        if 0 < code_point < 32:
            return KeyEvent(KeyCode.CHAR, chr(code_point + 96), ctrl=True)
        return KeyEvent(KeyCode.CHAR, text)
    return KeyEvent(KeyCode.OTHER)


class Terminal:
    """Full-screen terminal session that draws frames and reads keys."""

    def __init__(self) -> None:
        self._term = blessed.Terminal()
        self._stack = ExitStack()

    def __enter__(self) -> Terminal:
        self._stack.enter_context(self._term.fullscreen())
        self._stack.enter_context(self._term.cbreak())
        self._stack.enter_context(self._term.hidden_cursor())
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._stack.close()

    def size(self) -> Rect:
        return Rect(0, 0, self._term.width, self._term.height)

    def _color(self, color: Color, background: bool) -> str:
        if isinstance(color.value, tuple):
            red, green, blue = color.value
            if background:
                return str(self._term.on_color_rgb(red, green, blue))
            return str(self._term.color_rgb(red, green, blue))
        if background:
            return str(self._term.on_color(color.value))
        return str(self._term.color(color.value))

    def _sgr(self, style: Style) -> str:
        parts = []
        if style.bold:
            parts.append(str(self._term.bold))
        if style.fg is not None:
            parts.append(self._color(style.fg, background=False))
        if style.bg is not None:
            parts.append(self._color(style.bg, background=True))
        return "".join(parts)

    def draw(self, render: Callable[[Frame], Any]) -> Frame:
        """Render a fresh frame of the current size and write it out."""
        area = self.size()
        frame = Frame(area.width, area.height)
        render(frame)
        out = [str(self._term.home)]
        normal = str(self._term.normal)
        for y, row in enumerate(frame.cells):
            out.append(str(self._term.move_xy(0, y)))
            for style, cells in groupby(row, key=lambda cell: cell.style):
                text = "".join(cell.symbol for cell in cells)
                out.append(self._sgr(style) + text + normal)
        sys.stdout.write("".join(out))
        sys.stdout.flush()
        return frame

    def poll_key(self, timeout: float) -> KeyEvent | None:
        """Wait up to ``timeout`` seconds for a key press."""
        keystroke = self._term.inkey(timeout=timeout)
        if not keystroke:
            return None
        return _decode_key(str(keystroke), keystroke.name)


def run_screen(terminal: Any, screen: Any) -> Any:
    """Draw ``screen`` and feed it keys until it returns an action.

    A screen may also define ``tick(now)``, called each round; an action it
    returns ends the loop as well.
    """
    while True:
        if hasattr(screen, "tick"):
            action = screen.tick(time.monotonic())
            if action is not None:
                return action
        terminal.draw(screen.draw)
        key = terminal.poll_key(POLL_INTERVAL)
        if key is None:
            continue
        action = screen.handle_key(key)
        if action is not None:
            return action