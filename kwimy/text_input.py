"""Single-line text entry screen for hostnames, user names and secrets."""

from __future__ import annotations

import time
from typing import Any, Sequence

from .common import (
    BORDER_STYLE,
    aligned_summary_area,
    art_lines,
    draw_install_summary,
    split_main_and_summary,
    step_title,
    titled_block,
)
from .model import KWIMY_ART, InstallSummary, SelectionAction
from .terminal import KeyCode, KeyEvent, run_screen
from .widgets import Block, Color, Constraint, Direction, Frame, Line, Span, Style, split

BLINK_INTERVAL = 0.5

_PADDED_TITLES = frozenset(
    {
        "Hostname",
        "User account",
        "User password",
        "Confirm password",
        "Disk encryption passphrase",
        "Confirm passphrase",
    }
)
_STEP_TITLES = _PADDED_TITLES | {"Wi-Fi password"}
_BRACKETED_INPUT_TITLES = frozenset(
    {
        "Hostname",
        "Username",
        "Password",
        "Encryption passphras",
        "Re-enter password",
        "Re-enter encryption passphras",
        "Wi-Fi password",
    }
)


def _as_lines(lines: Sequence[Line | str]) -> tuple[Line, ...]:
    return tuple(line if isinstance(line, Line) else Line(line) for line in lines)


def _is_printable_ascii(ch: str) -> bool:
    return len(ch) == 1 and " " <= ch <= "~"


def masked_text(value: str, mask: bool, cursor_visible: bool) -> str:
    """The text shown in the input box: stars when masked, plus a bar cursor."""
    shown = "*" * len(value.encode("utf-8")) if mask else value
    return shown + "|" if cursor_visible else shown


class TextInputScreen:
    """A prompt with controls, an input box and an optional info box."""

    def __init__(
        self,
        title: str,
        controls: Sequence[Line | str] = (),
        info: Sequence[Line | str] = (),
        input_title: str = "",
        initial: str | None = None,
        mask: bool = False,
        summary: InstallSummary | None = None,
    ) -> None:
        self.title = title
        self.controls = _as_lines(controls)
        self.info = _as_lines(info)
        self.input_title = input_title
        self.value = initial or ""
        self.mask = mask
        self.summary = summary if summary is not None else InstallSummary()
        self.cursor_visible = True
        self.last_toggle = time.monotonic()

    def tick(self, now: float) -> None:
        """Blink the cursor every half second."""
        if now - self.last_toggle > BLINK_INTERVAL:
            self.cursor_visible = not self.cursor_visible
            self.last_toggle = now
        return None

    def handle_key(self, key: KeyEvent) -> SelectionAction | None:
        """Edit the text; submits it on Enter."""
        if key.code is KeyCode.ENTER:
            return SelectionAction.submit(self.value)
        if key.code is KeyCode.ESC:
            return SelectionAction.back()
        if key.code is KeyCode.BACKSPACE:
            self.value = self.value[:-1]
        elif key.code is KeyCode.CHAR:
            if key.is_quit():
                return SelectionAction.quit()
            if key.char == "u" and key.ctrl:
                self.value = ""
            elif _is_printable_ascii(key.char):
                self.value += key.char
        return None

    def draw(self, frame: Frame) -> None:
        main_area, summary_area = split_main_and_summary(frame.area)
        has_info = bool(self.info)
        padded = self.title in _PADDED_TITLES
        constraints = [
            Constraint.length(len(KWIMY_ART)),
            Constraint.length(1),
            Constraint.length(1),
            Constraint.length(5 if padded else 4),
            Constraint.length(3),
        ]
        if has_info:
            constraints.append(Constraint.min(4 if padded else 3))
        constraints.append(Constraint.length(1))
        layout = split(main_area, constraints, Direction.VERTICAL)

        frame.render_paragraph(layout[0], art_lines())
        if self.title in _STEP_TITLES:
            heading = step_title(self.title)
        else:
            heading = Line(Span(self.title, Style(fg=Color.LIGHT_RED, bold=True)))
        frame.render_paragraph(layout[1], [heading])
        frame.render_paragraph(
            layout[3],
            self.controls,
            block=titled_block("Controls", padded=padded),
            wrap=True,
        )

        if self.input_title in _BRACKETED_INPUT_TITLES:
            input_block = titled_block(self.input_title, padded=False)
        else:
            input_block = Block(title=Line(self.input_title), border_style=BORDER_STYLE)
        shown = masked_text(self.value, self.mask, self.cursor_visible)
        frame.render_paragraph(
            layout[4], [Line(Span(shown, Style(fg=Color.YELLOW)))], block=input_block
        )

        if has_info:
            frame.render_paragraph(
                layout[5], self.info, block=titled_block("Info", padded=padded), wrap=True
            )
        frame.render_paragraph(
            layout[-1], [Line(Span("Press Enter to submit.", Style(fg=Color.WHITE)))]
        )

        draw_install_summary(
            aligned_summary_area(summary_area, main_area, layout[3]), frame, self.summary
        )


def run_text_input(
    terminal: Any,
    title: str,
    controls: Sequence[Line | str],
    info: Sequence[Line | str],
    input_title: str,
    initial: str | None,
    mask: bool,
    summary: InstallSummary,
) -> SelectionAction:
    """Ask for a line of text until it is submitted, or the user backs out or quits."""
    screen = TextInputScreen(title, controls, info, input_title, initial, mask, summary)
    return run_screen(terminal, screen)


def render_text_input(
    terminal: Any,
    title: str,
    controls: Sequence[Line | str],
    info: Sequence[Line | str],
    input_title: str,
    value: str,
    mask: bool,
    summary: InstallSummary,
) -> None:
    """Draw the text input screen once, without a cursor."""
    screen = TextInputScreen(title, controls, info, input_title, value, mask, summary)
    screen.cursor_visible = False
    terminal.draw(screen.draw)