"""Screen shown when no Wi-Fi device exists and a wired link is needed."""

from __future__ import annotations

from typing import Any

from .common import KEY_STYLE, titled_block
from .confirm import draw_step_with_summary
from .model import InstallSummary, NetworkAction
from .terminal import KeyCode, KeyEvent, run_screen
from .widgets import Frame, Line, Span

_INFO = (
    Line("A Wi-Fi device was not detected"),
    Line("Connect ethernet and press R to retry"),
)

_CONTROLS = (
    Line(
        [
            Span("R", KEY_STYLE),
            Span(" to retry, "),
            Span("Ctrl+Q", KEY_STYLE),
            Span(" to quit."),
        ]
    ),
)


class NetworkRequiredScreen:
    """Asks the user to plug in a cable and retry, or quit."""

    def __init__(self, summary: InstallSummary | None = None) -> None:
        self.summary = summary if summary is not None else InstallSummary()

    def handle_key(self, key: KeyEvent) -> NetworkAction | None:
        if key.code is KeyCode.CHAR and key.char in ("r", "R"):
            return NetworkAction.RETRY
        if key.is_quit():
            return NetworkAction.QUIT
        return None

    def draw(self, frame: Frame) -> None:
        rows = draw_step_with_summary(
            frame,
            self.summary,
            "Network required",
            "Info",
            _INFO,
            box_height=4,
            padded=False,
        )
        frame.render_paragraph(
            rows[4], _CONTROLS, block=titled_block("Controls", padded=False), wrap=True
        )


def run_network_required(terminal: Any, summary: InstallSummary) -> NetworkAction:
    """Wait until the user chooses to retry or quit."""
    return run_screen(terminal, NetworkRequiredScreen(summary))