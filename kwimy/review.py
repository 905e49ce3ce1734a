"""Final review screen listing the chosen system settings and packages."""

from __future__ import annotations

from typing import Any, Sequence

from .common import KEY_STYLE, titled_block
from .confirm import draw_step_header
from .model import ReviewAction, ReviewItem
from .terminal import KeyCode, KeyEvent, run_screen
from .widgets import Block, Color, Frame, Line, Rect, Span, Style

_ICONS = {
    "Network": " ",
    "Disk": " ",
    "Filesystem": " ",
    "GPU": " ",
    "Swap": " ",
    "Hostname": " ",
    "Username": " ",
    "Keyboard": " ",
    "Timezone": " ",
    "Compositor": " ",
    "Browsers": " ",
    "Editors": " ",
    "Terminals": " ",
}
_DEFAULT_ICON = " "

_SUPER_ENTER = (Span("SuperKey", KEY_STYLE), Span(" + "), Span("Enter", KEY_STYLE))

_CONTROLS = (
    Line(
        [
            Span("Enter", KEY_STYLE),
            Span(" to confirm, "),
            Span("Esc", KEY_STYLE),
            Span(" to go back, "),
            Span("S", KEY_STYLE),
            Span(" to start over."),
        ]
    ),
    Line(
        [
            *_SUPER_ENTER,
            Span(" opens a terminal, "),
            *_SUPER_ENTER,
            Span(" close terminal window"),
        ]
    ),
)

_BORDER = Style(fg=Color.BLACK)


def review_icon(label: str) -> str:
    """The icon shown before a review item with the given label."""
    return _ICONS.get(label, _DEFAULT_ICON)


def review_lines(items: Sequence[ReviewItem]) -> list[Line]:
    """One styled ``icon label: value`` line per review item."""
    return [
        Line(
            [
                Span(" "),
                Span(review_icon(item.label), Style(fg=Color.YELLOW)),
                Span(" "),
                Span(f"{item.label}:", Style(fg=Color.WHITE, bold=True)),
                Span(f" {item.value}", Style(fg=Color.BLUE)),
            ]
        )
        for item in items
    ]


def _review_block(title: str) -> Block:
    heading = Line(
        [
            Span("[ ", _BORDER),
            Span(title, Style(fg=Color.MAGENTA, bold=True)),
            Span(" ]", _BORDER),
        ]
    )
    return Block(title=heading, border_style=_BORDER, padding=(1, 0, 1, 0))


class ReviewScreen:
    """Shows every choice side by side before the installation starts."""

    def __init__(
        self,
        system_items: Sequence[ReviewItem],
        package_items: Sequence[ReviewItem],
        selected_packages: int,
    ) -> None:
        self.system_items = tuple(system_items)
        self.package_items = tuple(package_items)
        self.selected_packages = selected_packages

    def handle_key(self, key: KeyEvent) -> ReviewAction | None:
        """Apply a key press; return an action once the user decides."""
        if key.code is KeyCode.ENTER:
            return ReviewAction.CONFIRM
        if key.code is KeyCode.ESC:
            return ReviewAction.BACK
        if key.code is KeyCode.CHAR and key.char in ("s", "S"):
            return ReviewAction.EDIT
        if key.is_quit():
            return ReviewAction.QUIT
        return None

    def draw(self, frame: Frame) -> None:
        rows = draw_step_header(
            frame,
            frame.area,
            "Review installation",
            "Controls",
            _CONTROLS,
            footer_height=5,
        )

        grid = rows[4]
        gap = 1
        available = max(0, grid.width - gap)
        left_width = available // 2
        columns = (
            (Rect(grid.x, grid.y, left_width, grid.height), self.system_items, "System"),
            (
                Rect(grid.x + left_width + gap, grid.y, available - left_width, grid.height),
                self.package_items,
                "Packages",
            ),
        )
        for area, items, title in columns:
            frame.render_paragraph(
                area, review_lines(items), block=_review_block(title), wrap=True
            )

        text_style = Style(fg=Color.WHITE)
        confirm_lines = [
            Line(Span("Press Enter to start installation process", text_style)),
            Line(Span(f"Selected: {self.selected_packages} apps.", text_style)),
        ]
        frame.render_paragraph(
            rows[5],
            confirm_lines,
            block=titled_block("Confirm", Style(fg=Color.LIGHT_GREEN, bold=True)),
        )


def run_review(
    terminal: Any,
    system_items: Sequence[ReviewItem],
    package_items: Sequence[ReviewItem],
    selected_packages: int,
) -> ReviewAction:
    """Show the review screen until the user confirms, goes back or quits."""
    return run_screen(
        terminal, ReviewScreen(system_items, package_items, selected_packages)
    )