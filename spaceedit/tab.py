"""An editor tab: a view onto a buffer."""

from __future__ import annotations

from dataclasses import dataclass, field

from .buffer import Buffer

NO_NAME_TITLE = "[No Name]"


@dataclass
class Tab:
    """A window onto a buffer, with a cursor and a scroll position (0-indexed)."""

    title: str = NO_NAME_TITLE
    buffer: Buffer = field(default_factory=Buffer)
    cursor_column: int = 0
    cursor_line: int = 0
    window_column: int = 0
    window_line: int = 0

    def adjust_window(self, width: int, height: int) -> None:
        """Scroll the window so the cursor stays visible at the given size."""
        text_width = width - self.buffer.line_number_column_width()
        if text_width < 0:
            raise ValueError(f"window width {width} is narrower than the line number column")
        self.window_line = adjust_range(self.window_line, height, self.cursor_line)
        self.window_column = adjust_range(self.window_column, text_width, self.cursor_column)


def adjust_range(range_start: int, length: int, must_contain: int) -> int:
    """Return a new start for a range of ``length`` so it contains ``must_contain``."""
    if range_start > must_contain:
        return must_contain
    if range_start + length <= must_contain:
        return must_contain + 1 - length
    return range_start