"""Line-oriented text storage."""

from __future__ import annotations

from collections.abc import Iterable


class Rope:
    """Text held as a sequence of lines; always holds at least one line."""

    __slots__ = ("_lines",)

    def __init__(self, lines: Iterable[str] | None = None) -> None:
        self._lines: list[str] = [""] if lines is None else list(lines)
        if not self._lines:
            self._lines.append("")

    def line_count(self) -> int:
        """Return the number of lines in the text."""
        return len(self._lines)

    def __iter__(self):
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rope):
            return NotImplemented
        return self._lines == other._lines

    def __repr__(self) -> str:
        return f"Rope({self._lines!r})"