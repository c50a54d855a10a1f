"""A text buffer with its edit history."""

from __future__ import annotations

from .rope import Rope


class Buffer:
    """A file's contents together with its snapshots over time."""

    def __init__(self, initial: Rope | None = None) -> None:
        self.history: list[Rope] = [Rope() if initial is None else initial]
        self.current_snapshot = 0

    @property
    def current(self) -> Rope:
        """The snapshot currently shown."""
        return self.history[self.current_snapshot]

    def line_number_column_width(self) -> int:
        """Number of digits needed to show the largest line number."""
        return len(str(self.current.line_count()))