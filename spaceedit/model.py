"""The editor's main state."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .tab import Tab


class Mode(enum.Enum):
    COMMAND = "command"
    PROMPT = "prompt"


@dataclass
class Model:
    """Everything the editor knows. ``current_tab`` is 0 while ``tabs`` is empty."""

    message: str = ""
    mode: Mode = Mode.COMMAND
    prompt: str = ""
    render_cursor_position: tuple[int, int] | None = None
    tabs: list[Tab] = field(default_factory=list)
    current_tab: int = 0

    def new_tab(self, name: str | None) -> None:
        """Open a tab after the current one and make it current."""
        if self.tabs:
            self.current_tab += 1
        self.tabs.insert(self.current_tab, Tab() if name is None else Tab(title=name))