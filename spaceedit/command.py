"""Command mode: the editor's resting mode."""

from __future__ import annotations

from . import prompt
from .events import KeyCode, KeyEvent
from .model import Mode, Model


def on_key(model: Model, key_event: KeyEvent) -> None:
    if key_event.code is KeyCode.CHAR and key_event.char == ":":
        prompt.start(model)


def on_paste(model: Model, paste: str) -> bool:
    """Refuse a paste; command mode has nowhere to put text.

    Returns whether the paste was consumed, which is never.
    """
    return False


def start(model: Model) -> None:
    model.mode = Mode.COMMAND