"""Prompt mode: typing a ':' command on the status line."""

from __future__ import annotations

from . import command
from .events import KeyCode, KeyEvent
from .model import Mode, Model


def on_key(model: Model, key_event: KeyEvent) -> None:
    code = key_event.code
    if code is KeyCode.BACKSPACE:
        if not model.prompt:
            model.message = ""
            command.start(model)
        else:
            model.prompt = model.prompt[:-1]
            _update_message(model)
    elif code is KeyCode.ENTER:
        _execute(model)
    elif code is KeyCode.ESC:
        model.message = ""
        command.start(model)
    elif code is KeyCode.CHAR and key_event.char is not None:
        model.prompt += key_event.char
        _update_message(model)


def on_paste(model: Model, paste: str) -> bool:
    """Refuse a paste; the prompt only takes typed keys.

    Returns whether the paste was consumed, which is never.
    """
    return False


def start(model: Model) -> None:
    model.mode = Mode.PROMPT
    model.prompt = ""
    _update_message(model)


def _execute(model: Model) -> None:
    cmd = model.prompt
    if cmd in ("q", "q!"):
        del model.tabs[model.current_tab]
        if model.current_tab >= len(model.tabs) and model.current_tab > 0:
            model.current_tab = len(model.tabs) - 1
    elif cmd in ("qall", "qall!"):
        model.tabs = []
    elif cmd == "tabn":
        model.current_tab = (model.current_tab + 1) % len(model.tabs)
    elif cmd == "tabp":
        model.current_tab = model.current_tab - 1 if model.current_tab > 0 else len(model.tabs) - 1
    command.start(model)


def _update_message(model: Model) -> None:
    model.message = f":{model.prompt}"