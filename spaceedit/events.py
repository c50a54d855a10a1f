"""Reading terminal input as editor events."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

ESC = "\x1b"
PASTE_START = "\x1b[200~"
PASTE_END = "\x1b[201~"

_POLL_INTERVAL = 0.1
_ESCAPE_DELAY = 0.05


class KeyCode(enum.Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    ENTER = "enter"
    ESC = "esc"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    code: KeyCode
    char: str | None = None


@dataclass(frozen=True)
class Paste:
    text: str


@dataclass(frozen=True)
class Resize:
    pass


Event = Union[KeyEvent, Paste, Resize]

_NAMED_KEYS = {
    "KEY_BACKSPACE": KeyCode.BACKSPACE,
    "KEY_ENTER": KeyCode.ENTER,
    "KEY_ESCAPE": KeyCode.ESC,
}

_RAW_KEYS = {
    "\x7f": KeyCode.BACKSPACE,
    "\x08": KeyCode.BACKSPACE,
    "\r": KeyCode.ENTER,
    "\n": KeyCode.ENTER,
    ESC: KeyCode.ESC,
}


def key_from_keystroke(keystroke) -> KeyEvent | None:
    """Turn a keystroke into a key event; ``None`` for an empty keystroke."""
    text = str(keystroke)
    if not text:
        return None
    name = getattr(keystroke, "name", None)
    if name in _NAMED_KEYS:
        return KeyEvent(_NAMED_KEYS[name])
    if text in _RAW_KEYS:
        return KeyEvent(_RAW_KEYS[text])
    if getattr(keystroke, "is_sequence", False) or len(text) != 1 or not text.isprintable():
        return KeyEvent(KeyCode.OTHER)
    return KeyEvent(KeyCode.CHAR, text)


def next_event(term) -> Event:
    """Block until the next key press, paste or resize and return it."""
    size = (term.width, term.height)
    while True:
        keystroke = term.inkey(timeout=_POLL_INTERVAL)
        if (term.width, term.height) != size:
            if keystroke:
                term.ungetch(str(keystroke))
            return Resize()
        if not keystroke:
            continue
        text = str(keystroke)
        if text.startswith(PASTE_START):
            return Paste(_read_paste(term, text[len(PASTE_START):]))
        if text == ESC:
            return _read_escape(term)
        event = key_from_keystroke(keystroke)
        if event is not None:
            return event


def _read_escape(term) -> Event:
    text = ESC
    while PASTE_START.startswith(text) and text != PASTE_START:
        keystroke = term.inkey(timeout=_ESCAPE_DELAY)
        if not keystroke:
            break
        text += str(keystroke)
    if text.startswith(PASTE_START):
        return Paste(_read_paste(term, text[len(PASTE_START):]))
    if len(text) > 1:
        term.ungetch(text[1:])
    return KeyEvent(KeyCode.ESC)


def _read_paste(term, text: str) -> str:
    while PASTE_END not in text:
        text += str(term.inkey(timeout=None))
    body, _, rest = text.partition(PASTE_END)
    if rest:
        term.ungetch(rest)
    return body.replace("\r", "\n")