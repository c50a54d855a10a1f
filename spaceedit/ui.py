"""Drawing the editor state to the terminal."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass

from .model import Mode, Model


@dataclass(frozen=True)
class Frame:
    """The layout of one screen."""

    width: int
    height: int
    tabs: list[str]
    selected: int
    text_top: int
    text_height: int
    status_row: int
    message: str
    cursor: tuple[int, int] | None


def _display_width(text: str) -> int:
    width = 0
    for ch in text:
        if unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
    return width


def compose(model: Model, width: int, height: int) -> Frame:
    """Lay out the screen, scroll the current tab and place the cursor."""
    text_height = max(height - 2, 0)
    status_row = max(height - 1, 0)
    model.tabs[model.current_tab].adjust_window(width, text_height)
    if model.mode is Mode.PROMPT:
        cursor = (_display_width(model.message), status_row)
    else:
        cursor = None
    model.render_cursor_position = cursor
    return Frame(
        width=width,
        height=height,
        tabs=[f" {tab.title} " for tab in model.tabs],
        selected=model.current_tab,
        text_top=1,
        text_height=text_height,
        status_row=status_row,
        message=model.message,
        cursor=cursor,
    )


def _clip(text: str, room: int) -> str:
    out = []
    used = 0
    for ch in text:
        w = _display_width(ch)
        if used + w > room:
            break
        out.append(ch)
        used += w
    return "".join(out)


def render(term, model: Model) -> Frame:
    """Draw the model on the terminal and return the frame drawn."""
    frame = compose(model, term.width, term.height)
    bar_style = term.underline + term.bright_white_on_white
    parts = [term.home, term.clear]
    used = 0
    for index, title in enumerate(frame.tabs):
        room = frame.width - used
        if room <= 0:
            break
        shown = _clip(title, room)
        style = term.bright_white_on_black if index == frame.selected else bar_style
        parts.append(style + shown + term.normal)
        used += _display_width(shown)
    if used < frame.width:
        parts.append(bar_style + " " * (frame.width - used) + term.normal)
    parts.append(term.move_xy(0, frame.status_row))
    parts.append(_clip(frame.message, frame.width))
    if frame.cursor is None:
        parts.append(term.hide_cursor)
    else:
        parts.append(term.move_xy(*frame.cursor))
        parts.append(term.normal_cursor)
    term.stream.write("".join(str(p) for p in parts))
    term.stream.flush()
    return frame