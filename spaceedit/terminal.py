"""Putting the terminal into editing mode and back again."""

from __future__ import annotations

import contextlib
from collections.abc import Iterator

ENABLE_BRACKETED_PASTE = "\x1b[?2004h"
DISABLE_BRACKETED_PASTE = "\x1b[?2004l"


def _write(term, text: str) -> None:
    term.stream.write(str(text))
    term.stream.flush()


@contextlib.contextmanager
def init(term) -> Iterator:
    """Enter the alternate screen, raw mode and bracketed paste for the block.

    The terminal is restored on exit, including when the block raises.
    """
    with contextlib.ExitStack() as stack:
        stack.enter_context(term.fullscreen())
        stack.enter_context(term.raw())
        _write(term, ENABLE_BRACKETED_PASTE)
        stack.callback(_write, term, DISABLE_BRACKETED_PASTE)
        stack.callback(_write, term, term.normal_cursor)
        yield term