"""The editor's entry point and event loop."""

from __future__ import annotations

import sys

from . import command, events, prompt, terminal, ui
from .events import Event, KeyEvent, Paste
from .model import Mode, Model


def dispatch(model: Model, event: Event) -> None:
    """Hand an input event to the handler for the current mode."""
    handler = command if model.mode is Mode.COMMAND else prompt
    if isinstance(event, KeyEvent):
        handler.on_key(model, event)
    elif isinstance(event, Paste):
        handler.on_paste(model, event.text)


def main(argv: list[str] | None = None) -> int:
    from blessed import Terminal

    args = sys.argv[1:] if argv is None else list(argv)
    term = Terminal()
    with terminal.init(term):
        model = Model()
        model.new_tab(args[0] if args else None)
        while model.tabs:
            ui.render(term, model)
            dispatch(model, events.next_event(term))
    return 0


if __name__ == "__main__":
    sys.exit(main())