# spaceedit

A small, modal terminal editor in its early stages. It shows a tab bar on
the top line and a status line on the bottom line, and is driven by
`:` commands typed at a prompt.

## Installing

```
pip install .
```

## Running

```
spaceedit [FILE]
```

This opens one tab titled `FILE`, or `[No Name]` when no argument is given.
Only the first argument is used. The screen is redrawn after every key
press and whenever the terminal is resized. While it runs, the terminal is
in the alternate screen with raw input and bracketed paste, and it is put
back when the editor exits.

## Modes and commands

The editor starts in command mode, where the only key that does anything
is `:`, which opens the prompt. The prompt is shown on the status line as
`:` followed by what has been typed, with the cursor after it.

In the prompt:

- printable characters are added to the command;
- Backspace removes the last character, or leaves the prompt if it is empty;
- Esc leaves the prompt and clears the status line;
- Enter runs the command and returns to command mode.

| Command           | Effect                                  |
|-------------------|-----------------------------------------|
| `:q`, `:q!`       | close the current tab                   |
| `:qall`, `:qall!` | close every tab                         |
| `:tabn`           | go to the next tab (wraps around)       |
| `:tabp`           | go to the previous tab (wraps around)   |

Any other command is ignored. The editor exits when its last tab is closed.
Pasted text is ignored in both modes.

## What it does not do yet

- It does not read or write files: the `FILE` argument only names the tab,
  and every tab holds a single empty line.
- The text area between the tab bar and the status line is left blank;
  buffer contents are not drawn, and there are no keys for moving a cursor
  or editing text.
- There is no handling of indentation yet, space-based or otherwise.
- Only one tab can be opened from the command line, and there is no command
  to open another.

## Using the pieces

The state and logic can be driven without a terminal, which is how the
tests work:

```python
from spaceedit.app import dispatch
from spaceedit.events import KeyCode, KeyEvent
from spaceedit.model import Model
from spaceedit.ui import compose

model = Model()
model.new_tab("notes.txt")
for ch in ":q":
    dispatch(model, KeyEvent(KeyCode.CHAR, ch))
frame = compose(model, 80, 24)   # lays out the screen, cursor on the status line
dispatch(model, KeyEvent(KeyCode.ENTER))
assert model.tabs == []
```

`spaceedit.tab.adjust_range(range_start, length, must_contain)` returns the
start of a range of the given length moved just far enough to contain a
position; `Tab.adjust_window(width, height)` uses it to keep the cursor in
view and raises `ValueError` when the width is narrower than the line
number column.

## Development

```
pip install -e .[test]
pytest
```