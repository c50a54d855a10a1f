from spaceedit import command
from spaceedit.events import KeyCode, KeyEvent
from spaceedit.model import Mode, Model


def test_colon_starts_prompt():
    model = Model(prompt="old")
    command.on_key(model, KeyEvent(KeyCode.CHAR, ":"))
    assert model.mode is Mode.PROMPT
    assert model.prompt == ""
    assert model.message == ":"


def test_other_keys_do_nothing():
    model = Model()
    command.on_key(model, KeyEvent(KeyCode.CHAR, "x"))
    command.on_key(model, KeyEvent(KeyCode.ENTER))
    assert model == Model()


def test_paste_ignored():
    model = Model()
    command.on_paste(model, "text")
    assert model == Model()


def test_start_sets_command_mode():
    model = Model(mode=Mode.PROMPT)
    command.start(model)
    assert model.mode is Mode.COMMAND