from spaceedit.app import dispatch
from spaceedit.events import KeyCode, KeyEvent, Paste, Resize
from spaceedit.model import Mode, Model


def _keys(model, text):
    for ch in text:
        dispatch(model, KeyEvent(KeyCode.CHAR, ch))


def test_colon_q_enter_closes_only_tab():
    model = Model()
    model.new_tab(None)
    _keys(model, ":q")
    assert model.mode is Mode.PROMPT
    dispatch(model, KeyEvent(KeyCode.ENTER))
    assert model.tabs == []
    assert model.mode is Mode.COMMAND


def test_resize_changes_nothing():
    model = Model()
    model.new_tab("a")
    dispatch(model, Resize())
    expected = Model()
    expected.new_tab("a")
    assert model == expected


def test_paste_in_prompt_mode_ignored():
    model = Model()
    model.new_tab(None)
    _keys(model, ":")
    dispatch(model, Paste("qall"))
    assert model.prompt == ""
    assert model.mode is Mode.PROMPT


def test_keys_in_command_mode_other_than_colon_ignored():
    model = Model()
    model.new_tab(None)
    _keys(model, "q")
    assert model.mode is Mode.COMMAND
    assert model.prompt == ""