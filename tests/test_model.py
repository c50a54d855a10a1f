from spaceedit.model import Mode, Model
from spaceedit.tab import NO_NAME_TITLE


def test_initial_state():
    model = Model()
    assert model.mode is Mode.COMMAND
    assert model.message == ""
    assert model.prompt == ""
    assert model.tabs == []
    assert model.current_tab == 0
    assert model.render_cursor_position is None


def test_first_tab_without_name():
    model = Model()
    model.new_tab(None)
    assert [t.title for t in model.tabs] == [NO_NAME_TITLE]
    assert model.current_tab == 0


def test_new_tab_goes_after_current_and_becomes_current():
    model = Model()
    model.new_tab("a")
    model.new_tab("b")
    model.current_tab = 0
    model.new_tab("c")
    assert [t.title for t in model.tabs] == ["a", "c", "b"]
    assert model.tabs[model.current_tab].title == "c"


def test_empty_name_is_kept():
    model = Model()
    model.new_tab("")
    assert model.tabs[0].title == ""