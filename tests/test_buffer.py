import pytest

from spaceedit.buffer import Buffer
from spaceedit.rope import Rope


def test_new_buffer_has_single_empty_snapshot():
    buffer = Buffer()
    assert buffer.current == Rope()
    assert buffer.current_snapshot == 0
    assert buffer.line_number_column_width() == 1


@pytest.mark.parametrize("lines, width", [(9, 1), (10, 2)])
def test_width_grows_with_digits(lines, width):
    buffer = Buffer(Rope([""] * lines))
    assert buffer.line_number_column_width() == width


def test_width_never_decreases_as_lines_grow():
    widths = [Buffer(Rope([""] * n)).line_number_column_width() for n in range(1, 200)]
    assert widths == sorted(widths)