import numpy as np
import pytest

from ninarow.board import Board
from ninarow.errors import ConfigurationError
from ninarow.game_basics import EMPTY, Mark, Move


VALID_GEOMETRIES = [(s, w) for s in range(3, 11) for w in range(3, 8) if w <= s]


@pytest.mark.parametrize("size,win", VALID_GEOMETRIES)
@pytest.mark.parametrize("is_3d", [False, True])
def test_valid_geometry_constructs(size: int, win: int, is_3d: bool):
    b = Board(size, win, is_3d=is_3d)
    assert b.size == size
    assert b.win_condition == win
    assert b.is_3d is is_3d
    assert b.layer_count == (size if is_3d else 1)
    assert len(b.cells()) == b.layer_count * size * size


@pytest.mark.parametrize("size,win", [
    (2, 3), (11, 3), (0, 3), (-1, 3),   # size out of range
    (5, 2), (8, 8), (10, 1),             # win out of range
    (3, 4), (4, 5), (6, 7),              # win exceeds size
])
def test_invalid_geometry_rejected(size: int, win: int):
    with pytest.raises(ConfigurationError):
        Board(size, win)
    with pytest.raises(ConfigurationError):
        Board(size, win, is_3d=True)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        Board(12, 3)


def test_place_and_read_back():
    b = Board(3, 3)
    assert b.place(0, 0, Mark.X)
    assert b.place(0, 1, Mark.O)
    assert b.mark(0, 0) == Mark.X
    assert b.mark(0, 1) == Mark.O
    assert b.mark(2, 2) == EMPTY
    assert not b.is_empty(0, 0)
    assert b.is_empty(2, 2)


def test_place_on_occupied_cell_is_rejected_without_side_effect():
    b = Board(3, 3)
    assert b.place(1, 1, Mark.X)
    before = b.cells()
    assert b.place(1, 1, Mark.O) is False
    assert b.cells() == before
    assert b.mark(1, 1) == Mark.X


@pytest.mark.parametrize("row,col,layer", [(-1, 0, 0), (0, -1, 0), (3, 0, 0), (0, 3, 0), (0, 0, 1), (0, 0, -1)])
def test_invalid_positions_return_sentinels(row: int, col: int, layer: int):
    b = Board(3, 3)
    before = b.cells()
    assert b.is_valid_position(row, col, layer) is False
    assert b.place(row, col, Mark.X, layer) is False
    assert b.is_empty(row, col, layer) is False
    assert b.mark(row, col, layer) == EMPTY
    b.clear(row, col, layer)
    assert b.cells() == before


def test_clear_resets_regardless_of_content():
    b = Board(3, 3)
    b.place(2, 1, Mark.O)
    b.clear(2, 1)
    assert b.is_empty(2, 1)
    b.clear(2, 1)
    assert b.is_empty(2, 1)


def test_make_unmake_leaves_every_other_cell_unchanged():
    b = Board.from_string("120010200")
    before = b.cells()
    for move in b.empty_cells():
        assert b.place(move.row, move.col, Mark.X, move.layer)
        b.clear(move.row, move.col, move.layer)
        assert b.mark(move.row, move.col, move.layer) == EMPTY
        assert b.cells() == before


def test_is_full():
    b = Board.from_string("121212211")
    assert b.is_full()
    b.clear(0, 0)
    assert not b.is_full()


def test_3d_is_full_checks_all_layers():
    b = Board(3, 3, is_3d=True)
    for move in b.empty_cells():
        if move.layer < 2:
            b.place(move.row, move.col, Mark.X if (move.row + move.col + move.layer) % 2 else Mark.O, move.layer)
    assert not b.is_full()
    empty = b.empty_cells()
    assert len(empty) == 9
    assert all(m.layer == 2 for m in empty)


def test_3d_place_targets_the_right_layer():
    b = Board(3, 3, is_3d=True)
    assert b.place(1, 1, Mark.X, layer=1)
    assert b.is_empty(1, 1, layer=0)
    assert not b.is_empty(1, 1, layer=1)
    assert b.is_empty(1, 1, layer=2)
    assert b.mark(1, 1, layer=1) == Mark.X


def test_2d_board_has_single_layer():
    b = Board(3, 3, is_3d=False)
    assert b.layer_count == 1
    assert not b.is_valid_position(0, 0, 1)


def test_empty_cells_order_is_row_then_column_then_layer():
    b = Board(3, 3, is_3d=True)
    cells = b.empty_cells()
    assert cells[:4] == [Move(0, 0, 0), Move(0, 0, 1), Move(0, 0, 2), Move(0, 1, 0)]
    assert cells[-1] == Move(2, 2, 2)
    assert cells == sorted(cells, key=lambda m: (m.row, m.col, m.layer))


def test_winner_and_counts():
    b = Board.from_string("111220000")
    assert b.winner() == Mark.X
    assert b.check_win(Mark.X)
    assert not b.check_win(Mark.O)
    assert b.count(Mark.X) == 3
    assert b.count(Mark.O) == 2
    assert Board(3, 3).winner() is None


@pytest.mark.parametrize("is_3d", [False, True])
def test_empty_cells_never_count_as_a_line(is_3d: bool):
    b = Board(3, 3, is_3d=is_3d)
    assert b.check_win(EMPTY) is False
    b.place(1, 1, Mark.X)
    b.place(0, 0, Mark.O)
    assert b.check_win(EMPTY) is False
    assert b.winner() is None


def test_serialize_round_trip_and_flat_layout():
    b = Board(3, 3, is_3d=True)
    b.place(0, 1, Mark.X, layer=0)
    b.place(2, 2, Mark.O, layer=2)
    s = b.serialize()
    assert len(s) == 27
    assert s[1] == "1"
    assert s[26] == "2"
    again = Board.from_string(s, 3, is_3d=True)
    assert again == b


@pytest.mark.parametrize("text,is_3d", [("1234", False), ("12", False), ("300000000", False), ("0" * 9, True), ("", False)])
def test_from_string_rejects_malformed(text: str, is_3d: bool):
    with pytest.raises(ConfigurationError):
        Board.from_string(text, 3, is_3d=is_3d)


def test_to_array_shape_and_copy_independence():
    b = Board(4, 3, is_3d=True)
    b.place(3, 2, Mark.O, layer=1)
    arr = b.to_array()
    assert arr.shape == (4, 4, 4)
    assert arr[1, 3, 2] == 2
    assert int(np.count_nonzero(arr)) == 1

    c = b.copy()
    assert c == b
    c.place(0, 0, Mark.X)
    assert c != b
    assert b.is_empty(0, 0)
