import pytest

from thaw.components.board import Board
from thaw.components.cell import CellState
from tests.helpers import board_from_rows


def test_board_requires_width_times_height_cells():
    with pytest.raises(ValueError):
        Board(width=2, height=2, cells=(CellState.EMPTY,) * 3)


def test_board_rejects_negative_dimensions():
    with pytest.raises(ValueError):
        Board(width=-1, height=0, cells=())


def test_board_stores_cells_as_tuple():
    board = Board(width=2, height=1, cells=[CellState.EMPTY, CellState.FROZEN])
    assert isinstance(board.cells, tuple)
    assert board.cells == (CellState.EMPTY, CellState.FROZEN)


def test_with_cell_returns_new_board_and_leaves_original():
    board = board_from_rows("#.", ".#")
    updated = board.with_cell(1, CellState.CLEARED)
    assert board.cell_at(1) is CellState.EMPTY
    assert updated.cell_at(1) is CellState.CLEARED
    assert updated is not board
    assert updated != board


def test_boards_compare_by_value():
    assert board_from_rows("#.", "x#") == board_from_rows("#.", "x#")


def test_position_and_index_are_row_major():
    board = board_from_rows("...", "...")
    assert board.position(4) == (1, 1)
    assert board.index_of(1, 2) == 5
    assert list(board.rows()) == [board.cells[:3], board.cells[3:]]


def test_from_rows_rejects_ragged_rows():
    with pytest.raises(ValueError):
        Board.from_rows([[CellState.EMPTY, CellState.EMPTY], [CellState.EMPTY]])


def test_board_is_immutable():
    board = board_from_rows(".")
    with pytest.raises(Exception):
        board.width = 3
