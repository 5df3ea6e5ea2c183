from __future__ import annotations

from thaw.components.board import Board
from thaw.components.cell import CellState


def is_complete(board: Board) -> bool:
    """True when no EMPTY cell remains; FROZEN/CLEARED distribution is irrelevant."""
    return all(cell is not CellState.EMPTY for cell in board.cells)


def count_cells(board: Board, state: CellState) -> int:
    return board.count(state)


def is_actionable(board: Board, index: int) -> bool:
    return board.in_range(index) and board.cell_at(index) is CellState.EMPTY


def apply_action(board: Board, index: int | None) -> Board:
    """Clear the EMPTY cell at ``index``.

    Out-of-range indices and non-EMPTY targets return ``board`` itself, so
    repeated calls during a drag are independent and idempotent.
    """
    if index is None or not is_actionable(board, index):
        return board
    return board.with_cell(index, CellState.CLEARED)
