"""Random board generation with rejection of already-complete layouts."""
from __future__ import annotations

import logging
import random

from thaw.components.board import Board
from thaw.components.cell import CellState
from thaw.config import SQUARE_SMALL, SizeRange
from thaw.constants import CELL_DRAW_MAX, MAX_GENERATION_ATTEMPTS
from thaw.errors import LayoutGenerationError
from thaw.systems.board_ops import is_complete

logger = logging.getLogger(__name__)

_F = CellState.FROZEN
_E = CellState.EMPTY


def opening_board() -> Board:
    """Fixed plus-shaped board played before the first generated one."""
    return Board.from_rows(
        (
            (_F, _E, _F),
            (_E, _E, _E),
            (_F, _E, _F),
        )
    )


def _draw_board(probability_bias: int, size_range: SizeRange, rng: random.Random) -> Board:
    width = rng.randint(size_range.min_width, size_range.max_width)
    height = rng.randint(size_range.min_height, size_range.max_height)
    cells = tuple(
        CellState.EMPTY if rng.randint(0, CELL_DRAW_MAX) <= probability_bias else CellState.FROZEN
        for _ in range(width * height)
    )
    return Board(width=width, height=height, cells=cells)


def generate(
    probability_bias: int,
    size_range: SizeRange = SQUARE_SMALL,
    rng: random.Random | None = None,
    *,
    max_attempts: int = MAX_GENERATION_ATTEMPTS,
) -> Board:
    """Return a board containing at least one EMPTY cell.

    A rejected (already complete) board is redrawn with the bias raised by one,
    so at ``probability_bias >= CELL_DRAW_MAX`` every cell is EMPTY and the loop
    ends. ``max_attempts`` caps the loop regardless.
    """
    if probability_bias < 0:
        raise ValueError(f"probability_bias must be >= 0, got {probability_bias}")
    if not isinstance(size_range, SizeRange):
        raise ValueError(f"size_range must be a SizeRange, got {size_range!r}")
    rng = rng or random.Random()
    bias = probability_bias
    for _ in range(max_attempts):
        board = _draw_board(bias, size_range, rng)
        if not is_complete(board):
            return board
        logger.debug("rejected complete %dx%d board at bias %d", board.width, board.height, bias)
        bias += 1
    raise LayoutGenerationError(
        f"no actionable board after {max_attempts} attempts starting at bias {probability_bias}"
    )
