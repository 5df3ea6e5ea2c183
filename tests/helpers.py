from __future__ import annotations

from typing import Tuple

from thaw.components.board import Board
from thaw.components.cell import CellState
from thaw.config import TileSizing
from thaw.events.bus import EVENT_POINTER_DOWN, EVENT_POINTER_UP, EVENT_TICK, EventBus
from thaw.ui.layout import cell_to_screen, compute_board_geometry

_CODES = {
    '#': CellState.FROZEN,
    '.': CellState.EMPTY,
    'x': CellState.CLEARED,
}


def board_from_rows(*rows: str) -> Board:
    """Build a board from rows such as ``"#.#"`` (# frozen, . empty, x cleared)."""

    return Board.from_rows([[_CODES[ch] for ch in row] for row in rows])


def cell_center(
    board: Board,
    index: int,
    viewport: Tuple[float, float] = (900.0, 900.0),
    sizing: TileSizing = TileSizing.LONGER_AXIS,
) -> Tuple[float, float]:
    """Y-down pixel at the centre of a cell."""

    geometry = compute_board_geometry(viewport[0], viewport[1], board.width, board.height, sizing)
    left, top = cell_to_screen(index, geometry)
    return left + geometry.side / 2, top + geometry.side / 2


def click(bus: EventBus, board: Board, index: int, viewport: Tuple[float, float] = (900.0, 900.0)) -> None:
    x, y = cell_center(board, index, viewport)
    bus.emit(EVENT_POINTER_DOWN, x=x, y=y, viewport_width=viewport[0], viewport_height=viewport[1])
    bus.emit(EVENT_POINTER_UP, x=x, y=y)


def tick(bus: EventBus, seconds: float) -> None:
    bus.emit(EVENT_TICK, dt=seconds)
