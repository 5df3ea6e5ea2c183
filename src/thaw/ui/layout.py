from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from thaw.config import TileSizing
from thaw.constants import BOARD_MARGIN_TILES


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass(frozen=True, slots=True)
class BoardGeometry:
    """Tile grid placement for one board inside one viewport (y-down pixels)."""

    side: float
    tiles_x: int
    tiles_y: int
    offset_cols: int
    offset_rows: int
    board_width: int
    board_height: int

    @property
    def origin_x(self) -> float:
        return self.offset_cols * self.side

    @property
    def origin_y(self) -> float:
        return self.offset_rows * self.side


def compute_board_geometry(
    viewport_width: float,
    viewport_height: float,
    board_width: int,
    board_height: int,
    sizing: TileSizing = TileSizing.LONGER_AXIS,
) -> BoardGeometry:
    """Return the shared tile geometry used by both rendering and pointer mapping.

    The tile side leaves BOARD_MARGIN_TILES tiles of margin along the axis
    selected by ``sizing``; the board is then centred on the whole-tile grid
    that fits the viewport.
    """
    if viewport_width <= 0 or viewport_height <= 0:
        raise ValueError(f"viewport must be positive, got {viewport_width}x{viewport_height}")
    if sizing is TileSizing.SHORTER_AXIS:
        span = min(board_width, board_height)
    else:
        span = max(board_width, board_height)
    side = min(viewport_width, viewport_height) / (span + BOARD_MARGIN_TILES)
    tiles_x = int(math.floor(viewport_width / side))
    tiles_y = int(math.floor(viewport_height / side))
    return BoardGeometry(
        side=side,
        tiles_x=tiles_x,
        tiles_y=tiles_y,
        offset_cols=_round_half_up((tiles_x - board_width) / 2),
        offset_rows=_round_half_up((tiles_y - board_height) / 2),
        board_width=board_width,
        board_height=board_height,
    )


def screen_to_cell(
    x: float,
    y: float,
    viewport_width: float,
    viewport_height: float,
    board_width: int,
    board_height: int,
    sizing: TileSizing = TileSizing.LONGER_AXIS,
) -> int | None:
    """Map a y-down pointer position to a cell index, or None when it misses the board."""
    if viewport_width <= 0 or viewport_height <= 0 or board_width <= 0 or board_height <= 0:
        return None
    geometry = compute_board_geometry(viewport_width, viewport_height, board_width, board_height, sizing)
    col = int(math.floor((x - geometry.origin_x) / geometry.side))
    row = int(math.floor((y - geometry.origin_y) / geometry.side))
    if not (0 <= col < board_width and 0 <= row < board_height):
        return None
    return row * board_width + col


def cell_to_screen(index: int, geometry: BoardGeometry) -> Tuple[float, float]:
    """Top-left y-down pixel of a cell."""
    row, col = divmod(index, geometry.board_width)
    return geometry.origin_x + col * geometry.side, geometry.origin_y + row * geometry.side
