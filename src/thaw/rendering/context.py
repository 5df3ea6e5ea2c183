from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from thaw.components.board import Board
from thaw.components.meter import Meter
from thaw.config import TileSizing
from thaw.ui.layout import BoardGeometry, cell_to_screen, compute_board_geometry

Rect = Tuple[float, float, float, float]  # left, right, bottom, top (arcade y-up)


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    window_width: int
    window_height: int
    board: Board
    meter: Meter
    score: int
    geometry: BoardGeometry

    def cell_rect(self, index: int) -> Rect:
        """Cell rectangle converted from y-down layout pixels to arcade's y-up space."""
        left, top_down = cell_to_screen(index, self.geometry)
        side = self.geometry.side
        top = self.window_height - top_down
        return left, left + side, top - side, top

    def tile_rect(self, col: int, row: int) -> Rect:
        side = self.geometry.side
        left = col * side
        top = self.window_height - row * side
        return left, left + side, top - side, top


def build_render_context(
    window_width: int,
    window_height: int,
    board: Board,
    meter: Meter,
    score: int,
    sizing: TileSizing,
) -> RenderContext | None:
    """Populate a RenderContext for the current frame, or None for a zero-sized window."""

    if window_width <= 0 or window_height <= 0:
        return None
    geometry = compute_board_geometry(window_width, window_height, board.width, board.height, sizing)
    return RenderContext(
        window_width=window_width,
        window_height=window_height,
        board=board,
        meter=meter,
        score=score,
        geometry=geometry,
    )
