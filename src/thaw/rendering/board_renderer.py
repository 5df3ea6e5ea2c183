from __future__ import annotations

from thaw.components.cell import CellState
from thaw.constants import (
    CLEARED_COLOR,
    CLEARED_RIBBON_COLOR,
    EMPTY_COLOR,
    FROZEN_COLOR,
    FROZEN_EDGE_COLOR,
)
from thaw.rendering.context import Rect, RenderContext


class BoardRenderer:
    """Draws the frozen backdrop across the viewport, then the board cells on top."""

    def __init__(self, padding: float = 1.0):
        self._padding = padding

    def render(self, arcade, ctx: RenderContext) -> None:
        geometry = ctx.geometry
        for col in range(geometry.tiles_x + 1):
            for row in range(geometry.tiles_y + 1):
                self._draw_frozen(arcade, ctx.tile_rect(col, row))
        for index, cell in enumerate(ctx.board.cells):
            rect = ctx.cell_rect(index)
            if cell is CellState.FROZEN:
                self._draw_frozen(arcade, rect)
            elif cell is CellState.EMPTY:
                left, right, bottom, top = rect
                arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, EMPTY_COLOR)
            else:
                self._draw_cleared(arcade, rect)

    def _draw_frozen(self, arcade, rect: Rect) -> None:
        left, right, bottom, top = rect
        arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, FROZEN_COLOR)
        arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, FROZEN_EDGE_COLOR, border_width=1)

    def _draw_cleared(self, arcade, rect: Rect) -> None:
        left, right, bottom, top = rect
        pad = self._padding + (right - left) * 0.12
        arcade.draw_lrbt_rectangle_filled(left + pad, right - pad, bottom + pad, top - pad, CLEARED_COLOR)
        # Ribbon cross on the present.
        mid_x = (left + right) / 2
        mid_y = (bottom + top) / 2
        ribbon = max(1.0, (right - left) * 0.08)
        arcade.draw_lrbt_rectangle_filled(mid_x - ribbon, mid_x + ribbon, bottom + pad, top - pad, CLEARED_RIBBON_COLOR)
        arcade.draw_lrbt_rectangle_filled(left + pad, right - pad, mid_y - ribbon, mid_y + ribbon, CLEARED_RIBBON_COLOR)
