from __future__ import annotations

from thaw.constants import LOST_OVERLAY_COLOR, RESTART_BUTTON_SIZE, TEXT_COLOR, WON_OVERLAY_COLOR
from thaw.rendering.context import Rect, RenderContext


def restart_button_rect(window_width: float, window_height: float) -> Rect:
    width, height = RESTART_BUTTON_SIZE
    left = (window_width - width) / 2
    bottom = window_height / 2 - height * 2
    return left, left + width, bottom, bottom + height


class IndicatorRenderer:
    """Won/lost overlays. The lost overlay carries the final score and a restart button."""

    def __init__(self):
        self.restart_button: Rect | None = None

    def render_won(self, arcade, ctx: RenderContext) -> None:
        arcade.draw_lrbt_rectangle_filled(0, ctx.window_width, 0, ctx.window_height, WON_OVERLAY_COLOR)
        arcade.draw_text(
            "Thawed!",
            ctx.window_width / 2,
            ctx.window_height / 2,
            (40, 40, 40),
            48,
            anchor_x="center",
            anchor_y="center",
        )

    def render_lost(self, arcade, ctx: RenderContext, score: int, *, headless: bool = False) -> None:
        self.restart_button = restart_button_rect(ctx.window_width, ctx.window_height)
        if headless:
            return
        cx = ctx.window_width / 2
        cy = ctx.window_height / 2
        arcade.draw_lrbt_rectangle_filled(0, ctx.window_width, 0, ctx.window_height, LOST_OVERLAY_COLOR)
        arcade.draw_text("Frozen solid", cx, cy + 60, TEXT_COLOR, 40, anchor_x="center", anchor_y="center")
        arcade.draw_text(f"Score {score}", cx, cy, TEXT_COLOR, 24, anchor_x="center", anchor_y="center")
        left, right, bottom, top = self.restart_button
        arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, (70, 110, 160))
        arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, (255, 255, 255), border_width=2)
        arcade.draw_text(
            "Restart",
            (left + right) / 2,
            (bottom + top) / 2,
            TEXT_COLOR,
            18,
            anchor_x="center",
            anchor_y="center",
        )

    def clear_lost(self) -> None:
        self.restart_button = None

    def hit_restart(self, x: float, y: float) -> bool:
        if self.restart_button is None:
            return False
        left, right, bottom, top = self.restart_button
        return left <= x <= right and bottom <= y <= top
