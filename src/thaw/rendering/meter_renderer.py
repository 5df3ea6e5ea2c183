from thaw.constants import (
    METER_BAR_HEIGHT,
    METER_COLOR,
    METER_LOW_COLOR,
    METER_MARGIN,
    TEXT_COLOR,
)
from thaw.rendering.context import RenderContext


class MeterRenderer:
    """Draw the time meter along the top edge, scaled by its high-water mark."""

    def __init__(self, low_fraction: float = 0.25):
        self._low_fraction = low_fraction
        self.layout_cache: tuple[float, float, float, float] | None = None

    def render(self, arcade, ctx: RenderContext) -> None:
        meter = ctx.meter
        left = METER_MARGIN
        right = ctx.window_width - METER_MARGIN
        top = ctx.window_height - METER_MARGIN
        bottom = top - METER_BAR_HEIGHT
        if right <= left:
            return
        pct = meter.fraction
        arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, (255, 255, 255), border_width=2)
        fill_width = (right - left - 2) * pct
        if fill_width > 0:
            color = METER_LOW_COLOR if pct <= self._low_fraction else METER_COLOR
            arcade.draw_lrbt_rectangle_filled(left + 1, left + 1 + fill_width, bottom + 1, top - 1, color)
        arcade.draw_text(f"Time {meter.time:.0f}", left, bottom - 18, TEXT_COLOR, 12)
        arcade.draw_text(f"Score {ctx.score}", right, bottom - 18, TEXT_COLOR, 12, anchor_x="right")
        self.layout_cache = (left, right, bottom, top)
