from esper import World

from thaw.components.board import Board
from thaw.components.meter import Meter
from thaw.config import RoundConfig
from thaw.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_LOST_INDICATOR,
    EVENT_METER_CHANGED,
    EVENT_SCORE_CHANGED,
    EVENT_WON_INDICATOR,
    EventBus,
)
from thaw.rendering.board_renderer import BoardRenderer
from thaw.rendering.context import RenderContext, build_render_context
from thaw.rendering.indicator_renderer import IndicatorRenderer, restart_button_rect
from thaw.rendering.meter_renderer import MeterRenderer
from thaw.utils.round_state import get_round_state


class RenderSystem:
    """Render sink: mirrors board/meter/score/indicator events and draws them every frame.

    Drawing continues in every phase, so a transition pause only freezes input,
    never the picture.
    """

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.config: RoundConfig = getattr(world, "config", None) or RoundConfig()
        state = get_round_state(world)
        self.board: Board = state.board
        self.meter: Meter = state.meter
        self.score: int = state.score
        self.won_visible = False
        self.lost_visible = False
        self.lost_score = 0
        self._render_ctx: RenderContext | None = None
        self._board_renderer = BoardRenderer()
        self._meter_renderer = MeterRenderer()
        self._indicator_renderer = IndicatorRenderer()
        self.event_bus.subscribe(EVENT_BOARD_CHANGED, self.on_board_changed)
        self.event_bus.subscribe(EVENT_METER_CHANGED, self.on_meter_changed)
        self.event_bus.subscribe(EVENT_SCORE_CHANGED, self.on_score_changed)
        self.event_bus.subscribe(EVENT_WON_INDICATOR, self.on_won_indicator)
        self.event_bus.subscribe(EVENT_LOST_INDICATOR, self.on_lost_indicator)

    def on_board_changed(self, sender, **kwargs):
        board = kwargs.get('board')
        if isinstance(board, Board):
            self.board = board

    def on_meter_changed(self, sender, **kwargs):
        time = kwargs.get('time')
        max_time = kwargs.get('max_time')
        if time is None or max_time is None:
            return
        self.meter = Meter(time=float(time), max_time=float(max_time))

    def on_score_changed(self, sender, **kwargs):
        score = kwargs.get('score')
        if score is not None:
            self.score = int(score)

    def on_won_indicator(self, sender, **kwargs):
        self.won_visible = bool(kwargs.get('visible'))

    def on_lost_indicator(self, sender, **kwargs):
        self.lost_visible = bool(kwargs.get('visible'))
        self.lost_score = int(kwargs.get('score', self.score) or 0)
        if self.lost_visible:
            self._indicator_renderer.restart_button = restart_button_rect(self.window.width, self.window.height)
        else:
            self._indicator_renderer.clear_lost()

    def get_restart_button_at_point(self, x: float, y: float) -> bool:
        """True when a y-up window point hits the restart button of the lost overlay."""
        if not self.lost_visible:
            return False
        return self._indicator_renderer.hit_restart(x, y)

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        ctx = build_render_context(
            int(self.window.width),
            int(self.window.height),
            self.board,
            self.meter,
            self.score,
            self.config.tile_sizing,
        )
        self._render_ctx = ctx
        if ctx is None:
            return
        if not headless:
            self._board_renderer.render(arcade, ctx)
            self._meter_renderer.render(arcade, ctx)
            if self.won_visible:
                self._indicator_renderer.render_won(arcade, ctx)
        if self.lost_visible:
            self._indicator_renderer.render_lost(arcade, ctx, self.lost_score, headless=headless)
