"""Round state machine: RUNNING, WON_TRANSITION, LOST_TRANSITION, RESTARTING."""
from __future__ import annotations

import logging
import random

from esper import World

from thaw.components.board import Board
from thaw.components.round_state import RoundPhase, RoundState, WonStage
from thaw.config import RoundConfig
from thaw.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_CELL_CLEARED,
    EVENT_LOST_INDICATOR,
    EVENT_METER_CHANGED,
    EVENT_POINTER_DOWN,
    EVENT_POINTER_MOVE,
    EVENT_POINTER_UP,
    EVENT_RESTART_REQUEST,
    EVENT_ROUND_LOST,
    EVENT_ROUND_STARTED,
    EVENT_ROUND_WON,
    EVENT_SCORE_CHANGED,
    EVENT_TICK,
    EVENT_VIEWPORT_RESIZED,
    EVENT_WON_INDICATOR,
    EventBus,
)
from thaw.systems import meter_ledger
from thaw.systems.board_ops import apply_action, is_complete
from thaw.systems.layout_generator import generate
from thaw.ui.layout import screen_to_cell
from thaw.utils.round_state import get_round_state, get_viewport, set_round_phase

logger = logging.getLogger(__name__)


class RoundSystem:
    """Owns the RoundState and advances it from ticks, pointer events and restart requests.

    Transition pauses are deadlines on the accumulated tick clock rather than
    blocking waits, so rendering keeps running every frame while input stays
    frozen. Decay is applied only to ticks spent in RUNNING, which means time
    spent in a pause never drains the meter.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        config: RoundConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.config = config or getattr(world, "config", None) or RoundConfig()
        self._rng = rng or getattr(world, "random", None) or random.Random()
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_POINTER_DOWN, self.on_pointer_down)
        self.event_bus.subscribe(EVENT_POINTER_MOVE, self.on_pointer_move)
        self.event_bus.subscribe(EVENT_POINTER_UP, self.on_pointer_up)
        self.event_bus.subscribe(EVENT_RESTART_REQUEST, self.on_restart_request)
        self.event_bus.subscribe(EVENT_VIEWPORT_RESIZED, self.on_viewport_resized)

    @property
    def state(self) -> RoundState:
        return get_round_state(self.world)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def on_tick(self, sender, **kwargs) -> None:
        dt = kwargs.get("dt")
        if dt is None:
            return
        try:
            elapsed_ms = float(dt) * 1000.0
        except (TypeError, ValueError):
            return
        if elapsed_ms < 0:
            return
        state = self.state
        state.clock_ms += elapsed_ms
        if state.phase is RoundPhase.RUNNING:
            self._decay(state, elapsed_ms)
            self._resolve(state)
        elif state.phase is RoundPhase.WON_TRANSITION:
            self._advance_won(state)
        elif state.phase is RoundPhase.RESTARTING:
            self._advance_restart(state)

    def on_pointer_down(self, sender, **kwargs) -> None:
        state = self.state
        if not state.accepts_input:
            return
        state.pointer_held = True
        self._take_turn(state, kwargs)

    def on_pointer_move(self, sender, **kwargs) -> None:
        state = self.state
        if not state.accepts_input or not state.pointer_held:
            return
        self._take_turn(state, kwargs)

    def on_pointer_up(self, sender, **kwargs) -> None:
        self.state.pointer_held = False

    def on_restart_request(self, sender, **kwargs) -> None:
        state = self.state
        if state.phase is not RoundPhase.LOST_TRANSITION:
            return
        logger.info("restart requested (%s)", kwargs.get("source", "unknown"))
        self.event_bus.emit(EVENT_LOST_INDICATOR, visible=False, score=state.score)
        state.pending_board = self._generate()
        state.restart_steps_done = 0
        state.phase_deadline_ms = state.clock_ms
        set_round_phase(self.world, self.event_bus, RoundPhase.RESTARTING)

    def on_viewport_resized(self, sender, **kwargs) -> None:
        width = kwargs.get("width")
        height = kwargs.get("height")
        if width is None or height is None:
            return
        viewport = get_viewport(self.world)
        if viewport is None:
            return
        viewport.width = float(width)
        viewport.height = float(height)

    # ------------------------------------------------------------------
    # Running
    # ------------------------------------------------------------------

    def _decay(self, state: RoundState, elapsed_ms: float) -> None:
        meter = meter_ledger.decay(
            state.meter,
            elapsed_ms,
            self.config.decay_coefficient,
            floor=self.config.meter_floor,
        )
        if meter != state.meter:
            state.meter = meter
            self._emit_meter(state, reason="decay")

    def _take_turn(self, state: RoundState, payload: dict) -> None:
        x = payload.get("x")
        y = payload.get("y")
        if x is None or y is None:
            return
        width, height = self._viewport_size(payload)
        board = state.board
        index = screen_to_cell(
            float(x),
            float(y),
            width,
            height,
            board.width,
            board.height,
            self.config.tile_sizing,
        )
        if index is None:
            return
        updated = apply_action(board, index)
        if updated is board:
            return
        state.board = updated
        row, col = updated.position(index)
        self.event_bus.emit(EVENT_CELL_CLEARED, index=index, row=row, col=col)
        self.event_bus.emit(EVENT_BOARD_CHANGED, board=updated, reason="turn", index=index)
        self._resolve(state)

    def _viewport_size(self, payload: dict) -> tuple[float, float]:
        width = payload.get("viewport_width")
        height = payload.get("viewport_height")
        if width is not None and height is not None:
            return float(width), float(height)
        viewport = get_viewport(self.world)
        if viewport is None:
            return 0.0, 0.0
        return viewport.width, viewport.height

    def _resolve(self, state: RoundState) -> None:
        """Loss takes precedence: a complete board with an empty meter is still a loss."""
        if state.phase is not RoundPhase.RUNNING:
            return
        if meter_ledger.is_lost(state.meter, floor=self.config.meter_floor):
            self._enter_lost(state)
        elif is_complete(state.board):
            self._enter_won(state)

    # ------------------------------------------------------------------
    # Won path
    # ------------------------------------------------------------------

    def _enter_won(self, state: RoundState) -> None:
        state.pointer_held = False
        points = meter_ledger.win_points(state.board)
        healed = meter_ledger.heal_amount(points, self.config.heal_per_point)
        state.score += points
        state.rounds_won += 1
        state.meter = meter_ledger.heal(state.meter, healed, floor=self.config.meter_floor)
        state.pending_board = self._generate()
        state.won_stage = WonStage.FLASH
        state.phase_deadline_ms = state.clock_ms + self.config.won_flash_ms
        set_round_phase(self.world, self.event_bus, RoundPhase.WON_TRANSITION)
        logger.info("round won: +%d points, score %d, meter %.1f", points, state.score, state.meter.time)
        self.event_bus.emit(EVENT_ROUND_WON, points=points, score=state.score, healed=healed)
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=state.score, delta=points)
        self._emit_meter(state, reason="heal")
        self.event_bus.emit(EVENT_WON_INDICATOR, visible=True)

    def _advance_won(self, state: RoundState) -> None:
        if state.clock_ms < state.phase_deadline_ms:
            return
        if state.won_stage is WonStage.FLASH:
            state.won_stage = WonStage.SETTLE
            state.phase_deadline_ms = state.clock_ms + self.config.won_settle_ms
            self.event_bus.emit(EVENT_WON_INDICATOR, visible=False)
            return
        state.won_stage = None
        self._start_round(state, reason="won")

    # ------------------------------------------------------------------
    # Lost / restart path
    # ------------------------------------------------------------------

    def _enter_lost(self, state: RoundState) -> None:
        state.pointer_held = False
        state.final_score = state.score
        set_round_phase(self.world, self.event_bus, RoundPhase.LOST_TRANSITION)
        logger.info("round lost with score %d", state.score)
        self.event_bus.emit(EVENT_ROUND_LOST, score=state.score)
        self.event_bus.emit(EVENT_LOST_INDICATOR, visible=True, score=state.score)

    def _advance_restart(self, state: RoundState) -> None:
        steps = self.config.restart_ease_steps
        moved = False
        while state.restart_steps_done < steps and state.clock_ms >= state.phase_deadline_ms:
            state.meter = meter_ledger.ease_toward(
                state.meter,
                self.config.initial_time,
                self.config.restart_ease_fraction,
            )
            state.restart_steps_done += 1
            state.phase_deadline_ms += self.config.restart_step_ms
            moved = True
        if moved:
            self._emit_meter(state, reason="restart")
        if state.restart_steps_done < steps:
            return
        delta = -state.score
        state.score = 0
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=0, delta=delta)
        self._start_round(state, reason="restart")

    # ------------------------------------------------------------------
    # Utility helpers
    # ------------------------------------------------------------------

    def _start_round(self, state: RoundState, *, reason: str) -> None:
        if state.pending_board is not None:
            state.board = state.pending_board
            state.pending_board = None
        state.phase_deadline_ms = state.clock_ms
        set_round_phase(self.world, self.event_bus, RoundPhase.RUNNING)
        self.event_bus.emit(EVENT_BOARD_CHANGED, board=state.board, reason=reason, index=None)
        self.event_bus.emit(EVENT_ROUND_STARTED, board=state.board, reason=reason)

    def _generate(self) -> Board:
        return generate(
            self.config.probability_bias,
            self.config.size_range,
            self._rng,
            max_attempts=self.config.max_generation_attempts,
        )

    def _emit_meter(self, state: RoundState, *, reason: str) -> None:
        self.event_bus.emit(
            EVENT_METER_CHANGED,
            time=state.meter.time,
            max_time=state.meter.max_time,
            reason=reason,
        )
