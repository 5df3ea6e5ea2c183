import random

from thaw.components.meter import Meter
from thaw.config import RoundConfig
from thaw.events.bus import EVENT_METER_CHANGED, EVENT_RESTART_REQUEST, EventBus
from thaw.rendering.context import build_render_context
from thaw.rendering.indicator_renderer import restart_button_rect
from thaw.systems.render import RenderSystem
from thaw.systems.round_system import RoundSystem
from thaw.utils.round_state import get_round_state
from thaw.world import create_world
from tests.helpers import board_from_rows, click, tick


def _setup(config=None):
    bus = EventBus()
    world = create_world(bus, config=config, rng=random.Random(2))
    RoundSystem(world, bus)
    window = type('W', (), {'width': 900, 'height': 900})()
    render = RenderSystem(world, bus, window)
    return bus, world, render


def test_render_sink_starts_from_round_state():
    bus, world, render = _setup()
    state = get_round_state(world)
    assert render.board == state.board
    assert render.meter == state.meter
    assert render.score == 0


def test_render_sink_follows_turns_and_meter():
    bus, world, render = _setup()
    state = get_round_state(world)
    click(bus, state.board, 4)
    assert render.board == state.board
    tick(bus, 0.5)
    assert render.meter == state.meter


def test_won_indicator_toggles_through_transition():
    bus, world, render = _setup()
    state = get_round_state(world)
    board = state.board
    for index in (1, 3, 4, 5, 7):
        click(bus, board, index)
    assert render.won_visible
    assert render.score == 5
    tick(bus, 0.5)
    assert not render.won_visible
    tick(bus, 0.5)
    assert render.board == state.board


def test_lost_indicator_carries_score_and_clears_on_restart():
    bus, world, render = _setup(RoundConfig(initial_time=10.0))
    tick(bus, 0.6)
    assert render.lost_visible
    assert render.lost_score == 0
    assert render.get_restart_button_at_point(450.0, 366.0)
    bus.emit(EVENT_RESTART_REQUEST, source="test")
    assert not render.lost_visible
    assert not render.get_restart_button_at_point(450.0, 366.0)


def test_meter_events_rebuild_meter_value():
    bus, _, render = _setup()
    bus.emit(EVENT_METER_CHANGED, time=12.0, max_time=40.0, reason="test")
    assert render.meter == Meter(time=12.0, max_time=40.0)
    assert render.meter.fraction == 0.3


def test_render_context_maps_cells_to_y_up_rectangles():
    board = board_from_rows("#.#", "...", "#.#")
    ctx = build_render_context(900, 900, board, Meter(10, 10), 0, RoundConfig().tile_sizing)
    # Top-left cell sits one tile in from the top-left corner.
    assert ctx.cell_rect(0) == (180.0, 360.0, 540.0, 720.0)
    assert ctx.tile_rect(0, 0) == (0.0, 180.0, 720.0, 900.0)


def test_render_context_skips_zero_sized_window():
    board = board_from_rows(".")
    assert build_render_context(0, 600, board, Meter(10, 10), 0, RoundConfig().tile_sizing) is None


def test_restart_button_is_centred_horizontally():
    left, right, bottom, top = restart_button_rect(900, 900)
    assert (left + right) / 2 == 450
    assert top - bottom == 56
