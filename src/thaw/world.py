import random

from esper import World

from thaw.components.board import Board
from thaw.components.round_state import RoundPhase, RoundState
from thaw.components.viewport import Viewport
from thaw.config import RoundConfig
from thaw.constants import WINDOW_HEIGHT, WINDOW_WIDTH
from thaw.events.bus import EventBus
from thaw.systems.layout_generator import opening_board
from thaw.systems.meter_ledger import fresh_meter


def create_world(
    event_bus: EventBus,
    *,
    config: RoundConfig | None = None,
    rng: random.Random | None = None,
    initial_board: Board | None = None,
    viewport: tuple[float, float] = (WINDOW_WIDTH, WINDOW_HEIGHT),
) -> World:
    """Build the world holding the single RoundState and Viewport resources.

    The first round is played on ``initial_board`` (the fixed opening board by
    default); later boards come from the layout generator.
    """
    config = config or RoundConfig()
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "config", config)

    state_entity = world.create_entity()
    world.add_component(
        state_entity,
        RoundState(
            board=initial_board if initial_board is not None else opening_board(),
            meter=fresh_meter(config.initial_time),
            phase=RoundPhase.RUNNING,
        ),
    )
    width, height = viewport
    world.add_component(state_entity, Viewport(width=float(width), height=float(height)))
    return world
