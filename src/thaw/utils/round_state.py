from __future__ import annotations

from esper import World

from thaw.components.round_state import RoundPhase, RoundState
from thaw.components.viewport import Viewport
from thaw.events.bus import EVENT_PHASE_CHANGED, EventBus


def get_round_state(world: World) -> RoundState:
    for _, state in world.get_component(RoundState):
        return state
    raise RuntimeError("RoundState not found; build the world with create_world")


def get_viewport(world: World) -> Viewport | None:
    for _, viewport in world.get_component(Viewport):
        return viewport
    return None


def set_round_phase(world: World, event_bus: EventBus, phase: RoundPhase) -> None:
    """Update the round phase and emit a change event when it differs."""

    state = get_round_state(world)
    previous_phase = state.phase
    if previous_phase is phase:
        return
    state.phase = phase
    event_bus.emit(
        EVENT_PHASE_CHANGED,
        previous_phase=previous_phase,
        new_phase=phase,
    )
