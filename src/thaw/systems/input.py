from esper import World

from thaw.components.round_state import RoundPhase
from thaw.events.bus import (
    EventBus,
    EVENT_MOUSE_MOVE_RAW,
    EVENT_MOUSE_PRESS_RAW,
    EVENT_MOUSE_RELEASE_RAW,
    EVENT_POINTER_DOWN,
    EVENT_POINTER_MOVE,
    EVENT_POINTER_UP,
    EVENT_RESTART_REQUEST,
)
from thaw.utils.round_state import get_round_state

LEFT_BUTTON = 1


class InputSystem:
    """Turns raw window mouse events (y-up) into pointer events (y-down).

    While a round is lost, a left click on the restart button becomes a restart
    request instead of a pointer event.
    """

    def __init__(self, event_bus: EventBus, window, world: World | None = None):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS_RAW, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_MOUSE_MOVE_RAW, self.on_mouse_move)
        self.event_bus.subscribe(EVENT_MOUSE_RELEASE_RAW, self.on_mouse_release)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        if button != LEFT_BUTTON:
            return
        if self._lost_active():
            render_system = getattr(self.window, 'render_system', None)
            if render_system and hasattr(render_system, 'get_restart_button_at_point'):
                if render_system.get_restart_button_at_point(x, y):
                    self.event_bus.emit(EVENT_RESTART_REQUEST, source="restart_button")
            return
        self.event_bus.emit(EVENT_POINTER_DOWN, **self._pointer_payload(x, y))

    def on_mouse_move(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        self.event_bus.emit(EVENT_POINTER_MOVE, **self._pointer_payload(x, y))

    def on_mouse_release(self, sender, **kwargs):
        button = kwargs.get('button')
        if button is not None and button != LEFT_BUTTON:
            return
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is not None and y is not None:
            self.event_bus.emit(EVENT_POINTER_UP, **self._pointer_payload(x, y))
        else:
            self.event_bus.emit(EVENT_POINTER_UP, x=None, y=None)

    def _pointer_payload(self, x: float, y: float) -> dict:
        height = float(self.window.height)
        return {
            'x': float(x),
            'y': height - float(y),
            'viewport_width': float(self.window.width),
            'viewport_height': height,
        }

    def _lost_active(self) -> bool:
        if self.world is None:
            return False
        try:
            state = get_round_state(self.world)
        except RuntimeError:
            return False
        return state.phase is RoundPhase.LOST_TRANSITION
