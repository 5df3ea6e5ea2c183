"""Entry point for the Thaw puzzle.

Sets up the world, event bus, systems, and Arcade window.
"""
import logging
import os

from arcade import Window, key, run, set_background_color

from thaw.constants import BACKGROUND_COLOR, UPDATE_RATE, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from thaw.events.bus import (
    EVENT_MOUSE_MOVE_RAW,
    EVENT_MOUSE_PRESS_RAW,
    EVENT_MOUSE_RELEASE_RAW,
    EVENT_RESTART_REQUEST,
    EVENT_TICK,
    EVENT_VIEWPORT_RESIZED,
    EventBus,
)
from thaw.systems.input import InputSystem
from thaw.systems.render import RenderSystem
from thaw.systems.round_system import RoundSystem
from thaw.world import create_world

logger = logging.getLogger(__name__)

RESTART_KEYS = (key.ENTER, key.RETURN, key.R, key.SPACE)


class ThawWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(UPDATE_RATE)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, viewport=(self.width, self.height))
        self.round_system = RoundSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.input_system = InputSystem(self.event_bus, self, self.world)
        set_background_color(BACKGROUND_COLOR)

    def on_resize(self, width: int, height: int):
        self.event_bus.emit(EVENT_VIEWPORT_RESIZED, width=width, height=height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS_RAW, x=x, y=y, button=button, modifiers=modifiers)

    def on_mouse_drag(self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_MOVE_RAW, x=x, y=y, dx=dx, dy=dy)

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.event_bus.emit(EVENT_MOUSE_MOVE_RAW, x=x, y=y, dx=dx, dy=dy)

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_RELEASE_RAW, x=x, y=y, button=button, modifiers=modifiers)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol in RESTART_KEYS:
            self.event_bus.emit(EVENT_RESTART_REQUEST, source="keyboard")


def main():
    logging.basicConfig(
        level=os.environ.get("THAW_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("starting %s", WINDOW_TITLE)
    ThawWindow()
    run()

if __name__ == "__main__":
    main()
