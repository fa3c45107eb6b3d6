"""Entry point for the Concentration memory-matching game.

Sets up the ECS world, event bus, session systems and the Arcade window.
"""
import logging

from arcade import Window, color, key, run, set_background_color

from concentration.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from concentration.errors import InvalidTransitionError, LevelOutOfRangeError
from concentration.events.bus import EVENT_MOUSE_PRESS_RAW, EVENT_TICK, EventBus
from concentration.systems.input import InputSystem
from concentration.systems.pacing_system import PacingSystem
from concentration.systems.render import RenderSystem
from concentration.systems.session_system import SessionSystem
from concentration.systems.tap_throttle_system import TapThrottleSystem
from concentration.world import create_world

logger = logging.getLogger(__name__)


class ConcentrationWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world()
        self.tap_throttle_system = TapThrottleSystem(self.event_bus)
        self.session_system = SessionSystem(self.world, self.event_bus)
        self.pacing_system = PacingSystem(self.event_bus, self.session_system)
        self.input_system = InputSystem(self.event_bus, self, self.session_system)
        self.render_system = RenderSystem(self.event_bus, self, self.session_system)
        set_background_color(color.MIDNIGHT_BLUE)
        self.session_system.start_level(1)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(
            EVENT_MOUSE_PRESS_RAW,
            x=x,
            y=y,
            button=button,
            modifiers=modifiers,
        )

    def on_key_press(self, symbol: int, modifiers: int):
        try:
            if symbol == key.N:
                self.session_system.advance_level()
            elif symbol == key.R:
                self.session_system.restart_level()
            elif symbol == key.H:
                self.session_system.request_hint()
            elif symbol == key.ESCAPE:
                self.close()
        except (InvalidTransitionError, LevelOutOfRangeError) as exc:
            logger.info("key %s ignored: %s", symbol, exc)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    ConcentrationWindow()
    run()

if __name__ == "__main__":
    main()
