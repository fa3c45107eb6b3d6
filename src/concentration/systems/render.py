import arcade

from concentration.events.bus import (
    EventBus,
    EVENT_GAME_COMPLETE,
    EVENT_HINT_SHOWN,
    EVENT_LEVEL_ADVANCE_READY,
    EVENT_LEVEL_STARTED,
    EVENT_TICK,
)
from concentration.rendering.board_renderer import BoardRenderer
from concentration.systems.session_system import SessionSystem

BANNER_COLOR = (255, 220, 120)


class RenderSystem:
    def __init__(self, event_bus: EventBus, window, session_system: SessionSystem):
        self.event_bus = event_bus
        self.window = window
        self.board_renderer = BoardRenderer(session_system)
        self.banner: str | None = None
        self._hint_remaining = 0.0
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_HINT_SHOWN, self.on_hint_shown)
        self.event_bus.subscribe(EVENT_LEVEL_STARTED, self.on_level_started)
        self.event_bus.subscribe(EVENT_LEVEL_ADVANCE_READY, self.on_advance_ready)
        self.event_bus.subscribe(EVENT_GAME_COMPLETE, self.on_game_complete)

    def on_tick(self, sender, **kwargs):
        if self._hint_remaining <= 0.0:
            return
        self._hint_remaining -= kwargs.get('dt', 1/60)
        if self._hint_remaining <= 0.0:
            self.board_renderer.hinted = ()

    def on_hint_shown(self, sender, **kwargs):
        self.board_renderer.hinted = tuple(kwargs.get('tiles', ()))
        self._hint_remaining = float(kwargs.get('duration', 0.0))

    def on_level_started(self, sender, **kwargs):
        self.banner = None
        self.board_renderer.hinted = ()
        self._hint_remaining = 0.0

    def on_advance_ready(self, sender, **kwargs):
        next_level = kwargs.get('next_level')
        if next_level is None:
            self.banner = "Game Complete! Press R to replay the level"
        else:
            self.banner = f"Level Passed! Press N for Level {next_level}"

    def on_game_complete(self, sender, **kwargs):
        self.banner = "Game Complete!"

    def process(self):
        width, height = self.window.width, self.window.height
        self.board_renderer.draw(width, height)
        if self.banner:
            arcade.draw_lrbt_rectangle_filled(0, width, height / 2 - 40, height / 2 + 40, (0, 0, 0, 190))
            arcade.draw_text(
                self.banner,
                width / 2,
                height / 2,
                BANNER_COLOR,
                26,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
