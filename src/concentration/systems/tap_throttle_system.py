from __future__ import annotations

from typing import Any

from concentration.events.bus import (
    EVENT_HINT_SHOWN,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_PRESS_RAW,
    EventBus,
)
from concentration.utils.input_throttle import TapThrottle


class TapThrottleSystem:
    """Gate between raw mouse presses and the board.

    Drops bursts of presses inside one admission window and holds all input
    while a hint flash is on screen.
    """

    def __init__(self, event_bus: EventBus, *, throttle: TapThrottle | None = None) -> None:
        self.event_bus = event_bus
        self.throttle = throttle or TapThrottle()
        self.event_bus.subscribe(EVENT_MOUSE_PRESS_RAW, self._on_mouse_press_raw)
        self.event_bus.subscribe(EVENT_HINT_SHOWN, self._on_hint_shown)

    def _on_hint_shown(self, sender: Any, **payload: Any) -> None:
        self.throttle.hold(float(payload.get("duration", 0.0)))

    def _on_mouse_press_raw(self, sender: Any, **payload: Any) -> None:
        x = payload.get("x")
        y = payload.get("y")
        button = payload.get("button")
        if x is None or y is None or button is None:
            return
        if not self.throttle.allow():
            return
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=float(x), y=float(y), button=int(button))
