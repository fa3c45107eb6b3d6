from concentration.events.bus import (
    EventBus,
    EVENT_HINT_REQUEST,
    EVENT_MOUSE_PRESS,
    EVENT_TILE_CLICK,
)
from concentration.systems.session_system import SessionSystem
from concentration.ui.layout import compute_board_geometry, hint_button_rect

LEFT_BUTTON = 1


class InputSystem:
    """Maps throttled mouse presses onto the hint button or a board tile."""

    def __init__(self, event_bus: EventBus, window, session_system: SessionSystem):
        self.event_bus = event_bus
        self.window = window
        self.sessions = session_system
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None or kwargs.get('button') != LEFT_BUTTON:
            return
        left, bottom, width, height = hint_button_rect(self.window.width, self.window.height)
        if left <= x <= left + width and bottom <= y <= bottom + height:
            self.event_bus.emit(EVENT_HINT_REQUEST)
            return
        tile_ids = self.sessions.board.tile_entities
        if not tile_ids:
            return
        geometry = compute_board_geometry(self.window.width, self.window.height, len(tile_ids))
        index = geometry.index_at(x, y, len(tile_ids))
        if index is None:
            return
        self.event_bus.emit(EVENT_TILE_CLICK, tile_id=tile_ids[index])
