from concentration.events.bus import (
    EVENT_HINT_SHOWN,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_PRESS_RAW,
    EVENT_TILE_CLICK,
)
from concentration.systems.input import InputSystem
from concentration.systems.tap_throttle_system import TapThrottleSystem
from concentration.ui.layout import compute_board_geometry, hint_button_rect
from concentration.utils.input_throttle import TapThrottle

from helpers import record


class DummyWindow:
    def __init__(self):
        self.width = 800
        self.height = 600


def _tile_centre(window, tile_count, index):
    geometry = compute_board_geometry(window.width, window.height, tile_count)
    left, bottom, width, height = geometry.tile_rect(index)
    return left + width / 2, bottom + height / 2


def test_left_click_on_tile_selects_it(playing, bus):
    window = DummyWindow()
    InputSystem(bus, window, playing)
    clicks = record(bus, EVENT_TILE_CLICK)
    tiles = playing.tiles()
    x, y = _tile_centre(window, len(tiles), 3)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert clicks == [{"tile_id": tiles[3][0]}]
    assert playing.session.pending_first == tiles[3][0]
    assert playing.tile(tiles[3][0]).revealed


def test_right_click_ignored(playing, bus):
    window = DummyWindow()
    InputSystem(bus, window, playing)
    clicks = record(bus, EVENT_TILE_CLICK)
    x, y = _tile_centre(window, len(playing.tiles()), 0)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=4)
    assert clicks == []


def test_hint_button_requests_hint(playing, bus):
    window = DummyWindow()
    InputSystem(bus, window, playing)
    shown = record(bus, EVENT_HINT_SHOWN)
    left, bottom, width, height = hint_button_rect(window.width, window.height)
    bus.emit(EVENT_MOUSE_PRESS, x=left + width / 2, y=bottom + height / 2, button=1)
    assert len(shown) == 1


def test_burst_of_raw_taps_reaches_board_once(playing, bus):
    window = DummyWindow()
    TapThrottleSystem(bus, throttle=TapThrottle(min_interval=0.2, clock=lambda: 0.0))
    InputSystem(bus, window, playing)
    clicks = record(bus, EVENT_TILE_CLICK)
    tiles = playing.tiles()
    for index in (0, 1, 2):
        x, y = _tile_centre(window, len(tiles), index)
        bus.emit(EVENT_MOUSE_PRESS_RAW, x=x, y=y, button=1, modifiers=0)
    assert clicks == [{"tile_id": tiles[0][0]}]


class _FakeClock:
    def __init__(self):
        self.value = 0.0

    def __call__(self):
        return self.value


def test_clicks_dropped_during_hint_flash(playing, bus):
    window = DummyWindow()
    clock = _FakeClock()
    gate = TapThrottleSystem(bus, throttle=TapThrottle(min_interval=0.0, clock=clock))
    InputSystem(bus, window, playing)
    playing.request_hint()
    assert gate.throttle.held
    clicks = record(bus, EVENT_TILE_CLICK)
    tiles = playing.tiles()
    x, y = _tile_centre(window, len(tiles), 0)
    bus.emit(EVENT_MOUSE_PRESS_RAW, x=x, y=y, button=1, modifiers=0)
    assert clicks == []
    clock.value += playing.config.hint_flash
    bus.emit(EVENT_MOUSE_PRESS_RAW, x=x, y=y, button=1, modifiers=0)
    assert clicks == [{"tile_id": tiles[0][0]}]


def test_hint_button_unreachable_during_hint_flash(playing, bus):
    window = DummyWindow()
    TapThrottleSystem(bus, throttle=TapThrottle(min_interval=0.0, clock=_FakeClock()))
    InputSystem(bus, window, playing)
    shown = record(bus, EVENT_HINT_SHOWN)
    left, bottom, width, height = hint_button_rect(window.width, window.height)
    for _ in range(2):
        bus.emit(EVENT_MOUSE_PRESS_RAW, x=left + width / 2, y=bottom + height / 2, button=1, modifiers=0)
    assert len(shown) == 1
