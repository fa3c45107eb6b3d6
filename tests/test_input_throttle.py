from concentration.utils.input_throttle import TapThrottle


class _FakeClock:
    def __init__(self) -> None:
        self.value = 0.0

    def advance(self, amount: float) -> None:
        self.value += amount

    def __call__(self) -> float:
        return self.value


def test_tap_throttle_blocks_rapid_taps():
    clock = _FakeClock()
    throttle = TapThrottle(min_interval=0.2, clock=clock)

    assert throttle.allow()
    clock.advance(0.05)
    assert not throttle.allow()
    clock.advance(0.15)
    assert throttle.allow()


def test_refused_tap_does_not_extend_window():
    clock = _FakeClock()
    throttle = TapThrottle(min_interval=0.2, clock=clock)

    assert throttle.allow()
    clock.advance(0.1)
    assert not throttle.allow()
    clock.advance(0.1)
    assert throttle.allow()


def test_hold_refuses_taps_until_it_ends():
    clock = _FakeClock()
    throttle = TapThrottle(min_interval=0.0, clock=clock)

    throttle.hold(0.3)
    assert throttle.held
    assert not throttle.allow()
    clock.advance(0.3)
    assert not throttle.held
    assert throttle.allow()


def test_overlapping_holds_keep_later_end():
    clock = _FakeClock()
    throttle = TapThrottle(min_interval=0.0, clock=clock)

    throttle.hold(1.0)
    throttle.hold(0.2)
    clock.advance(0.5)
    assert not throttle.allow()
    clock.advance(0.5)
    assert throttle.allow()


def test_non_positive_hold_is_ignored():
    clock = _FakeClock()
    throttle = TapThrottle(min_interval=0.0, clock=clock)

    throttle.hold(0.0)
    throttle.hold(-1.0)
    assert not throttle.held
    assert throttle.allow()
