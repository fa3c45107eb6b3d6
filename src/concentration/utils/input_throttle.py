from __future__ import annotations

from dataclasses import dataclass, field
from time import monotonic
from typing import Callable


@dataclass(slots=True)
class TapThrottle:
    """Admission window for board taps.

    A tap is admitted only when ``min_interval`` has passed since the last
    admitted tap and no hold placed by ``hold`` is still running. Taps that
    land in the same frame therefore reach the board once.
    """

    min_interval: float = 0.15
    clock: Callable[[], float] = field(default=monotonic, repr=False)
    _last_tap: float | None = field(init=False, default=None, repr=False)
    _held_until: float = field(init=False, default=0.0, repr=False)

    def allow(self) -> bool:
        now = self.clock()
        if now < self._held_until:
            return False
        if self._last_tap is not None and (now - self._last_tap) < self.min_interval:
            return False
        self._last_tap = now
        return True

    def hold(self, duration: float) -> None:
        """Refuse every tap for ``duration`` seconds; overlapping holds keep the later end."""
        if duration <= 0.0:
            return
        self._held_until = max(self._held_until, self.clock() + float(duration))

    @property
    def held(self) -> bool:
        return self.clock() < self._held_until
