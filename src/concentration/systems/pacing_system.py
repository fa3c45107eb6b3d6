from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from concentration.components.session import SessionPhase
from concentration.events.bus import (
    EVENT_LEVEL_ADVANCE_READY,
    EVENT_LEVEL_COMPLETE,
    EVENT_LEVEL_STARTED,
    EVENT_MATCH_RESOLVED,
    EVENT_PAIR_PENDING,
    EVENT_REVEAL_WINDOW_OPENED,
    EVENT_TICK,
    EventBus,
)
from concentration.systems.session_system import SessionSystem

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Countdown:
    remaining: float
    action: Callable[[], None]
    label: str
    # Phase the action is valid from; anything else means another caller got there first.
    phase: SessionPhase


class PacingSystem:
    """Tick-driven caller that fires the session's timed transitions.

    The session never waits on its own; this system plays the part of the
    presentation timer: preview window, pause before evaluation, mismatch
    display, and the pause before the next level is offered.
    """

    def __init__(self, event_bus: EventBus, session_system: SessionSystem, *, auto_advance: bool = False):
        self.event_bus = event_bus
        self.sessions = session_system
        self.config = session_system.config
        self.auto_advance = auto_advance
        self._countdown: Optional[_Countdown] = None
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_LEVEL_STARTED, self.on_level_started)
        event_bus.subscribe(EVENT_REVEAL_WINDOW_OPENED, self.on_reveal_opened)
        event_bus.subscribe(EVENT_PAIR_PENDING, self.on_pair_pending)
        event_bus.subscribe(EVENT_MATCH_RESOLVED, self.on_match_resolved)
        event_bus.subscribe(EVENT_LEVEL_COMPLETE, self.on_level_complete)

    @property
    def pending_label(self) -> str | None:
        return self._countdown.label if self._countdown else None

    def on_level_started(self, sender, **kwargs):
        # A new board discards whatever the previous one was waiting for.
        self._countdown = None

    def on_reveal_opened(self, sender, **kwargs):
        self._schedule(
            kwargs.get('duration', self.config.reveal_duration),
            self.sessions.end_reveal,
            'end_reveal',
            SessionPhase.REVEALING,
        )

    def on_pair_pending(self, sender, **kwargs):
        self._schedule(
            kwargs.get('pause', self.config.evaluation_pause),
            self.sessions.resolve,
            'resolve',
            SessionPhase.EVALUATING,
        )

    def on_match_resolved(self, sender, **kwargs):
        if kwargs.get('matched'):
            return
        self._schedule(
            kwargs.get('display', self.config.mismatch_display),
            self.sessions.hide_mismatch,
            'hide_mismatch',
            SessionPhase.MISMATCH_SHOWN,
        )

    def on_level_complete(self, sender, **kwargs):
        self._schedule(self.config.completion_pause, self._offer_next_level, 'advance', SessionPhase.COMPLETE)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        countdown = self._countdown
        if countdown is None:
            return
        if self.sessions.phase != countdown.phase:
            logger.debug("pacing dropped %s; session already %s", countdown.label, self.sessions.phase.name)
            self._countdown = None
            return
        countdown.remaining -= dt
        if countdown.remaining > 0.0:
            return
        self._countdown = None
        logger.debug("pacing fired %s", countdown.label)
        # The action may schedule the next countdown through the events it emits.
        countdown.action()

    def _schedule(self, delay: float, action: Callable[[], None], label: str, phase: SessionPhase) -> None:
        self._countdown = _Countdown(remaining=max(0.0, float(delay)), action=action, label=label, phase=phase)

    def _offer_next_level(self) -> None:
        level = self.sessions.level
        next_level = None if self.sessions.is_final_level else level + 1
        if self.auto_advance and next_level is not None:
            self.sessions.advance_level()
            return
        self.event_bus.emit(EVENT_LEVEL_ADVANCE_READY, level=level, next_level=next_level)
