"""Session controller: the public contract between the board and its presentation.

Every lifecycle step is an explicit call. The engine never schedules time;
callers wait for the durations in ``EngineConfig`` before invoking
``end_reveal``, ``resolve``, ``hide_mismatch`` and ``advance_level``.

Calls are expected to arrive serialized from one control flow (a UI event
loop). ``input_enabled`` is the only admission gate and only this system
flips it.
"""
from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

from esper import World

from concentration.components.board import Board
from concentration.components.session import MatchOutcome, Session, SessionPhase
from concentration.components.tile import Tile
from concentration.config import EngineConfig
from concentration.errors import InvalidTransitionError, LevelOutOfRangeError
from concentration.events.bus import (
    EVENT_GAME_COMPLETE,
    EVENT_HINT_REQUEST,
    EVENT_HINT_SHOWN,
    EVENT_INVALID_TRANSITION,
    EVENT_LEVEL_COMPLETE,
    EVENT_LEVEL_STARTED,
    EVENT_MATCH_RESOLVED,
    EVENT_MISMATCH_HIDDEN,
    EVENT_PAIR_PENDING,
    EVENT_REVEAL_WINDOW_CLOSED,
    EVENT_REVEAL_WINDOW_OPENED,
    EVENT_TILE_CLICK,
    EVENT_TILE_REVEALED,
    EventBus,
)
from concentration.factories.board import clear_board, spawn_board
from concentration.systems.board_generator import BoardGenerator
from concentration.systems.hint import pick_hint
from concentration.systems.match import evaluate
from concentration.systems.selection import SelectionTracker
from concentration.utils.session import get_board, get_catalog, get_session, set_session_phase

logger = logging.getLogger(__name__)


class SessionSystem:
    """Drives one level at a time from preview through completion."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        config: EngineConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.config = config or getattr(world, "config", None) or EngineConfig()
        rng = rng or getattr(world, "random", None) or random.Random()
        self.generator = BoardGenerator(get_catalog(world), rng)
        self.tracker = SelectionTracker(self.session)

        self.event_bus.subscribe(EVENT_TILE_CLICK, self._on_tile_click)
        self.event_bus.subscribe(EVENT_HINT_REQUEST, self._on_hint_request)

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    @property
    def session(self) -> Session:
        return get_session(self.world)

    @property
    def board(self) -> Board:
        return get_board(self.world)

    @property
    def phase(self) -> SessionPhase:
        return self.session.phase

    @property
    def level(self) -> int:
        return self.session.level

    @property
    def pair_count(self) -> int:
        return self.board.pair_count

    @property
    def matched_pair_count(self) -> int:
        return self.session.matched_pair_count

    @property
    def input_enabled(self) -> bool:
        return self.session.input_enabled

    @property
    def is_final_level(self) -> bool:
        return self.session.level >= self.config.max_level

    def tiles(self) -> List[Tuple[int, Tile]]:
        """Current board as ``(tile_id, Tile)`` in board order."""
        return [(ent, self.world.component_for_entity(ent, Tile)) for ent in self.board.tile_entities]

    def tile(self, tile_id: int) -> Optional[Tile]:
        if tile_id not in self.board.tile_entities:
            return None
        return self.world.component_for_entity(tile_id, Tile)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start_level(self, level: int) -> None:
        """Discard the current board and open the preview window for ``level``."""
        if level < 1 or level > self.config.max_level:
            raise LevelOutOfRangeError(level, self.config.max_level)
        clear_board(self.world)
        tiles = self.generator.generate(level)
        for tile in tiles:
            tile.revealed = True
        board = self.board
        board.level = level
        board.pair_count = len(tiles) // 2
        board.tile_entities = spawn_board(self.world, tiles)
        self.session.reset(level)
        set_session_phase(self.world, self.event_bus, SessionPhase.REVEALING)
        logger.info("level %d started with %d pairs", level, board.pair_count)
        self.event_bus.emit(
            EVENT_LEVEL_STARTED,
            level=level,
            pair_count=board.pair_count,
            tile_ids=list(board.tile_entities),
        )
        self.event_bus.emit(EVENT_REVEAL_WINDOW_OPENED, level=level, duration=self.config.reveal_duration)

    def end_reveal(self) -> None:
        """Close the preview: hide every unmatched tile and hand control to the player."""
        if not self._require(SessionPhase.REVEALING, "end_reveal"):
            return
        for _, tile in self.tiles():
            if not tile.matched:
                tile.revealed = False
        self.session.input_enabled = True
        set_session_phase(self.world, self.event_bus, SessionPhase.PLAYING)
        self.event_bus.emit(EVENT_REVEAL_WINDOW_CLOSED, level=self.session.level)

    def restart_level(self) -> None:
        if self.session.phase == SessionPhase.IDLE:
            self._reject("restart_level")
            return
        self.start_level(self.session.level)

    def advance_level(self) -> None:
        if not self._require(SessionPhase.COMPLETE, "advance_level"):
            return
        if self.is_final_level:
            raise LevelOutOfRangeError(self.session.level + 1, self.config.max_level)
        self.start_level(self.session.level + 1)

    # ------------------------------------------------------------------
    # Selection and matching
    # ------------------------------------------------------------------

    def select_tile(self, tile_id: int) -> bool:
        """Reveal ``tile_id`` if the tap is admissible; returns whether it was.

        Inadmissible taps (wrong phase, input disabled, unknown, matched or
        already revealed tile) are silent no-ops.
        """
        tile = self.tile(tile_id)
        if not self.tracker.accepts(tile):
            logger.debug("ignored tap on tile %s during %s", tile_id, self.session.phase.name)
            return False
        tile.revealed = True
        slot = self.tracker.push(tile_id)
        self.event_bus.emit(EVENT_TILE_REVEALED, tile_id=tile_id, slot=slot)
        if slot == 2:
            session = self.session
            session.input_enabled = False
            set_session_phase(self.world, self.event_bus, SessionPhase.EVALUATING)
            self.event_bus.emit(
                EVENT_PAIR_PENDING,
                first=session.pending_first,
                second=session.pending_second,
                pause=self.config.evaluation_pause,
            )
        return True

    def resolve(self) -> Optional[MatchOutcome]:
        """Decide the pending pair. Matches settle immediately; mismatches wait for ``hide_mismatch``."""
        if not self._require(SessionPhase.EVALUATING, "resolve"):
            return None
        session = self.session
        first_id, second_id = session.pending_first, session.pending_second
        first = self.world.component_for_entity(first_id, Tile)
        second = self.world.component_for_entity(second_id, Tile)
        outcome = evaluate(first, second)
        logger.debug("tiles %d and %d resolved as %s", first_id, second_id, outcome.name)

        if outcome is MatchOutcome.MISMATCH:
            set_session_phase(self.world, self.event_bus, SessionPhase.MISMATCH_SHOWN)
            self.event_bus.emit(
                EVENT_MATCH_RESOLVED,
                matched=False,
                first=first_id,
                second=second_id,
                matched_pairs=session.matched_pair_count,
                display=self.config.mismatch_display,
            )
            return outcome

        first.matched = second.matched = True
        first.revealed = second.revealed = True
        session.matched_pair_count += 1
        self.tracker.clear()
        complete = session.matched_pair_count >= self.board.pair_count
        session.input_enabled = not complete
        set_session_phase(
            self.world,
            self.event_bus,
            SessionPhase.COMPLETE if complete else SessionPhase.PLAYING,
        )
        self.event_bus.emit(
            EVENT_MATCH_RESOLVED,
            matched=True,
            first=first_id,
            second=second_id,
            matched_pairs=session.matched_pair_count,
            display=0.0,
        )
        if complete:
            self._on_level_complete()
        return outcome

    def hide_mismatch(self) -> None:
        """Turn the mismatched pair face-down again and re-admit input."""
        if not self._require(SessionPhase.MISMATCH_SHOWN, "hide_mismatch"):
            return
        first_id, second_id = self.tracker.clear()
        for tile_id in (first_id, second_id):
            tile = self.tile(tile_id) if tile_id is not None else None
            if tile is not None and not tile.matched:
                tile.revealed = False
        self.session.input_enabled = True
        set_session_phase(self.world, self.event_bus, SessionPhase.PLAYING)
        self.event_bus.emit(EVENT_MISMATCH_HIDDEN, first=first_id, second=second_id)

    def request_hint(self) -> Optional[Tuple[int, int]]:
        """Locate one hidden pair for highlighting. Tile state is left untouched."""
        session = self.session
        if session.phase != SessionPhase.PLAYING or not session.input_enabled:
            return None
        pair = pick_hint(self.tiles())
        if pair is not None:
            self.event_bus.emit(EVENT_HINT_SHOWN, tiles=pair, duration=self.config.hint_flash)
        return pair

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _on_level_complete(self) -> None:
        session = self.session
        final = self.is_final_level
        logger.info("level %d complete (%d pairs)", session.level, session.matched_pair_count)
        self.event_bus.emit(
            EVENT_LEVEL_COMPLETE,
            level=session.level,
            matched_pairs=session.matched_pair_count,
            final=final,
        )
        if final:
            logger.info("all %d levels complete", self.config.max_level)
            self.event_bus.emit(EVENT_GAME_COMPLETE, level=session.level)

    def _require(self, phase: SessionPhase, operation: str) -> bool:
        if self.session.phase == phase:
            return True
        self._reject(operation)
        return False

    def _reject(self, operation: str) -> None:
        phase = self.session.phase
        if self.config.strict_transitions:
            raise InvalidTransitionError(operation, phase)
        logger.warning("ignored %s() while %s", operation, phase.name)
        self.event_bus.emit(EVENT_INVALID_TRANSITION, operation=operation, phase=phase)

    def _on_tile_click(self, sender, **payload) -> None:
        tile_id = payload.get("tile_id")
        if tile_id is None:
            return
        self.select_tile(tile_id)

    def _on_hint_request(self, sender, **payload) -> None:
        self.request_hint()
