from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                            # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS_RAW = "mouse_press_raw"      # payload: x, y, button, modifiers
EVENT_MOUSE_PRESS = "mouse_press"              # payload: x, y, button
EVENT_TILE_CLICK = "tile_click"                # payload: tile_id=int
EVENT_HINT_REQUEST = "hint_request"            # payload: None


# ============================================================================
# LEVEL LIFECYCLE
# ============================================================================
EVENT_LEVEL_STARTED = "level_started"                  # payload: level=int, pair_count=int, tile_ids=list[int]
EVENT_REVEAL_WINDOW_OPENED = "reveal_window_opened"    # payload: level=int, duration=float
EVENT_REVEAL_WINDOW_CLOSED = "reveal_window_closed"    # payload: level=int
EVENT_LEVEL_COMPLETE = "level_complete"                # payload: level=int, matched_pairs=int, final=bool
EVENT_GAME_COMPLETE = "game_complete"                  # payload: level=int
EVENT_LEVEL_ADVANCE_READY = "level_advance_ready"      # payload: level=int, next_level=int|None
EVENT_SESSION_PHASE_CHANGED = "session_phase_changed"  # payload: previous_phase=SessionPhase, new_phase=SessionPhase


# ============================================================================
# SELECTION & MATCHING
# ============================================================================
EVENT_TILE_REVEALED = "tile_revealed"          # payload: tile_id=int, slot=int
EVENT_PAIR_PENDING = "pair_pending"            # payload: first=int, second=int, pause=float
EVENT_MATCH_RESOLVED = "match_resolved"        # payload: matched=bool, first=int, second=int, matched_pairs=int, display=float
EVENT_MISMATCH_HIDDEN = "mismatch_hidden"      # payload: first=int, second=int
EVENT_HINT_SHOWN = "hint_shown"                # payload: tiles=(int, int), duration=float


# ============================================================================
# DIAGNOSTICS
# ============================================================================
EVENT_INVALID_TRANSITION = "invalid_transition"  # payload: operation=str, phase=SessionPhase
