"""Session resource describing the level currently being played."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class SessionPhase(Enum):
    """Lifecycle phases of one level."""
    IDLE = auto()
    REVEALING = auto()
    PLAYING = auto()
    EVALUATING = auto()
    MISMATCH_SHOWN = auto()
    COMPLETE = auto()


class MatchOutcome(Enum):
    MATCH = auto()
    MISMATCH = auto()


@dataclass
class Session:
    """Singleton component holding selection slots and progress for a level."""
    level: int = 0
    phase: SessionPhase = SessionPhase.IDLE
    pending_first: Optional[int] = None
    pending_second: Optional[int] = None
    matched_pair_count: int = 0
    input_enabled: bool = False

    def reset(self, level: int) -> None:
        self.level = level
        self.pending_first = None
        self.pending_second = None
        self.matched_pair_count = 0
        self.input_enabled = False
