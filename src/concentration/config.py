"""Engine parameters shared by the session and the pacing collaborator."""
from __future__ import annotations

from dataclasses import dataclass

from concentration.constants import (
    COMPLETION_PAUSE,
    EVALUATION_PAUSE,
    HINT_FLASH_DURATION,
    MAX_LEVEL,
    MISMATCH_DISPLAY_DURATION,
    REVEAL_DURATION,
)


@dataclass(slots=True)
class EngineConfig:
    """Level bound plus timing hints.

    The durations are never enforced by the session itself; they tell the
    caller how long to wait before invoking the matching transition.
    """

    max_level: int = MAX_LEVEL
    reveal_duration: float = REVEAL_DURATION
    evaluation_pause: float = EVALUATION_PAUSE
    mismatch_display: float = MISMATCH_DISPLAY_DURATION
    completion_pause: float = COMPLETION_PAUSE
    hint_flash: float = HINT_FLASH_DURATION
    # Raise on out-of-phase calls; when False they are logged and ignored.
    strict_transitions: bool = True

    def __post_init__(self) -> None:
        if int(self.max_level) < 1:
            raise ValueError(f"max_level must be at least 1, got {self.max_level}")
        self.max_level = int(self.max_level)
        for name in ("reveal_duration", "evaluation_pause", "mismatch_display", "completion_pause", "hint_flash"):
            value = float(getattr(self, name))
            if value < 0.0:
                raise ValueError(f"{name} must be non-negative, got {value}")
            setattr(self, name, value)
