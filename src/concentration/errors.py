"""Exceptions raised by the session engine."""


class ConcentrationError(Exception):
    """Base class for engine errors."""


class LevelOutOfRangeError(ConcentrationError, ValueError):
    """A level outside ``1..max_level`` was requested."""

    def __init__(self, level: int, max_level: int) -> None:
        super().__init__(f"level {level} is outside 1..{max_level}")
        self.level = level
        self.max_level = max_level


class InvalidTransitionError(ConcentrationError, RuntimeError):
    """A lifecycle operation was called from the wrong session phase."""

    def __init__(self, operation: str, phase) -> None:
        super().__init__(f"{operation}() is not valid while {phase.name}")
        self.operation = operation
        self.phase = phase


class InsufficientContentError(ConcentrationError, ValueError):
    """The content catalog cannot supply the requested number of pairs."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(f"requested {requested} contents but the catalog holds {available}")
        self.requested = requested
        self.available = available
