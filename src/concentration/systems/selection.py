from typing import Optional, Tuple

from concentration.components.session import Session, SessionPhase
from concentration.components.tile import Tile


class SelectionTracker:
    """Arbitrates the two pending slots stored on the Session component."""

    def __init__(self, session: Session):
        self.session = session

    @property
    def pending(self) -> Tuple[Optional[int], Optional[int]]:
        return self.session.pending_first, self.session.pending_second

    def pending_count(self) -> int:
        return sum(1 for slot in self.pending if slot is not None)

    def accepts(self, tile: Optional[Tile]) -> bool:
        """True when a tap on ``tile`` should be admitted."""
        session = self.session
        if session.phase != SessionPhase.PLAYING or not session.input_enabled:
            return False
        if tile is None or tile.matched or tile.revealed:
            return False
        return self.pending_count() < 2

    def push(self, tile_id: int) -> int:
        """Store ``tile_id`` in the next free slot and return the slot number (1 or 2)."""
        if self.session.pending_first is None:
            self.session.pending_first = tile_id
            return 1
        if self.session.pending_second is None and tile_id != self.session.pending_first:
            self.session.pending_second = tile_id
            return 2
        raise ValueError(f"cannot select tile {tile_id}; pending slots are {self.pending}")

    def clear(self) -> Tuple[Optional[int], Optional[int]]:
        previous = self.pending
        self.session.pending_first = None
        self.session.pending_second = None
        return previous
