from dataclasses import dataclass, field
from typing import List

@dataclass(slots=True)
class Board:
    """Singleton describing the current level's layout.

    tile_entities keeps board order (the order the generator shuffled into).
    """
    level: int = 0
    pair_count: int = 0
    tile_entities: List[int] = field(default_factory=list)
