from dataclasses import dataclass

@dataclass(slots=True)
class Tile:
    """Logical state of one face-down card.

    The tile's identity is the entity it lives on. ``pair_key`` is shared by
    exactly two tiles on a board; ``matched`` tiles are always ``revealed``.
    """
    pair_key: int
    content: str
    revealed: bool = False
    matched: bool = False
