from __future__ import annotations

import random
from typing import List

from concentration.components.content_catalog import ContentCatalog
from concentration.components.tile import Tile
from concentration.constants import BASE_PAIRS, MAX_PAIR_GROWTH, MAX_PAIRS


def pair_count(level: int) -> int:
    """Pairs on the board for ``level``: 4 at level 1, one more per level, capped at 15."""
    return min(BASE_PAIRS + min(level - 1, MAX_PAIR_GROWTH), MAX_PAIRS)


class BoardGenerator:
    """Builds the shuffled tile list for a level.

    Pairing is decided before the shuffle: catalog entry ``i`` becomes two
    tiles with ``pair_key == i``, then the whole list is permuted with the
    injected ``random.Random``.
    """

    def __init__(self, catalog: ContentCatalog, rng: random.Random | None = None):
        self.catalog = catalog
        self.rng = rng or random.Random()

    def generate(self, level: int) -> List[Tile]:
        contents = self.catalog.take(pair_count(level))
        tiles: List[Tile] = []
        for key, content in enumerate(contents):
            tiles.append(Tile(pair_key=key, content=content))
            tiles.append(Tile(pair_key=key, content=content))
        self.rng.shuffle(tiles)
        return tiles
