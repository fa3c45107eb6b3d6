from typing import Optional, Sequence, Tuple

from concentration.components.tile import Tile


def pick_hint(tiles: Sequence[Tuple[int, Tile]]) -> Optional[Tuple[int, int]]:
    """Return the ids of the first hidden unmatched pair in board order.

    ``tiles`` is the board as ``(tile_id, Tile)`` pairs. Nothing is mutated;
    a highlighted tile is not a revealed tile.
    """
    first = next(((tid, t) for tid, t in tiles if not t.matched and not t.revealed), None)
    if first is None:
        return None
    first_id, first_tile = first
    for tid, tile in tiles:
        if tid != first_id and tile.pair_key == first_tile.pair_key and not tile.revealed:
            return first_id, tid
    return None
