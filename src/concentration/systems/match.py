from concentration.components.session import MatchOutcome
from concentration.components.tile import Tile


def evaluate(tile_a: Tile, tile_b: Tile) -> MatchOutcome:
    """Compare two revealed tiles; only the pair key decides."""
    if tile_a.pair_key == tile_b.pair_key:
        return MatchOutcome.MATCH
    return MatchOutcome.MISMATCH
