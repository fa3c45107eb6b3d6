from __future__ import annotations

from typing import Iterable, List

from esper import World

from concentration.components.board import Board
from concentration.components.tile import Tile


def spawn_board(world: World, tiles: Iterable[Tile]) -> List[int]:
    """Create one entity per tile, preserving order; returns the new tile ids."""
    return [world.create_entity(tile) for tile in tiles]


def clear_board(world: World) -> None:
    """Delete every tile entity and empty the Board layout."""
    for ent, _ in list(world.get_component(Tile)):
        world.delete_entity(ent, immediate=True)
    for _, board in world.get_component(Board):
        board.tile_entities.clear()
        board.pair_count = 0
