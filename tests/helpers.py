from __future__ import annotations

from concentration.systems.session_system import SessionSystem


def tiles_by_key(system: SessionSystem) -> dict[int, list[int]]:
    """Tile ids grouped by pair key, in board order."""
    groups: dict[int, list[int]] = {}
    for tile_id, tile in system.tiles():
        groups.setdefault(tile.pair_key, []).append(tile_id)
    return groups


def mismatched_ids(system: SessionSystem) -> tuple[int, int]:
    groups = tiles_by_key(system)
    keys = sorted(groups)
    return groups[keys[0]][0], groups[keys[1]][0]


def solve_level(system: SessionSystem) -> None:
    """Match every pair on the current board."""
    for first, second in tiles_by_key(system).values():
        system.select_tile(first)
        system.select_tile(second)
        system.resolve()


def record(bus, name):
    events = []
    bus.subscribe(name, lambda sender, **k: events.append(k))
    return events
