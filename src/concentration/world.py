import random

from esper import World

from concentration.components.board import Board
from concentration.components.content_catalog import ContentCatalog
from concentration.components.session import Session
from concentration.config import EngineConfig
from concentration.errors import InsufficientContentError
from concentration.systems.board_generator import pair_count


def create_world(
    *,
    config: EngineConfig | None = None,
    catalog: ContentCatalog | None = None,
    rng: random.Random | None = None,
) -> World:
    """Build a world holding the catalog, session and board singletons.

    Raises InsufficientContentError up front when the catalog cannot fill the
    largest board ``config.max_level`` will ask for.
    """
    config = config or EngineConfig()
    catalog = catalog or ContentCatalog()
    needed = max(pair_count(level) for level in range(1, config.max_level + 1))
    if needed > len(catalog):
        raise InsufficientContentError(needed, len(catalog))

    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "config", config)

    world.create_entity(catalog)
    world.create_entity(Session(), Board())
    return world
