from __future__ import annotations

from esper import World

from concentration.components.board import Board
from concentration.components.content_catalog import ContentCatalog
from concentration.components.session import Session, SessionPhase
from concentration.events.bus import EVENT_SESSION_PHASE_CHANGED, EventBus


def get_session(world: World) -> Session:
    for _, session in world.get_component(Session):
        return session
    session = Session()
    world.create_entity(session)
    return session


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    board = Board()
    world.create_entity(board)
    return board


def get_catalog(world: World) -> ContentCatalog:
    for _, catalog in world.get_component(ContentCatalog):
        return catalog
    raise LookupError("world has no ContentCatalog; build it with create_world")


def set_session_phase(world: World, event_bus: EventBus, phase: SessionPhase) -> None:
    """Update the session phase and emit a change event when it differs."""

    session = get_session(world)
    previous_phase = session.phase
    if previous_phase == phase:
        return
    session.phase = phase
    event_bus.emit(
        EVENT_SESSION_PHASE_CHANGED,
        previous_phase=previous_phase,
        new_phase=phase,
    )
