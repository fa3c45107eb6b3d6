import sys, os
import random

import pytest

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from concentration.events.bus import EventBus
from concentration.systems.session_system import SessionSystem
from concentration.world import create_world


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def world():
    return create_world(rng=random.Random(1234))


@pytest.fixture
def session_system(world, bus):
    return SessionSystem(world, bus)


@pytest.fixture
def playing(session_system):
    """Level 1 with the preview window already closed."""
    session_system.start_level(1)
    session_system.end_reveal()
    return session_system
