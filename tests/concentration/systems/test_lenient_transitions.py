import pytest

from concentration.components.session import SessionPhase
from concentration.config import EngineConfig
from concentration.events.bus import EVENT_INVALID_TRANSITION, EVENT_SESSION_PHASE_CHANGED
from concentration.systems.session_system import SessionSystem

from helpers import record


@pytest.fixture
def lenient(world, bus):
    system = SessionSystem(world, bus, config=EngineConfig(strict_transitions=False))
    system.start_level(1)
    return system


def test_out_of_phase_calls_are_reported_not_raised(lenient, bus):
    rejected = record(bus, EVENT_INVALID_TRANSITION)
    assert lenient.resolve() is None
    lenient.hide_mismatch()
    lenient.advance_level()
    assert [event["operation"] for event in rejected] == ["resolve", "hide_mismatch", "advance_level"]
    assert all(event["phase"] == SessionPhase.REVEALING for event in rejected)
    assert lenient.phase == SessionPhase.REVEALING


def test_second_end_reveal_leaves_state_alone(lenient, bus, caplog):
    lenient.end_reveal()
    with caplog.at_level("WARNING"):
        lenient.end_reveal()
    assert "end_reveal" in caplog.text
    assert lenient.phase == SessionPhase.PLAYING
    assert lenient.input_enabled


def test_phase_changes_are_announced(lenient, bus):
    changes = record(bus, EVENT_SESSION_PHASE_CHANGED)
    lenient.end_reveal()
    assert changes == [{"previous_phase": SessionPhase.REVEALING, "new_phase": SessionPhase.PLAYING}]
