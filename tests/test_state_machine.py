import pytest

from game.hop.entities import Phase
from game.hop.state_machine import Event, accepts, panel_visibility, transition


@pytest.mark.parametrize("phase, event, expected", [
    (Phase.IDLE, Event.START, Phase.RUNNING),
    (Phase.GAME_OVER, Event.START, Phase.RUNNING),
    (Phase.RUNNING, Event.HAZARD_HIT, Phase.GAME_OVER),
    (Phase.RUNNING, Event.START, Phase.RUNNING),
    (Phase.IDLE, Event.HAZARD_HIT, Phase.IDLE),
    (Phase.GAME_OVER, Event.HAZARD_HIT, Phase.GAME_OVER),
])
def test_transition(phase, event, expected):
    assert transition(phase, event) is expected
    assert accepts(phase, event) == (expected is not phase)


def test_panels_follow_phase():
    assert panel_visibility(Phase.IDLE) == (True, False)
    assert panel_visibility(Phase.RUNNING) == (False, False)
    assert panel_visibility(Phase.GAME_OVER) == (False, True)
