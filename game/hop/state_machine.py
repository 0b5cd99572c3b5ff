"""
Run phases: IDLE -> RUNNING -> GAME_OVER -> RUNNING ...
"""

from enum import Enum
from typing import Tuple

from .entities import Phase


class Event(Enum):
    START = "start"  # start and restart share one trigger
    HAZARD_HIT = "hazard_hit"


_TRANSITIONS = {
    (Phase.IDLE, Event.START): Phase.RUNNING,
    (Phase.GAME_OVER, Event.START): Phase.RUNNING,
    (Phase.RUNNING, Event.HAZARD_HIT): Phase.GAME_OVER,
}


def transition(phase: Phase, event: Event) -> Phase:
    """Next phase; events a phase does not accept leave it unchanged"""
    return _TRANSITIONS.get((phase, event), phase)


def accepts(phase: Phase, event: Event) -> bool:
    return (phase, event) in _TRANSITIONS


def panel_visibility(phase: Phase) -> Tuple[bool, bool]:
    """(start screen visible, game over screen visible) for a phase"""
    return phase is Phase.IDLE, phase is Phase.GAME_OVER
