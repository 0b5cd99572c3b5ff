"""
Turns the game state into an ordered draw list for a render sink.
Coordinates are playfield pixels with y growing downwards.
"""

from dataclasses import dataclass
from typing import List, Union

from .entities import GameState, Phase
from .utils import hop_offset

PARTICLE_SIZE = 4.0


@dataclass(frozen=True)
class Clear:
    """Wipe the whole surface"""


@dataclass(frozen=True)
class Sprite:
    name: str  # "bunny", "carrot" or "rock"
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Square:
    x: float
    y: float
    size: float
    color: str
    alpha: float


DrawCommand = Union[Clear, Sprite, Square]


def display_hop(state: GameState) -> float:
    """Hop offset used for drawing: zero unless a run is in progress"""
    if state.phase is not Phase.RUNNING:
        return 0.0
    return hop_offset(state.frame_count)


def build_draw_list(state: GameState) -> List[DrawCommand]:
    player = state.player
    commands: List[DrawCommand] = [
        Clear(),
        Sprite("bunny", player.x, player.y + display_hop(state), player.width, player.height),
    ]

    for item in state.items:
        commands.append(Sprite(item.kind.value, item.x, item.y, item.width, item.height))

    for p in state.particles:
        commands.append(Square(p.x, p.y, PARTICLE_SIZE, p.color, p.life))

    return commands
