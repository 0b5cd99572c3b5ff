"""
Game entity dataclasses
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ItemKind(Enum):
    """Falling item types"""
    CARROT = "carrot"  # beneficial
    ROCK = "rock"  # hazardous


class Phase(Enum):
    """Run phases of the game state machine"""
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class Player:
    """The bunny. Only x changes during a run."""
    x: float
    y: float
    width: float = 32.0
    height: float = 32.0
    speed: float = 5.0  # px per tick


@dataclass
class Item:
    """Falling carrot or rock"""
    x: float
    y: float
    kind: ItemKind
    speed: float  # px per tick, fixed at spawn
    width: float = 32.0
    height: float = 32.0


@dataclass
class Particle:
    """Short-lived burst particle"""
    x: float
    y: float
    vx: float
    vy: float
    color: str
    life: float = 1.0  # also the draw alpha


@dataclass
class GameState:
    """Everything a tick reads or writes"""
    player: Player
    items: List[Item] = field(default_factory=list)
    particles: List[Particle] = field(default_factory=list)
    phase: Phase = Phase.IDLE
    score: int = 0
    frame_count: int = 0  # never reset between runs
    high_score: int = 0
