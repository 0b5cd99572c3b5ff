"""Bunny Hop - catch falling carrots, dodge falling rocks"""

from .entities import GameState, Item, ItemKind, Particle, Phase, Player
from .hop_game import HopGame
from .hop_env import HopEnv, run_random_episode

__all__ = [
    'GameState', 'Item', 'ItemKind', 'Particle', 'Phase', 'Player',
    'HopGame', 'HopEnv', 'run_random_episode',
]
