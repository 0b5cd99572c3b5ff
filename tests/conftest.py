import random

import pytest

from game.hop.collaborators import MemoryHighScoreStore, NullAudio, TextScoreBoard
from game.hop.entities import GameState, Item, ItemKind, Player
from game.hop.hop_game import HopGame


class ScriptedRandom(random.Random):
    """random() hands out queued values first, then a constant"""

    def __init__(self, values=(), fallback=0.5):
        super().__init__(0)
        self.values = list(values)
        self.fallback = fallback

    def random(self):
        if self.values:
            return self.values.pop(0)
        return self.fallback


class RecordingRenderer:
    """Render sink that keeps the draw lists it was handed"""

    def __init__(self, keep=1):
        self.keep = keep
        self.frames = []
        self.draw_calls = 0

    def present(self, commands):
        self.draw_calls += 1
        self.frames.append(commands)
        if self.keep and len(self.frames) > self.keep:
            del self.frames[0]

    @property
    def last(self):
        return self.frames[-1] if self.frames else None


@pytest.fixture
def make_rng():
    return ScriptedRandom


@pytest.fixture
def state():
    return GameState(player=Player(x=100.0, y=600.0))


@pytest.fixture
def make_game():
    def _make(values=(), fallback=0.5, **kwargs):
        kwargs.setdefault("renderer", RecordingRenderer())
        kwargs.setdefault("audio", NullAudio())
        kwargs.setdefault("scoreboard", TextScoreBoard())
        kwargs.setdefault("high_score_store", MemoryHighScoreStore())
        return HopGame(rng=ScriptedRandom(values, fallback), **kwargs)
    return _make


def item_on(player: Player, kind: ItemKind, speed: float = 3.0) -> Item:
    """An item that overlaps the player right after its next move"""
    return Item(x=player.x, y=player.y - speed, kind=kind, speed=speed)
