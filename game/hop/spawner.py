"""
Item spawner: one carrot or rock every `spawn_interval` ticks.
"""

from __future__ import annotations
import logging
import random
from typing import Optional

from .entities import GameState, Item, ItemKind

logger = logging.getLogger(__name__)

CARROT_THRESHOLD = 0.3  # draws above this are carrots (~70%)


class Spawner:
    """Advances the frame counter and drops new items from above the screen"""

    def __init__(
        self,
        width: float,
        rng: random.Random,
        spawn_interval: int = 60,
        base_speed: float = 3.0,
        item_size: float = 32.0,
    ):
        if spawn_interval <= 0:
            raise ValueError(f"spawn_interval must be positive, got {spawn_interval}")
        if width <= item_size:
            raise ValueError(f"playfield width {width} cannot fit items of size {item_size}")

        self.width = width
        self.rng = rng
        self.spawn_interval = int(spawn_interval)
        self.base_speed = base_speed
        self.item_size = item_size

    def advance(self, state: GameState) -> Optional[Item]:
        state.frame_count += 1
        if state.frame_count % self.spawn_interval != 0:
            return None

        item = self.make_item(state.score)
        state.items.append(item)
        logger.debug("Spawned %s at x=%.1f speed=%.2f (frame %d)",
                     item.kind.value, item.x, item.speed, state.frame_count)
        return item

    def make_item(self, score: int) -> Item:
        """Build an item whose speed is locked to the score at spawn time"""
        kind = ItemKind.CARROT if self.rng.random() > CARROT_THRESHOLD else ItemKind.ROCK
        x = self.rng.random() * (self.width - self.item_size)
        return Item(
            x=x,
            y=-self.item_size,
            kind=kind,
            speed=self.base_speed + (score / 100),
            width=self.item_size,
            height=self.item_size,
        )
