"""
Collision and scoring for falling items.
"""

from __future__ import annotations
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .entities import GameState, Item, ItemKind
from .particles import emit_burst, ACCENT_COLOR, WARNING_COLOR
from .utils import aabb_overlap

CARROT_POINTS = 10


@dataclass
class CollisionReport:
    """What happened to the items during one tick"""
    collected: List[Item] = field(default_factory=list)
    culled: int = 0
    hazard: Optional[Item] = None

    @property
    def hazard_hit(self) -> bool:
        return self.hazard is not None


def resolve_items(
    state: GameState,
    hop: float,
    height: float,
    rng: random.Random,
) -> CollisionReport:
    """
    Move every item one step, then resolve it against the bunny.

    Items are visited newest first. A carrot scores and disappears, a rock
    stops the pass immediately (items not yet visited stay where they are),
    and anything that fell past `height` without touching the bunny is culled.
    Collision is always checked before culling.
    """
    report = CollisionReport()
    player = state.player
    player_top = player.y + hop

    items = state.items
    kept: List[Item] = []  # newest first, reversed at the end

    for idx in range(len(items) - 1, -1, -1):
        item = items[idx]
        item.y += item.speed

        if aabb_overlap(player.x, player_top, player.width, player.height,
                        item.x, item.y, item.width, item.height):
            if item.kind is ItemKind.CARROT:
                state.score += CARROT_POINTS
                emit_burst(state.particles,
                           item.x + item.width / 2, item.y + item.height / 2,
                           ACCENT_COLOR, rng)
                report.collected.append(item)
                continue

            emit_burst(state.particles,
                       player.x + player.width / 2, player.y + player.height / 2,
                       WARNING_COLOR, rng)
            report.hazard = item
            kept.extend(reversed(items[:idx + 1]))
            break

        if item.y > height:
            report.culled += 1
            continue

        kept.append(item)

    kept.reverse()
    items[:] = kept
    return report
