"""
Particle bursts shown when the bunny catches a carrot or hits a rock.
"""

from __future__ import annotations
import random
from typing import List

from .entities import Particle

BURST_SIZE = 8
BURST_SPREAD = 4.0  # velocity components fall in [-spread/2, spread/2)
LIFE_DECAY = 0.05

ACCENT_COLOR = "#ffa500"
WARNING_COLOR = "#ff0000"


def emit_burst(
    particles: List[Particle],
    x: float,
    y: float,
    color: str,
    rng: random.Random,
    count: int = BURST_SIZE,
) -> None:
    """Append `count` particles starting at (x, y) with random velocities"""
    for _ in range(count):
        particles.append(Particle(
            x=x,
            y=y,
            vx=(rng.random() - 0.5) * BURST_SPREAD,
            vy=(rng.random() - 0.5) * BURST_SPREAD,
            color=color,
        ))


def advance_particles(particles: List[Particle], decay: float = LIFE_DECAY) -> List[Particle]:
    """
    Move and fade every particle, dropping the ones that burned out.
    Mutates the list in place and returns it.
    """
    for p in particles:
        p.x += p.vx
        p.y += p.vy
        # rounding keeps 1.0 - 20 * 0.05 at exactly zero
        p.life = round(p.life - decay, 9)

    particles[:] = [p for p in particles if p.life > 0]
    return particles
