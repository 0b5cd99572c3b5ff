"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math
import random
from typing import Optional
import numpy as np

HOP_FREQUENCY = 0.2
HOP_AMPLITUDE = 3.0


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def aabb_overlap(x1, y1, w1, h1, x2, y2, w2, h2) -> bool:
    """Check if two axis-aligned boxes overlap (touching edges do not count)"""
    return (
        x1 < x2 + w2
        and x1 + w1 > x2
        and y1 < y2 + h2
        and y1 + h1 > y2
    )


def hop_offset(frame_count: int) -> float:
    """Vertical bounce of the bunny for a given frame"""
    return math.sin(frame_count * HOP_FREQUENCY) * HOP_AMPLITUDE


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
