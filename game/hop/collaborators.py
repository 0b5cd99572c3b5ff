"""
Collaborators the simulation talks to: input flags, high score storage,
audio cues and score/panel display.

Everything here is headless. The Arcade-backed versions live in
window.py and audio.py.
"""

from __future__ import annotations
import json
import logging
import os
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)

HIGH_SCORE_KEY = "bunnyHopHighScore"
DEFAULT_HIGH_SCORE_PATH = os.path.join("~", ".bunny_hop", "highscore.json")


@dataclass
class InputState:
    """Latched key flags, written by key handlers and read once per tick"""
    left: bool = False
    right: bool = False

    def set(self, key: str, pressed: bool) -> bool:
        """Update a direction flag. Returns False for keys that are not directions."""
        if key == "left":
            self.left = pressed
        elif key == "right":
            self.right = pressed
        else:
            return False
        return True

    def clear(self):
        self.left = False
        self.right = False


# ----------------------------
# High score persistence
# ----------------------------

class MemoryHighScoreStore:
    """Keeps the high score for the lifetime of the process only"""

    def __init__(self, value: int = 0):
        self.value = value

    def load(self) -> int:
        return self.value

    def save(self, score: int):
        self.value = score


class JsonHighScoreStore:
    """
    High score in a small JSON file: {"bunnyHopHighScore": 120}.
    Read and write failures are logged and otherwise ignored.
    """

    def __init__(self, path: str = DEFAULT_HIGH_SCORE_PATH, key: str = HIGH_SCORE_KEY):
        self.path = os.path.expanduser(path)
        self.key = key

    def load(self) -> int:
        if not os.path.exists(self.path):
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return max(0, int(data.get(self.key, 0)))
        except (OSError, ValueError, TypeError, AttributeError, OverflowError) as exc:
            logger.warning("Could not read high score from %s: %s", self.path, exc)
            return 0

    def save(self, score: int):
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({self.key: int(score)}, f)
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)


# ----------------------------
# Audio / display / rendering
# ----------------------------

class NullAudio:
    """Silent audio; remembers which cues were requested"""

    def __init__(self):
        self.played: List[str] = []

    def play(self, cue: str):
        self.played.append(cue)


class TextScoreBoard:
    """Holds the HUD strings and panel flags; the window draws from it"""

    def __init__(self):
        self.score_text = "Score: 0"
        self.high_score_text = "High Score: 0"
        self.final_score_text: Optional[str] = None
        self.final_high_score_text: Optional[str] = None
        self.start_visible = True
        self.game_over_visible = False

    def show_score(self, text: str):
        self.score_text = text

    def show_high_score(self, text: str):
        self.high_score_text = text

    def show_final(self, score_text: str, high_score_text: str):
        self.final_score_text = score_text
        self.final_high_score_text = high_score_text

    def set_panels(self, start_visible: bool, game_over_visible: bool):
        self.start_visible = start_visible
        self.game_over_visible = game_over_visible
