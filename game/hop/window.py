"""
Arcade front end: draws the draw lists HopGame hands over, forwards keys
and shows the score HUD plus the start / game over panels.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, List, Optional

import arcade

from .collaborators import TextScoreBoard
from .render import Clear, DrawCommand, Sprite, Square

logger = logging.getLogger(__name__)

DEFAULT_TEXTURES = {
    "bunny": ":resources:images/animated_characters/female_person/femalePerson_idle.png",
    "carrot": ":resources:images/items/coinGold.png",
    "rock": ":resources:images/space_shooter/meteorGrey_big1.png",
}

KEY_NAMES = {
    arcade.key.LEFT: "left",
    arcade.key.RIGHT: "right",
    arcade.key.SPACE: "start",
}


def hex_to_rgba(color: str, alpha: float = 1.0):
    """'#ffa500' -> (255, 165, 0, a) with alpha given in [0, 1]"""
    color = color.lstrip("#")
    r, g, b = (int(color[i:i + 2], 16) for i in (0, 2, 4))
    a = int(round(max(0.0, min(1.0, alpha)) * 255))
    return r, g, b, a


class HopWindow(arcade.Window):
    """Render sink and input source for HopGame"""

    def __init__(self, width: int = 480, height: int = 640,
                 title: str = "Bunny Hop", assets_dir: Optional[str] = None,
                 scoreboard: Optional[TextScoreBoard] = None):
        super().__init__(width, height, title)
        self.game = None
        self.scoreboard = scoreboard if scoreboard is not None else TextScoreBoard()
        self._commands: List[DrawCommand] = []
        self._textures: Dict[str, Optional[arcade.Texture]] = {
            name: self._load_texture(name, assets_dir) for name in DEFAULT_TEXTURES
        }

        # Colors
        self.BG = (135, 206, 235)
        self.HUD_C = (30, 30, 30)
        self.PANEL_C = (0, 0, 0, 160)
        self.PANEL_TEXT_C = (255, 255, 255)

    def bind(self, game):
        self.game = game

    # ----------------------------
    # Collaborator API
    # ----------------------------

    def present(self, commands: List[DrawCommand]):
        self._commands = commands

    # ----------------------------
    # Arcade callbacks
    # ----------------------------

    def on_update(self, delta_time: float):
        if self.game is not None and self.game.running:
            self.game.tick()

    def on_key_press(self, symbol: int, modifiers: int):
        name = KEY_NAMES.get(symbol)
        if name is not None and self.game is not None:
            self.game.press(name)
        elif symbol == arcade.key.ESCAPE:
            self.close()

    def on_key_release(self, symbol: int, modifiers: int):
        name = KEY_NAMES.get(symbol)
        if name is not None and self.game is not None:
            self.game.release(name)

    def on_draw(self):
        for cmd in self._commands:
            if isinstance(cmd, Clear):
                self.clear(color=self.BG)
            elif isinstance(cmd, Sprite):
                self._draw_sprite(cmd)
            elif isinstance(cmd, Square):
                self._draw_square(cmd)
        self._draw_hud()

    # ----------------------------
    # Drawing helpers
    # ----------------------------

    def _load_texture(self, name: str, assets_dir: Optional[str]) -> Optional[arcade.Texture]:
        path = DEFAULT_TEXTURES[name]
        if assets_dir:
            candidate = os.path.join(assets_dir, f"{name}.png")
            if os.path.exists(candidate):
                path = candidate
        try:
            return arcade.load_texture(path)
        except Exception as exc:
            logger.warning("Texture '%s' unavailable (%s), it will not be drawn", name, exc)
            return None

    def _bottom(self, y: float, h: float) -> float:
        # playfield y grows downwards, arcade's grows upwards
        return self.height - y - h

    def _draw_sprite(self, cmd: Sprite):
        texture = self._textures.get(cmd.name)
        if texture is None:
            return
        arcade.draw_texture_rect(
            texture, arcade.LBWH(cmd.x, self._bottom(cmd.y, cmd.height), cmd.width, cmd.height)
        )

    def _draw_square(self, cmd: Square):
        bottom = self._bottom(cmd.y, cmd.size)
        arcade.draw_lrbt_rectangle_filled(
            cmd.x, cmd.x + cmd.size, bottom, bottom + cmd.size, hex_to_rgba(cmd.color, cmd.alpha)
        )

    def _draw_hud(self):
        sb = self.scoreboard
        arcade.draw_text(sb.score_text, 12, self.height - 28, self.HUD_C, 16)
        arcade.draw_text(sb.high_score_text, self.width - 12, self.height - 28, self.HUD_C, 16,
                         anchor_x="right")

        if sb.start_visible:
            self._draw_panel(["Bunny Hop", "Catch carrots, dodge rocks", "Press SPACE to start"])
        elif sb.game_over_visible:
            self._draw_panel(["Game Over", sb.final_score_text or "", sb.final_high_score_text or "",
                              "Press SPACE to play again"])

    def _draw_panel(self, lines: List[str]):
        cx, cy = self.width / 2, self.height / 2
        arcade.draw_lrbt_rectangle_filled(40, self.width - 40, cy - 90, cy + 90, self.PANEL_C)
        for i, line in enumerate(lines):
            size = 24 if i == 0 else 14
            arcade.draw_text(line, cx, cy + 50 - i * 32, self.PANEL_TEXT_C, size,
                             anchor_x="center", anchor_y="center")
