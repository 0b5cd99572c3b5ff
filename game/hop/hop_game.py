"""
HopGame - the per-frame simulation behind Bunny Hop
---------------------------------------------------
- A bunny slides left/right along the bottom of the playfield
- Carrots (70%) and rocks (30%) drop every `spawn_interval` ticks
- Catching a carrot is worth 10 points, touching a rock ends the run
- Items spawned later fall faster: base_speed + score / 100
- Particle bursts on every catch and on the fatal hit

One call to `tick()` is one animation frame. The host (the Arcade window,
the Gymnasium env or a test) decides when to call it; `running` tells it
whether another tick should be scheduled.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from .collaborators import InputState, MemoryHighScoreStore, NullAudio, TextScoreBoard
from .collisions import CollisionReport, resolve_items
from .entities import GameState, Phase, Player
from .particles import advance_particles
from .render import build_draw_list
from .spawner import Spawner
from .state_machine import Event, accepts, panel_visibility, transition
from .utils import clamp, hop_offset

logger = logging.getLogger(__name__)


class HopGame:
    """Owns the game state and drives it one tick at a time"""

    def __init__(
        self,
        renderer=None,
        audio=None,
        scoreboard=None,
        high_score_store=None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        width: int = 480,
        height: int = 640,
        spawn_interval: int = 60,
        base_speed: float = 3.0,
        player_speed: float = 5.0,
        player_size: float = 32.0,
        item_size: float = 32.0,
        player_margin: float = 40.0,  # distance from the bottom edge to the bunny's top
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"playfield must have a positive size, got {width}x{height}")
        if player_size <= 0 or item_size <= 0:
            raise ValueError("player_size and item_size must be positive")
        if player_size > width:
            raise ValueError(f"bunny ({player_size}px) does not fit a {width}px playfield")

        self.width = width
        self.height = height

        self.renderer = renderer
        self.audio = audio if audio is not None else NullAudio()
        self.scoreboard = scoreboard if scoreboard is not None else TextScoreBoard()
        self.high_score_store = high_score_store if high_score_store is not None else MemoryHighScoreStore()
        self.rng = rng if rng is not None else random.Random(seed)

        self.spawner = Spawner(
            width=width,
            rng=self.rng,
            spawn_interval=spawn_interval,
            base_speed=base_speed,
            item_size=item_size,
        )
        self.input = InputState()

        player = Player(
            x=0.0,
            y=height - player_margin,
            width=player_size,
            height=player_size,
            speed=player_speed,
        )
        player.x = self._center_x(player)
        self.state = GameState(player=player, high_score=self.high_score_store.load())

        self.scoreboard.show_score(self._score_text(self.state.score))
        self.scoreboard.show_high_score(self._high_score_text(self.state.high_score))
        self.scoreboard.set_panels(*panel_visibility(self.state.phase))

        # Initial frame so the sink has something to show on the start screen
        self.render()

    # ----------------------------
    # Host API
    # ----------------------------

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def running(self) -> bool:
        """Whether the host should schedule another tick"""
        return self.state.phase is Phase.RUNNING

    def start(self) -> bool:
        """Start or restart a run. Ignored while a run is in progress."""
        if not accepts(self.state.phase, Event.START):
            return False

        state = self.state
        state.score = 0
        state.items.clear()
        state.particles.clear()
        state.player.x = self._center_x(state.player)
        state.phase = transition(state.phase, Event.START)

        self.scoreboard.set_panels(*panel_visibility(state.phase))
        self.scoreboard.show_score(self._score_text(state.score))
        self.scoreboard.show_high_score(self._high_score_text(state.high_score))
        self.audio.play("jump")

        logger.info("Run started (frame %d, high score %d)", state.frame_count, state.high_score)
        return True

    def press(self, key: str) -> bool:
        """Key down. "start" requests a (re)start, directions latch a flag."""
        if key == "start":
            return self.start()
        return self.input.set(key, True)

    def release(self, key: str) -> bool:
        return self.input.set(key, False)

    def tick(self) -> CollisionReport:
        """Advance one frame. Does nothing unless a run is in progress."""
        if not self.running:
            return CollisionReport()

        state = self.state
        player = state.player

        # Independent deltas so holding both keys cancels out
        if self.input.left:
            player.x -= player.speed
        if self.input.right:
            player.x += player.speed

        hop = hop_offset(state.frame_count)
        player.x = clamp(player.x, 0.0, self.width - player.width)

        self.spawner.advance(state)
        advance_particles(state.particles)
        report = resolve_items(state, hop, self.height, self.rng)

        if report.collected:
            for _ in report.collected:
                self.audio.play("collect")
            self.scoreboard.show_score(self._score_text(state.score))

        if report.hazard_hit:
            self.game_over()

        self.render()
        return report

    def run(self, max_ticks: int) -> int:
        """Tick until the run ends or `max_ticks` is reached. Returns ticks done."""
        done = 0
        while done < max_ticks and self.running:
            self.tick()
            done += 1
        return done

    def game_over(self):
        """End the current run and settle the high score"""
        state = self.state
        if state.phase is not Phase.RUNNING:
            return

        state.phase = transition(state.phase, Event.HAZARD_HIT)
        self.audio.play("game_over")

        if state.score > state.high_score:
            state.high_score = state.score
            self.high_score_store.save(state.high_score)
            self.scoreboard.show_high_score(self._high_score_text(state.high_score))

        self.scoreboard.show_final(
            self._score_text(state.score),
            self._high_score_text(state.high_score),
        )
        self.scoreboard.set_panels(*panel_visibility(state.phase))

        logger.info("Game over: score %d, high score %d", state.score, state.high_score)

    def render(self):
        if self.renderer is not None:
            self.renderer.present(build_draw_list(self.state))

    # ----------------------------
    # Helpers
    # ----------------------------

    def _center_x(self, player: Player) -> float:
        return self.width / 2 - player.width / 2

    @staticmethod
    def _score_text(score: int) -> str:
        return f"Score: {score}"

    @staticmethod
    def _high_score_text(high_score: int) -> str:
        return f"High Score: {high_score}"
