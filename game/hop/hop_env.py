"""
HopEnv - Bunny Hop as a Gymnasium environment
---------------------------------------------
- Wraps HopGame; one env step is one game tick
- Discrete action space: 0 stay, 1 left, 2 right
- Vector observation: bunny state + the K nearest falling items
- Reward for every carrot caught, a small bonus per survived tick,
  a penalty when a rock ends the run

Quick test:
    python -m game.hop.hop_env
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .entities import ItemKind, Phase
from .hop_game import HopGame
from .render import build_draw_list
from .utils import clamp, hop_offset, seed_everything, HOP_AMPLITUDE

DEFAULT_REWARD_CONFIG = {
    "R_COLLECT": 1.0,  # per carrot
    "R_TIME": 0.001,  # per tick survived
    "R_DEATH": 5.0,  # subtracted on game over
}


class HopEnv(gym.Env):
    """Catch-the-carrots environment on top of HopGame"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        max_steps: int = 3600,  # 60s at 60 FPS
        k_items: int = 4,
        reward_config: Optional[Dict[str, float]] = None,
        **game_kwargs,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode: {render_mode}"
        self.render_mode = render_mode
        self.max_steps = max_steps
        self.k_items = k_items

        self.reward_config = dict(DEFAULT_REWARD_CONFIG)
        if reward_config:
            self.reward_config.update(reward_config)

        self.game = HopGame(**game_kwargs)

        # 0 stay, 1 left, 2 right
        self.action_space = spaces.Discrete(3)

        # Bunny: x(1) hop(1)
        # Each item: rel pos(2) kind(1) speed(1)
        obs_dim = 2 + self.k_items * 4
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self._step_count = 0
        self._carrots = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)
        if seed is not None:
            self.game.rng.seed(seed)

        # An unfinished run is abandoned before the next one starts
        if self.game.running:
            self.game.game_over()

        self.game.input.clear()
        self.game.start()

        self._step_count = 0
        self._carrots = 0

        return self._get_obs(), self._get_info()

    def step(self, action):
        action = int(action)
        self.game.input.left = action == 1
        self.game.input.right = action == 2

        report = self.game.tick()
        self._carrots += len(report.collected)

        reward = self.reward_config["R_COLLECT"] * len(report.collected)
        if report.hazard_hit:
            reward -= self.reward_config["R_DEATH"]
        else:
            reward += self.reward_config["R_TIME"]

        terminated = self.game.phase is Phase.GAME_OVER
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), float(reward), terminated, truncated, self._get_info()

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        state = self.game.state
        player = state.player
        width, height = self.game.width, self.game.height

        span = max(1e-6, width - player.width)
        obs_parts = [
            clamp(player.x / span * 2 - 1, -1, 1),
            hop_offset(state.frame_count) / HOP_AMPLITUDE,
        ]

        pcx = player.x + player.width / 2
        pcy = player.y + player.height / 2

        def dist2(item):
            dx = item.x + item.width / 2 - pcx
            dy = item.y + item.height / 2 - pcy
            return dx * dx + dy * dy

        items_sorted = sorted(state.items, key=dist2)
        for i in range(self.k_items):
            if i < len(items_sorted):
                item = items_sorted[i]
                dx = (item.x + item.width / 2 - pcx) / width
                dy = (item.y + item.height / 2 - pcy) / height
                kind = 1.0 if item.kind is ItemKind.CARROT else -1.0
                obs_parts += [
                    clamp(dx, -1, 1),
                    clamp(dy, -1, 1),
                    kind,
                    clamp(item.speed / 10.0, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _get_info(self) -> Dict[str, Any]:
        state = self.game.state
        return {
            "score": state.score,
            "high_score": state.high_score,
            "carrots_collected": self._carrots,
            "num_items": len(state.items),
            "num_particles": len(state.particles),
            "frame": state.frame_count,
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from .window import HopWindow
            self._window = HopWindow(self.game.width, self.game.height,
                                     scoreboard=self.game.scoreboard)
            self._window.bind(self.game)

        self._window.present(build_draw_list(self.game.state))
        self._window.on_draw()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: int = 42):
    """Run a random episode for testing"""
    env = HopEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    print("Running episode... Close the window to exit early.")

    import time
    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

        if render and env._window:
            env._window.dispatch_events()
            env._window.flip()
            time.sleep(1 / 60)

    print(f"Random episode return: {total:.2f}, score: {info['score']}")
    env.close()
    return total, info


if __name__ == "__main__":
    run_random_episode(render=True)
