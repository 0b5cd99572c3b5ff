"""
Play Bunny Hop in an Arcade window.

Usage:
    python -m game.hop.play
    python -m game.hop.play --mute --high-score-file ./highscore.json

Controls: LEFT / RIGHT to move, SPACE to start or restart, ESC to quit.
"""

import argparse
import logging

import arcade

from .collaborators import DEFAULT_HIGH_SCORE_PATH, JsonHighScoreStore, NullAudio
from .hop_game import HopGame
from .window import HopWindow


def build_game(args) -> HopGame:
    window = HopWindow(args.width, args.height, assets_dir=args.assets_dir)

    if args.mute:
        audio = NullAudio()
    else:
        from .audio import ToneBank
        audio = ToneBank()

    game = HopGame(
        renderer=window,
        audio=audio,
        scoreboard=window.scoreboard,
        high_score_store=JsonHighScoreStore(args.high_score_file),
        seed=args.seed,
        width=args.width,
        height=args.height,
        spawn_interval=args.spawn_interval,
        base_speed=args.base_speed,
    )
    window.bind(game)
    return game


def main():
    parser = argparse.ArgumentParser(description="Catch carrots, dodge rocks")
    parser.add_argument("--width", type=int, default=480, help="Playfield width (default: 480)")
    parser.add_argument("--height", type=int, default=640, help="Playfield height (default: 640)")
    parser.add_argument("--spawn-interval", type=int, default=60,
                        help="Ticks between falling items (default: 60)")
    parser.add_argument("--base-speed", type=float, default=3.0,
                        help="Fall speed of items at score 0, px per tick (default: 3)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--assets-dir", type=str, default=None,
                        help="Directory with bunny.png, carrot.png and rock.png")
    parser.add_argument("--high-score-file", type=str, default=DEFAULT_HIGH_SCORE_PATH,
                        help=f"Where the high score is kept (default: {DEFAULT_HIGH_SCORE_PATH})")
    parser.add_argument("--mute", action="store_true", help="Disable sound")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: INFO)")

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    build_game(args)
    arcade.run()


if __name__ == "__main__":
    main()
