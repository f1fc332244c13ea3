"""
Dragon Eggs
===========

Drag the dragon along the ground to catch falling eggs. Every egg makes it
bigger; grow to three times the starting size before the minute runs out.

Controls:
    - Mouse click/drag or touch: move the dragon
    - Click "Play Again": new round after a win or loss
    - R: Restart round
    - ESC: Quit

Usage:
    python main.py [--width W] [--height H] [--fps FPS] [--seed SEED] [--clamp] [--log-level LEVEL]
"""

from __future__ import annotations

import argparse
import logging

from dragon_eggs.config import FPS, WINDOW_HEIGHT, WINDOW_WIDTH, Settings
from dragon_eggs.game import main as run_game


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Catch falling eggs to grow your dragon.")
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH, help="Window width in pixels")
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT, help="Window height in pixels")
    parser.add_argument("--fps", type=int, default=FPS, help="Frames per second")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for egg spawns")
    parser.add_argument(
        "--clamp",
        action="store_true",
        help="Keep the dragon fully inside the window",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = Settings(
            width=args.width,
            height=args.height,
            fps=args.fps,
            clamp_dragon=args.clamp,
            seed=args.seed,
        )
    except ValueError as e:
        raise SystemExit(f"Invalid settings: {e}")
    run_game(settings)


if __name__ == "__main__":
    main()
