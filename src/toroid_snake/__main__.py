from __future__ import annotations

import argparse
import logging
import random

from . import config
from .game import run
from .sim import Simulation
from .state import Board


def _parse_grid(text: str) -> tuple[int, int]:
    try:
        w, h = (int(part) for part in text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, got {text!r}") from None
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError(f"grid must be positive, got {text!r}")
    return w, h


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="toroid-snake", add_help=True)
    parser.add_argument(
        "--renderer",
        choices=("soft", "gl"),
        default="soft",
        help="Rendering backend (soft=pygame surface, gl=OpenGL).",
    )
    parser.add_argument(
        "--grid",
        type=_parse_grid,
        default=(config.GRID_WIDTH, config.GRID_HEIGHT),
        help=f"Board size in cells as WxH (default {config.GRID_WIDTH}x{config.GRID_HEIGHT}).",
    )
    parser.add_argument("--cell-size", type=_positive_int, default=config.CELL_SIZE, help="Pixels per cell.")
    parser.add_argument(
        "--tps",
        type=_positive_int,
        default=config.TICKS_PER_SECOND,
        help="Logic ticks per second.",
    )
    parser.add_argument("--fps", type=_positive_int, default=config.FPS, help="Render frame cap.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for apple placement.")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    width, height = args.grid
    try:
        sim = Simulation(Board(width, height), cell_size=args.cell_size, rng=random.Random(args.seed))
    except ValueError as e:
        parser.error(str(e))

    sim = run(sim, renderer=args.renderer, ticks_per_second=args.tps, fps=args.fps)
    print("Game Over! Length:", len(sim.snake))


if __name__ == "__main__":
    main()
