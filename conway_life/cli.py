"""CLI entrypoint: seed a board, tick it, print it and optionally render images."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import matplotlib

from conway_life.config.constants import DEFAULT_INTERVAL, DEFAULT_TICKS, MAX_SEED_CELLS
from conway_life.config.types import DriverConfig, Size
from conway_life.domain.generation import Generation
from conway_life.simulation.driver import Driver
from conway_life.viz.theme import REGISTERED_THEMES, get_theme

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run Conway's Game of Life on a bounded board")
    parser.add_argument("--size", type=str, default="5x5", metavar="LATxLONG")
    parser.add_argument("--ticks", type=int, default=DEFAULT_TICKS)
    parser.add_argument("--interval", type=float, default=DEFAULT_INTERVAL)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--max-seed-cells", type=int, default=MAX_SEED_CELLS)
    parser.add_argument(
        "--stop-when-static",
        action="store_true",
        help="Stop early once the board is extinct or stops changing",
    )
    parser.add_argument(
        "--halt-window",
        type=int,
        default=1,
        help="Unchanged generations required before --stop-when-static stops the run",
    )
    parser.add_argument("--filmstrip", type=Path, default=None)
    parser.add_argument("--animation", type=Path, default=None)
    parser.add_argument("--fps", type=int, default=4)
    parser.add_argument("--theme", choices=sorted(REGISTERED_THEMES), default="default")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING")
    return parser


def _render(generations: list[Generation], args: argparse.Namespace) -> None:
    matplotlib.use("Agg")
    from conway_life.viz.render import render_animation, render_filmstrip

    theme = get_theme(args.theme)
    if args.filmstrip is not None:
        render_filmstrip(generations, args.filmstrip, theme=theme)
        print(f"Filmstrip: {args.filmstrip}")
    if args.animation is not None:
        render_animation(generations, args.animation, fps=args.fps, theme=theme)
        print(f"Animation: {args.animation}")


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the driver loop."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = DriverConfig(
            size=Size.parse(args.size),
            ticks=args.ticks,
            interval=args.interval,
            max_seed_cells=args.max_seed_cells,
            seed=args.seed,
            stop_when_static=args.stop_when_static,
            halt_window=args.halt_window,
        )
    except ValueError as exc:
        parser.error(str(exc))

    driver = Driver(config)
    generations: list[Generation] = []
    for generation in driver.run():
        generations.append(generation)
        print(f"Generation {generation.number}:")
        print(driver.board.render_text())
        print()

    if args.filmstrip is not None or args.animation is not None:
        _render(generations, args)


if __name__ == "__main__":
    main()
