"""Command-line tools for Line Snake."""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="line-snake",
        description="Line Snake headless simulation and configuration tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play random-input games and measure throughput.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sim_p.add_argument("--num-games", type=int, default=10)
    sim_p.add_argument("--max-frames", type=int, default=5_000)
    sim_p.add_argument("--input-probability", type=float, default=0.05)
    sim_p.add_argument("--seed", type=int, default=42)

    # --- config ---
    cfg_p = sub.add_parser(
        "config", help="Write the default configuration to a JSON file.",
    )
    cfg_p.add_argument("output", help="Path for the config file.")

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    from line_snake.config import GameConfig
    from line_snake.simulate import simulate

    config = GameConfig.load(args.config) if args.config else GameConfig()
    result = simulate(
        num_games=args.num_games,
        max_frames=args.max_frames,
        input_probability=args.input_probability,
        config=config,
        seed=args.seed,
    )
    print(result.summary())  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    from line_snake.config import GameConfig

    GameConfig().save(args.output)
    print(f"Wrote default config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``line-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
