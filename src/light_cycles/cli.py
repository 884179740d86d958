"""Command-line tools for running headless light-cycle matches."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="light-cycles",
        description="Headless light-cycle simulation and benchmarking tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser("simulate", help="Play one headless match.")
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its fields).",
    )
    sim_p.add_argument("--width", type=int, default=None)
    sim_p.add_argument("--height", type=int, default=None)
    sim_p.add_argument("--move-threshold", type=float, default=None)
    sim_p.add_argument(
        "--dt", type=float, default=None,
        help="Seconds fed to each tick (defaults to the move threshold).",
    )
    sim_p.add_argument("--max-ticks", type=int, default=10_000)
    sim_p.add_argument(
        "--ai", action="store_true",
        help="Let the autopilot drive player one.",
    )
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--turn-chance", type=float, default=0.1)
    sim_p.add_argument(
        "--show-board", action="store_true",
        help="Print the final board as text.",
    )

    # --- benchmark ---
    bench_p = sub.add_parser(
        "benchmark", help="Measure simulation throughput.",
    )
    bench_p.add_argument("--num-games", type=int, default=100)
    bench_p.add_argument("--width", type=int, default=35)
    bench_p.add_argument("--height", type=int, default=25)
    bench_p.add_argument("--max-ticks", type=int, default=2_000)
    bench_p.add_argument("--ai", action="store_true")
    bench_p.add_argument("--turn-chance", type=float, default=0.1)
    bench_p.add_argument("--seed", type=int, default=42)

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    from light_cycles.config import GameConfig
    from light_cycles.driver import simulate_match
    from light_cycles.game import Game
    from light_cycles.render import game_over_message, render_text

    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    flag_map = {
        "width": "width",
        "height": "height",
        "move_threshold": "move_threshold",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val
    if overrides:
        config = dataclasses.replace(config, **overrides)

    game = Game.from_config(config)
    result = simulate_match(
        game=game,
        dt=args.dt,
        max_ticks=args.max_ticks,
        ai=args.ai,
        seed=args.seed,
        turn_chance=args.turn_chance,
    )

    if args.show_board:
        print(render_text(game))  # noqa: T201
    message = game_over_message(result.winner, result.ai_enabled)
    print(message or f"No winner after {result.ticks} ticks.")  # noqa: T201
    print(json.dumps(result.to_dict()))  # noqa: T201
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from light_cycles.benchmark import benchmark_throughput

    result = benchmark_throughput(
        num_games=args.num_games,
        width=args.width,
        height=args.height,
        max_ticks=args.max_ticks,
        ai=args.ai,
        turn_chance=args.turn_chance,
        seed=args.seed,
    )
    print(result.summary())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``light-cycles`` CLI."""
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
        "benchmark": _run_benchmark,
    }
    try:
        return handlers[args.command](args)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    sys.exit(main())
