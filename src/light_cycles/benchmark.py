"""Simulation throughput benchmarking."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from light_cycles.config import GameConfig
from light_cycles.driver import simulate_match
from light_cycles.player import PlayerRole

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from a throughput benchmark run."""

    total_games: int
    total_ticks: int
    wins_one: int
    wins_two: int
    wall_time_seconds: float
    games_per_second: float
    ticks_per_second: float

    def summary(self) -> str:
        return (
            f"Benchmark: {self.total_games} games, {self.total_ticks} ticks in "
            f"{self.wall_time_seconds:.2f}s | "
            f"{self.games_per_second:.1f} games/s, "
            f"{self.ticks_per_second:.1f} ticks/s | "
            f"wins one={self.wins_one} two={self.wins_two}"
        )


def benchmark_throughput(
    *,
    num_games: int = 100,
    width: int = 35,
    height: int = 25,
    max_ticks: int = 2_000,
    ai: bool = False,
    turn_chance: float = 0.1,
    seed: int = 42,
) -> BenchmarkResult:
    """Measure raw simulation throughput over *num_games* headless matches.

    Every match is seeded from a single generator so a run is reproducible.
    """
    if num_games < 1:
        raise ValueError("num_games must be at least 1.")
    config = GameConfig(width=width, height=height)
    rng = np.random.default_rng(seed)

    total_ticks = 0
    wins = {PlayerRole.ONE: 0, PlayerRole.TWO: 0}
    start = time.perf_counter()

    for _ in range(num_games):
        result = simulate_match(
            config,
            max_ticks=max_ticks,
            ai=ai,
            seed=int(rng.integers(2**31)),
            turn_chance=turn_chance,
        )
        total_ticks += result.ticks
        if result.winner is not None:
            wins[result.winner] += 1

    elapsed = time.perf_counter() - start
    result = BenchmarkResult(
        total_games=num_games,
        total_ticks=total_ticks,
        wins_one=wins[PlayerRole.ONE],
        wins_two=wins[PlayerRole.TWO],
        wall_time_seconds=elapsed,
        games_per_second=num_games / max(elapsed, 1e-9),
        ticks_per_second=total_ticks / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result
