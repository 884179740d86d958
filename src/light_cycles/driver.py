"""Headless fixed-step driver that plays a match without a window."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from light_cycles.config import GameConfig
from light_cycles.controls import DIRECTION_KEYS, handle_key
from light_cycles.game import Game
from light_cycles.player import PlayerRole

logger = logging.getLogger(__name__)

_SEAT_KEYS: dict[PlayerRole, list[str]] = {
    role: [key for key, (seat, _) in DIRECTION_KEYS.items() if seat is role]
    for role in PlayerRole
}


@dataclass
class MatchResult:
    """Outcome of a headless match."""

    winner: PlayerRole | None
    ticks: int
    trail_lengths: tuple[int, int]
    ai_enabled: bool

    @property
    def finished(self) -> bool:
        return self.winner is not None

    def to_dict(self) -> dict:
        return {
            "winner": (
                self.winner.name.lower() if self.winner is not None else None
            ),
            "ticks": self.ticks,
            "trail_lengths": list(self.trail_lengths),
            "ai_enabled": self.ai_enabled,
        }


def random_intents(
    game: Game,
    rng: np.random.Generator,
    turn_chance: float,
) -> None:
    """Press a random direction key for each seat with probability *turn_chance*.

    Player one's keys are dropped by the game while its autopilot is on.
    """
    for role in PlayerRole:
        if rng.random() < turn_chance:
            keys = _SEAT_KEYS[role]
            handle_key(game, keys[int(rng.integers(len(keys)))])


def simulate_match(
    config: GameConfig | None = None,
    *,
    dt: float | None = None,
    max_ticks: int = 10_000,
    ai: bool = False,
    seed: int | None = None,
    turn_chance: float = 0.1,
    game: Game | None = None,
) -> MatchResult:
    """Play one match with a fixed time step until it ends or *max_ticks*.

    *dt* defaults to the configured move threshold, i.e. one move per
    player per tick once the initial offset has elapsed.
    """
    if max_ticks < 1:
        raise ValueError("max_ticks must be at least 1.")
    if not 0.0 <= turn_chance <= 1.0:
        raise ValueError("turn_chance must be between 0 and 1.")

    if game is None:
        game = Game.from_config(config or GameConfig())
    step = dt if dt is not None else game.move_threshold
    if step <= 0:
        raise ValueError("dt must be positive.")
    if ai and not game.ai_enabled:
        game.toggle_ai()

    rng = np.random.default_rng(seed)
    ticks = 0
    while not game.is_over() and ticks < max_ticks:
        random_intents(game, rng, turn_chance)
        game.tick(step)
        ticks += 1

    one, two = game.players
    result = MatchResult(
        winner=game.winner,
        ticks=ticks,
        trail_lengths=(len(one.trail), len(two.trail)),
        ai_enabled=game.ai_enabled,
    )
    if not result.finished:
        logger.info("Match stopped after %d ticks without a winner.", ticks)
    return result
