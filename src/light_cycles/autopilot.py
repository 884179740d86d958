"""One-step collision avoidance for the computer-controlled player."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from light_cycles.collision import would_collide
from light_cycles.player import Direction

if TYPE_CHECKING:
    from light_cycles.player import Player

logger = logging.getLogger(__name__)

_CLOCKWISE: dict[Direction, Direction] = {
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
    Direction.UP: Direction.RIGHT,
}

_COUNTERCLOCKWISE: dict[Direction, Direction] = {
    turned: original for original, turned in _CLOCKWISE.items()
}


def clockwise(direction: Direction) -> Direction:
    return _CLOCKWISE[direction]


def counterclockwise(direction: Direction) -> Direction:
    return _COUNTERCLOCKWISE[direction]


def choose_evasive_direction(
    mover: Player,
    other: Player,
    width: int,
    height: int,
) -> Direction | None:
    """Pick a 90° turn whose next cell is safe, preferring clockwise.

    Only the single cell after the turn is checked against the wall and the
    opponent, so a player boxed into a dead end is steered into it anyway.
    A player about to run into its own trail cannot be saved. Returns
    ``None`` when neither turn is safe.
    """
    for turn in (clockwise, counterclockwise):
        candidate_direction = turn(mover.direction)
        candidate = mover.position_after(candidate_direction)
        if not would_collide(mover, other, candidate, width, height):
            return candidate_direction
    return None


def steer_away(mover: Player, other: Player, width: int, height: int) -> bool:
    """Request an evasive turn for *mover*. Returns True if one was found."""
    direction = choose_evasive_direction(mover, other, width, height)
    if direction is None:
        return False
    logger.debug(
        "Autopilot turning player %s from %s to %s at %s.",
        mover.role.name,
        mover.direction.name,
        direction.name,
        mover.head,
    )
    mover.request_direction_change(direction)
    return True
