"""Player representation: direction handling and the ever-growing trail."""

from __future__ import annotations

import enum
import logging
from collections import deque

from light_cycles.config import MOVE_THRESHOLD

logger = logging.getLogger(__name__)

Cell = tuple[int, int]


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self) -> Direction:
        """Return the direction that would be an instant 180° reversal."""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class PlayerRole(enum.Enum):
    ONE = 1
    TWO = 2

    @property
    def other(self) -> PlayerRole:
        return PlayerRole.TWO if self is PlayerRole.ONE else PlayerRole.ONE


_COLORS: dict[PlayerRole, str] = {
    PlayerRole.ONE: "red",
    PlayerRole.TWO: "blue",
}


def initial_trail(role: PlayerRole, width: int, height: int) -> list[Cell]:
    """Return the starting trail for *role*, head first.

    Player one starts at (4, 3) with its body to the left; player two starts
    four cells from the right wall and five from the bottom, body below.
    """
    if role is PlayerRole.ONE:
        return [(4, 3), (3, 3), (2, 3)]
    x = width - 4
    return [(x, height - 5), (x, height - 4), (x, height - 3)]


def _initial_direction(role: PlayerRole) -> Direction:
    return Direction.RIGHT if role is PlayerRole.ONE else Direction.UP


class Player:
    """A light cycle and the trail it leaves behind.

    The head is ``trail[0]``; the oldest cell is ``trail[-1]``. The trail is
    never shortened, so ``_occupied`` mirrors it as a set for constant-time
    membership checks.
    """

    def __init__(
        self,
        role: PlayerRole,
        trail: list[Cell],
        direction: Direction,
        time_waited: float = 0.0,
    ) -> None:
        if not trail:
            raise ValueError("Player trail must contain at least the head.")
        self.role = role
        self.color = _COLORS[role]
        self.trail: deque[Cell] = deque(trail)
        self._occupied: set[Cell] = set(trail)
        self.direction = direction
        self.pending_direction: Direction | None = None
        self.has_moved_since_direction_change = False
        self.time_waited = time_waited

    @classmethod
    def initial(
        cls,
        role: PlayerRole,
        width: int,
        height: int,
        move_threshold: float = MOVE_THRESHOLD,
    ) -> Player:
        """Build the fixed starting configuration for *role*.

        Player two starts half a move threshold ahead so the two players are
        not due to move in the same tick early in the game.
        """
        time_waited = 0.0 if role is PlayerRole.ONE else move_threshold / 2
        return cls(
            role,
            initial_trail(role, width, height),
            _initial_direction(role),
            time_waited=time_waited,
        )

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self.trail[0]

    def position_after(self, direction: Direction) -> Cell:
        """Compute where the head would be after one step in *direction*."""
        dx, dy = direction.value
        x, y = self.head
        return x + dx, y + dy

    def next_head_position(self) -> Cell:
        """Compute the next head position without moving."""
        return self.position_after(self.direction)

    def advance(self, new_head: Cell) -> None:
        """Extend the trail to *new_head* and apply any queued turn.

        The caller is responsible for having checked the move for collisions.
        """
        self.trail.appendleft(new_head)
        self._occupied.add(new_head)
        self.has_moved_since_direction_change = True
        if self.pending_direction is not None:
            self.direction = self.pending_direction
            self.pending_direction = None

    def request_direction_change(self, direction: Direction | None) -> None:
        """Turn now if allowed, otherwise queue the turn for the next move.

        Requests for the current direction or its reversal are ignored. Only
        the first request made before the next move is kept.
        """
        if direction is None:
            return
        if direction == self.direction or direction == self.direction.opposite():
            return
        if self.has_moved_since_direction_change:
            self.direction = direction
            self.has_moved_since_direction_change = False
        elif self.pending_direction is None:
            self.pending_direction = direction
            logger.debug(
                "Player %s queued turn %s.", self.role.name, direction.name,
            )

    def occupies(self, cell: Cell) -> bool:
        """Check whether the trail covers *cell*."""
        return cell in self._occupied

    def would_self_collide(self) -> bool:
        """Check whether the next step lands on the player's own trail."""
        return self.occupies(self.next_head_position())

    def wait(self, delta: float) -> None:
        """Accumulate *delta* seconds (negative on commit)."""
        self.time_waited += delta

    def to_dict(self) -> dict:
        """Serialize player state to a dictionary."""
        return {
            "role": self.role.name.lower(),
            "color": self.color,
            "direction": self.direction.name.lower(),
            "pending_direction": (
                self.pending_direction.name.lower()
                if self.pending_direction is not None else None
            ),
            "trail": [list(cell) for cell in self.trail],
            "time_waited": self.time_waited,
        }
