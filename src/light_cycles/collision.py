"""Side-effect-free collision checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from light_cycles.player import Cell, Player


def is_wall_collision(cell: Cell, width: int, height: int) -> bool:
    """Check whether *cell* lies on (or beyond) the outer wall ring."""
    x, y = cell
    return x <= 0 or x >= width - 1 or y <= 0 or y >= height - 1


def would_collide(
    mover: Player,
    other: Player,
    candidate: Cell,
    width: int,
    height: int,
) -> bool:
    """Check whether moving *mover*'s head to *candidate* would be fatal.

    A candidate is fatal when it is a wall cell or on the other player's trail, or
    when the mover's straight-ahead step lands on its own trail. The self
    check ignores *candidate*, so a turn never escapes a self-collision.
    Neither player is modified.
    """
    return (
        is_wall_collision(candidate, width, height)
        or mover.would_self_collide()
        or other.occupies(candidate)
    )
