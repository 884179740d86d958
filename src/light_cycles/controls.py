"""Keyboard bindings mapped onto game intents."""

from __future__ import annotations

from typing import TYPE_CHECKING

from light_cycles.player import Direction, PlayerRole

if TYPE_CHECKING:
    from light_cycles.game import Game

DIRECTION_KEYS: dict[str, tuple[PlayerRole, Direction]] = {
    "w": (PlayerRole.ONE, Direction.UP),
    "a": (PlayerRole.ONE, Direction.LEFT),
    "s": (PlayerRole.ONE, Direction.DOWN),
    "d": (PlayerRole.ONE, Direction.RIGHT),
    "up": (PlayerRole.TWO, Direction.UP),
    "left": (PlayerRole.TWO, Direction.LEFT),
    "down": (PlayerRole.TWO, Direction.DOWN),
    "right": (PlayerRole.TWO, Direction.RIGHT),
}

TOGGLE_AI_KEYS = frozenset({"p"})
CONFIRM_KEYS = frozenset({"return", "enter"})


def handle_key(game: Game, key: str) -> bool:
    """Dispatch a key press to *game*. Returns False for unbound keys."""
    key = key.lower()
    if key in DIRECTION_KEYS:
        role, direction = DIRECTION_KEYS[key]
        game.handle_direction_intent(role, direction)
    elif key in TOGGLE_AI_KEYS:
        game.toggle_ai()
    elif key in CONFIRM_KEYS:
        game.confirm()
    else:
        return False
    return True
