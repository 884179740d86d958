"""Two-player light-cycle simulation engine."""

from light_cycles.autopilot import choose_evasive_direction, steer_away
from light_cycles.collision import is_wall_collision, would_collide
from light_cycles.config import MOVE_THRESHOLD, GameConfig
from light_cycles.controls import DIRECTION_KEYS, handle_key
from light_cycles.game import Game
from light_cycles.grid import Board, CellType
from light_cycles.player import Direction, Player, PlayerRole
from light_cycles.render import game_over_message, render_text

__all__ = [
    "DIRECTION_KEYS",
    "MOVE_THRESHOLD",
    "Board",
    "CellType",
    "Direction",
    "Game",
    "GameConfig",
    "Player",
    "PlayerRole",
    "choose_evasive_direction",
    "game_over_message",
    "handle_key",
    "is_wall_collision",
    "render_text",
    "steer_away",
    "would_collide",
]
