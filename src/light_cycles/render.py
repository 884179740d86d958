"""Plain-text render sink for the board and the game-over banner."""

from __future__ import annotations

from typing import TYPE_CHECKING

from light_cycles.grid import CellType
from light_cycles.player import PlayerRole

if TYPE_CHECKING:
    from light_cycles.game import Game

WALL_CHAR = "#"
EMPTY_CHAR = "."


def render_text(game: Game) -> str:
    """Draw the board as lines of text.

    Each player is drawn with the initial of its colour role; the head is
    upper-case and the rest of the trail lower-case.
    """
    board = game.board()
    glyphs = {
        CellType.EMPTY: EMPTY_CHAR,
        CellType.WALL: WALL_CHAR,
    }
    heads = {}
    for player in game.players:
        initial = game.player_color(player.role)[0]
        glyphs[CellType.for_role(player.role)] = initial.lower()
        heads[player.head] = initial.upper()

    lines = []
    for y in range(board.height):
        row = []
        for x in range(board.width):
            row.append(heads.get((x, y)) or glyphs[board.get(x, y)])
        lines.append("".join(row))
    return "\n".join(lines)


def game_over_message(winner: PlayerRole | None, ai_enabled: bool) -> str | None:
    """Return the end-of-game banner, or None while nobody has won."""
    if winner is None:
        return None
    if winner is PlayerRole.ONE:
        return "Green Player Wins!" if ai_enabled else "Red Player Wins!"
    return "Blue Player Wins!"
