"""Time-accumulating, two-player light-cycle game engine."""

from __future__ import annotations

import logging

from light_cycles.autopilot import steer_away
from light_cycles.collision import would_collide
from light_cycles.config import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    MOVE_THRESHOLD,
    GameConfig,
)
from light_cycles.grid import Board
from light_cycles.player import Direction, Player, PlayerRole

logger = logging.getLogger(__name__)


class Game:
    """Two players on a walled board, advanced by elapsed real time.

    Each call to :meth:`tick` adds the elapsed seconds to both players'
    accumulators. A player whose accumulator reaches the move threshold is
    checked for a collision against the current board and, if safe, moved
    one cell. Player one is resolved completely before player two, so player
    two's check already sees player one's new head.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        *,
        move_threshold: float = MOVE_THRESHOLD,
    ) -> None:
        self.config = GameConfig(
            width=width, height=height, move_threshold=move_threshold,
        )

        self.ai_enabled = False
        self.winner: PlayerRole | None = None
        self.is_game_over = False
        self.ticks = 0
        self._spawn_players()

    @classmethod
    def from_config(cls, config: GameConfig) -> Game:
        return cls(
            config.width, config.height, move_threshold=config.move_threshold,
        )

    def _spawn_players(self) -> None:
        self._players: dict[PlayerRole, Player] = {
            role: Player.initial(
                role, self.width, self.height, self.move_threshold,
            )
            for role in PlayerRole
        }

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def move_threshold(self) -> float:
        return self.config.move_threshold

    @property
    def players(self) -> tuple[Player, Player]:
        return self._players[PlayerRole.ONE], self._players[PlayerRole.TWO]

    def player(self, role: PlayerRole) -> Player:
        return self._players[role]

    def is_over(self) -> bool:
        return self.is_game_over

    def player_color(self, role: PlayerRole) -> str:
        """Colour a render sink should use for *role*'s trail."""
        if role is PlayerRole.ONE and self.ai_enabled:
            return "green"
        return self._players[role].color

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def tick(self, delta: float) -> dict:
        """Advance the simulation by *delta* seconds.

        Returns the full game state as a serializable dict.
        """
        if delta < 0:
            raise ValueError("delta must be non-negative.")

        for player in self.players:
            player.wait(delta)

        if self.is_game_over:
            return self.get_state()

        for role in PlayerRole:
            if self.is_game_over:
                break
            if self._players[role].time_waited >= self.move_threshold:
                self._resolve_move(role)

        self.ticks += 1
        return self.get_state()

    def _resolve_move(self, role: PlayerRole) -> None:
        """Check the player's next cell and either commit or end the game."""
        mover = self._players[role]
        other = self._players[role.other]

        if self._collides(mover, other):
            rescued = (
                role is PlayerRole.ONE
                and self.ai_enabled
                and steer_away(mover, other, self.width, self.height)
                and not self._collides(mover, other)
            )
            if not rescued:
                self._end_game(winner=role.other)
                return

        mover.advance(mover.next_head_position())
        mover.wait(-self.move_threshold)

    def _collides(self, mover: Player, other: Player) -> bool:
        return would_collide(
            mover, other, mover.next_head_position(), self.width, self.height,
        )

    def _end_game(self, winner: PlayerRole) -> None:
        loser = self._players[winner.other]
        self.is_game_over = True
        self.winner = winner
        logger.info(
            "Player %s crashed at %s; player %s wins after %d ticks.",
            winner.other.name,
            loser.next_head_position(),
            winner.name,
            self.ticks + 1,
        )

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    def handle_direction_intent(
        self, role: PlayerRole, direction: Direction | None,
    ) -> None:
        """Route a direction request to a player.

        Requests for player one are ignored while the autopilot drives it.
        """
        if role is PlayerRole.ONE and self.ai_enabled:
            return
        self._players[role].request_direction_change(direction)

    def toggle_ai(self) -> None:
        self.ai_enabled = not self.ai_enabled
        logger.info(
            "Autopilot %s for player ONE.",
            "enabled" if self.ai_enabled else "disabled",
        )

    def restart(self) -> None:
        """Start a fresh game. Has no effect unless the game is over."""
        if not self.is_game_over:
            return
        self._spawn_players()
        self.winner = None
        self.is_game_over = False
        self.ai_enabled = False
        self.ticks = 0
        logger.info("Game restarted.")

    def confirm(self) -> None:
        """Handle the "start over" intent."""
        if self.is_game_over:
            self.restart()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def board(self) -> Board:
        """Return a board painted with the walls and both trails."""
        board = Board(self.width, self.height)
        board.paint(self.players)
        return board

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "ticks": self.ticks,
            "game_over": self.is_game_over,
            "winner": (
                self.winner.name.lower() if self.winner is not None else None
            ),
            "ai_enabled": self.ai_enabled,
            "players": [
                {**p.to_dict(), "color": self.player_color(p.role)}
                for p in self.players
            ],
            "config": self.config.to_dict(),
        }
