"""Occupancy map of the board, used by render sinks."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

from light_cycles.collision import is_wall_collision
from light_cycles.player import PlayerRole

if TYPE_CHECKING:
    from light_cycles.player import Player


class CellType(enum.IntEnum):
    """Integer codes stored in the board array."""

    EMPTY = 0
    WALL = 1
    PLAYER_ONE = 2
    PLAYER_TWO = 3

    @classmethod
    def for_role(cls, role: PlayerRole) -> CellType:
        return cls.PLAYER_ONE if role is PlayerRole.ONE else cls.PLAYER_TWO


class Board:
    """NumPy-backed board with the wall ring painted in.

    Coordinates are (x, y) with the origin at the top-left; the array is
    indexed ``cells[y, x]``.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("Board dimensions must be positive.")
        self.width = width
        self.height = height
        self.cells = np.zeros((height, width), dtype=np.int8)
        self.clear()

    def clear(self) -> None:
        """Reset to an empty playfield surrounded by wall."""
        self.cells[:] = CellType.EMPTY
        self.cells[0, :] = CellType.WALL
        self.cells[-1, :] = CellType.WALL
        self.cells[:, 0] = CellType.WALL
        self.cells[:, -1] = CellType.WALL

    def is_wall(self, x: int, y: int) -> bool:
        return is_wall_collision((x, y), self.width, self.height)

    def get(self, x: int, y: int) -> CellType:
        """Return the cell type at the given coordinate."""
        return CellType(self.cells[y, x])

    def paint(self, players: Iterable[Player]) -> None:
        """Write every trail cell onto a freshly cleared board."""
        self.clear()
        for player in players:
            code = CellType.for_role(player.role)
            for x, y in player.trail:
                self.cells[y, x] = code

    def to_dict(self) -> dict:
        """Serialize board state to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "cells": self.cells.tolist(),
        }
