"""Board and timing configuration for a light-cycle match."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# Seconds a player must accumulate before it may advance one cell.
MOVE_THRESHOLD = 0.10

DEFAULT_WIDTH = 35
DEFAULT_HEIGHT = 25


@dataclass(frozen=True)
class GameConfig:
    """Immutable board dimensions and move threshold.

    Validation guarantees that both players' starting trails lie inside the
    playable area (inside the wall ring) and do not overlap.
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    move_threshold: float = MOVE_THRESHOLD

    def __post_init__(self) -> None:
        from light_cycles.collision import is_wall_collision
        from light_cycles.player import PlayerRole, initial_trail

        if self.width < 1 or self.height < 1:
            raise ValueError("width and height must be positive.")
        if self.move_threshold <= 0:
            raise ValueError("move_threshold must be positive.")

        occupied: set[tuple[int, int]] = set()
        for role in PlayerRole:
            for cell in initial_trail(role, self.width, self.height):
                if is_wall_collision(cell, self.width, self.height):
                    raise ValueError(
                        f"Board {self.width}x{self.height} is too small: the "
                        f"starting trail of player {role.name.lower()} "
                        "touches the wall."
                    )
                if cell in occupied:
                    raise ValueError(
                        f"Board {self.width}x{self.height} is too small: the "
                        "starting trails overlap."
                    )
                occupied.add(cell)

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        try:
            return cls(**raw)
        except TypeError as exc:
            raise ValueError(f"Invalid config file {path}: {exc}") from exc
