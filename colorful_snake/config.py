"""
Runtime configuration for a game session.
"""

import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .constants import (
    COUNTDOWN_MS,
    GAME_OVER_MS,
    GRID_COUNT,
    GRID_SIZE,
    POINTS_PER_FOOD,
    SNAKE_SPEED,
)

GRID_COUNT_ENV = "COLORFUL_SNAKE_GRID_COUNT"
SPEED_ENV = "COLORFUL_SNAKE_SPEED"
DATA_DIR_ENV = "COLORFUL_SNAKE_DATA_DIR"

DEFAULT_DATA_DIR = Path.home() / ".colorful_snake"
HIGH_SCORE_FILE = "highscore.json"


@dataclass
class GameConfig:
    """Tunable settings, defaulting to the values in constants.py"""
    grid_count: int = GRID_COUNT
    grid_size: int = GRID_SIZE
    moves_per_second: float = SNAKE_SPEED
    points_per_food: int = POINTS_PER_FOOD
    countdown_ms: int = COUNTDOWN_MS
    game_over_ms: int = GAME_OVER_MS
    data_dir: Optional[Path] = None

    def __post_init__(self):
        # The snake starts as four cells centred on the grid
        if self.grid_count < 5:
            raise ValueError(f"grid_count must be at least 5, got {self.grid_count}")
        if self.grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {self.grid_size}")
        if not math.isfinite(self.moves_per_second) or self.moves_per_second <= 0:
            raise ValueError(f"moves_per_second must be positive, got {self.moves_per_second}")
        if self.points_per_food < 0:
            raise ValueError(f"points_per_food must not be negative, got {self.points_per_food}")

    @property
    def move_interval(self) -> float:
        """Milliseconds between snake moves"""
        return 1000 / self.moves_per_second

    @property
    def board_pixels(self) -> int:
        return self.grid_count * self.grid_size

    @property
    def high_score_path(self) -> Path:
        return (self.data_dir or DEFAULT_DATA_DIR) / HIGH_SCORE_FILE

    @classmethod
    def from_env(cls, environ=None) -> "GameConfig":
        """Build a config, letting environment variables override defaults"""
        environ = os.environ if environ is None else environ
        kwargs = {}
        if environ.get(GRID_COUNT_ENV):
            kwargs["grid_count"] = int(environ[GRID_COUNT_ENV])
        if environ.get(SPEED_ENV):
            kwargs["moves_per_second"] = float(environ[SPEED_ENV])
        if environ.get(DATA_DIR_ENV):
            kwargs["data_dir"] = Path(environ[DATA_DIR_ENV])
        return cls(**kwargs)
