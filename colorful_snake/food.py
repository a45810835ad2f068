"""
Food entity: a blinking pellet placed on a free grid cell.
"""

import logging
import random
from typing import Iterable, Optional, Tuple

from .constants import (
    FOOD_BLINK_MS,
    FOOD_COLORS,
    FOOD_MAX_ATTEMPTS,
    FOOD_RADIUS,
    GRID_COUNT,
    GRID_SIZE,
)

logger = logging.getLogger(__name__)


class Food:
    """Food pellet that alternates between two colors"""

    def __init__(self, grid_count: int = GRID_COUNT, grid_size: int = GRID_SIZE,
                 rng: Optional[random.Random] = None):
        self.grid_count = grid_count
        self.grid_size = grid_size
        self.rng = rng or random.Random()

        self.position: Tuple[int, int] = (0, 0)
        self.radius = FOOD_RADIUS

        # Blink animation
        self.colors = FOOD_COLORS
        self.color_index = 0
        self.color_change_interval = FOOD_BLINK_MS
        self.last_color_change_time = 0

        self.generate([])

    def generate(self, occupied: Iterable[Tuple[int, int]] = ()):
        """Place food on a random cell not in occupied.

        Gives up after FOOD_MAX_ATTEMPTS samples and keeps the last one,
        even if the snake is on it.
        """
        occupied = set(occupied)
        attempts = 0
        valid = False

        while not valid and attempts < FOOD_MAX_ATTEMPTS:
            self.position = (
                self.rng.randrange(self.grid_count),
                self.rng.randrange(self.grid_count),
            )
            valid = not self.is_position_occupied(self.position, occupied)
            attempts += 1

        if not valid:
            logger.warning(
                "No free cell found for food after %d attempts, using %s",
                attempts, self.position,
            )
        logger.debug("Food placed at %s", self.position)

    def regenerate(self, occupied: Iterable[Tuple[int, int]] = ()):
        """Move food and restart the blink cycle"""
        self.generate(occupied)
        self.color_index = 0
        self.last_color_change_time = 0

    @staticmethod
    def is_position_occupied(position: Tuple[int, int], occupied) -> bool:
        return position in occupied

    def update(self, current_time: float):
        """Advance the blink animation"""
        if current_time - self.last_color_change_time >= self.color_change_interval:
            self.color_index = (self.color_index + 1) % len(self.colors)
            self.last_color_change_time = current_time

    @property
    def color(self) -> Tuple[int, int, int]:
        return self.colors[self.color_index]

    @property
    def pixel_position(self) -> Tuple[float, float]:
        """Center of the food cell in pixels"""
        return (
            self.position[0] * self.grid_size + self.grid_size / 2,
            self.position[1] * self.grid_size + self.grid_size / 2,
        )
