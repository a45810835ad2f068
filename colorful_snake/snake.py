"""
Snake entity: movement, growth and collision on a bounded grid.
"""

from collections import deque
from typing import Deque, List, Tuple

from .constants import (
    GRID_COUNT,
    INITIAL_SNAKE_LENGTH,
    SNAKE_BODY_COLORS,
    SNAKE_HEAD_COLOR,
)

# Movement directions
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


class Snake:
    """
    Represents the player's snake.

    Attributes:
        body: deque of (x, y) from head at index 0 to tail at the end
        direction: heading used by the last move
        pending_direction: heading the next move will use
    """

    def __init__(self, grid_count: int = GRID_COUNT):
        self.grid_count = grid_count
        self.body: Deque[Tuple[int, int]] = deque()
        self.direction = RIGHT
        self.pending_direction = RIGHT
        self.reset()

    def reset(self):
        """Lay the snake out horizontally in the middle of the grid, facing right"""
        center = self.grid_count // 2
        head_x = center + INITIAL_SNAKE_LENGTH // 2 - 1
        self.body = deque((head_x - i, center) for i in range(INITIAL_SNAKE_LENGTH))
        self.direction = RIGHT
        self.pending_direction = RIGHT

    def set_direction(self, direction: Tuple[int, int]):
        """Queue a new heading (180 degree turns are ignored)"""
        if direction[0] == -self.direction[0] and direction[1] == -self.direction[1]:
            return
        self.pending_direction = direction

    def move(self) -> bool:
        """Advance the head one cell, return False on wall or self collision.

        The tail is left in place; call remove_tail() unless food was eaten.
        """
        self.direction = self.pending_direction

        head = self.body[0]
        new_head = (head[0] + self.direction[0], head[1] + self.direction[1])

        if not (0 <= new_head[0] < self.grid_count and 0 <= new_head[1] < self.grid_count):
            return False

        if self.check_self_collision(new_head):
            return False

        self.body.appendleft(new_head)
        return True

    def grow(self):
        """Growth happens by skipping remove_tail() after a move"""

    def remove_tail(self):
        self.body.pop()

    def check_self_collision(self, position: Tuple[int, int]) -> bool:
        """Check position against every segment except the tail, which is about to move"""
        for i in range(len(self.body) - 1):
            if self.body[i] == position:
                return True
        return False

    def check_food_collision(self, food_position: Tuple[int, int]) -> bool:
        return self.body[0] == tuple(food_position)

    def segment_color(self, index: int) -> Tuple[int, int, int]:
        """Color for the segment at index (0 is the head)"""
        if index == 0:
            return SNAKE_HEAD_COLOR
        return SNAKE_BODY_COLORS[(index - 1) % len(SNAKE_BODY_COLORS)]

    def occupied_positions(self) -> List[Tuple[int, int]]:
        """Snapshot of every cell covered by the body"""
        return list(self.body)

    @property
    def head(self) -> Tuple[int, int]:
        return self.body[0]

    @property
    def length(self) -> int:
        return len(self.body)
