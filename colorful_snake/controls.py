"""
Input contract: abstract actions and the keyboard mapping that produces them.
"""

from enum import Enum
from typing import Optional

import pygame

from .snake import DOWN, LEFT, RIGHT, UP


class InputAction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAUSE = "pause"
    SKIP = "skip"
    START = "start"
    QUIT = "quit"

    @property
    def direction(self):
        """Grid vector for directional actions, None otherwise"""
        return ACTION_DIRECTIONS.get(self)


ACTION_DIRECTIONS = {
    InputAction.UP: UP,
    InputAction.DOWN: DOWN,
    InputAction.LEFT: LEFT,
    InputAction.RIGHT: RIGHT,
}

KEY_ACTIONS = {
    pygame.K_UP: InputAction.UP,
    pygame.K_w: InputAction.UP,
    pygame.K_DOWN: InputAction.DOWN,
    pygame.K_s: InputAction.DOWN,
    pygame.K_LEFT: InputAction.LEFT,
    pygame.K_a: InputAction.LEFT,
    pygame.K_RIGHT: InputAction.RIGHT,
    pygame.K_d: InputAction.RIGHT,
    # Space pauses while playing and skips the countdown; Game sorts out which
    pygame.K_SPACE: InputAction.PAUSE,
    pygame.K_RETURN: InputAction.START,
    pygame.K_KP_ENTER: InputAction.START,
    pygame.K_ESCAPE: InputAction.QUIT,
}


def action_for_key(key: int) -> Optional[InputAction]:
    """Map a pygame key code to an action, or None if the key is unbound"""
    return KEY_ACTIONS.get(key)
