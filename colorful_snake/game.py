"""
Game state machine.

The host calls update(now) once per frame with a monotonic timestamp in
milliseconds, then renders from snapshot(). Input arrives between frames
through handle_action(). Nothing in here schedules, sleeps or draws.
"""

import logging
import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .config import GameConfig
from .controls import InputAction
from .food import Food
from .snake import Snake
from .storage import HighScoreStorage

logger = logging.getLogger(__name__)


class GameState(Enum):
    START = "start"
    COUNTDOWN = "countdown"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameOver"


@dataclass(frozen=True)
class Segment:
    position: Tuple[int, int]
    color: Tuple[int, int, int]


@dataclass(frozen=True)
class GameSnapshot:
    """Everything a renderer needs to draw one frame"""
    state: GameState
    score: int
    high_score: int
    is_new_record: bool
    countdown_remaining: int
    game_over_remaining: int
    segments: Tuple[Segment, ...]
    head: Tuple[int, int]
    direction: Tuple[int, int]
    food_position: Tuple[int, int]
    food_pixel_position: Tuple[float, float]
    food_radius: float
    food_color: Tuple[int, int, int]
    grid_count: int
    grid_size: int

    @property
    def length(self) -> int:
        return len(self.segments)


def seconds_left(remaining_ms: float) -> int:
    """Whole seconds shown for a countdown, never below zero"""
    return max(0, math.ceil(remaining_ms / 1000))


class Game:
    """Owns one snake, one food pellet and the score for a session"""

    def __init__(self, config: Optional[GameConfig] = None,
                 storage: Optional[HighScoreStorage] = None,
                 rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.storage = storage or HighScoreStorage()

        self.snake = Snake(self.config.grid_count)
        self.food = Food(self.config.grid_count, self.config.grid_size, rng=rng)

        self.state = GameState.START
        self.score = 0
        self.is_new_record = False
        self.high_score = self.storage.get_high_score()

        # Timing, all in milliseconds
        self.move_interval = self.config.move_interval
        self.last_move_time = 0.0
        self.countdown_start_time = 0.0
        self.game_over_start_time = 0.0
        self.pause_start_time = 0.0

        self.countdown_remaining = 0
        self.game_over_remaining = 0

    def _set_state(self, state: GameState):
        logger.info("State %s -> %s (score %d)", self.state.value, state.value, self.score)
        self.state = state

    # Transitions

    def start_new_game(self, now: float) -> bool:
        """Reset the board and begin the countdown"""
        if self.state not in (GameState.START, GameState.GAME_OVER):
            return False

        self.score = 0
        self.is_new_record = False
        self.high_score = self.storage.get_high_score()
        self.snake.reset()
        self.food.regenerate(self.snake.occupied_positions())

        self.countdown_start_time = now
        self.countdown_remaining = seconds_left(self.config.countdown_ms)
        self._set_state(GameState.COUNTDOWN)
        return True

    def skip_countdown(self, now: float) -> bool:
        if self.state != GameState.COUNTDOWN:
            return False
        self._begin_playing(now)
        return True

    def _begin_playing(self, now: float):
        self.countdown_remaining = 0
        self.last_move_time = now
        self._set_state(GameState.PLAYING)

    def toggle_pause(self, now: float) -> bool:
        """Switch between PLAYING and PAUSED.

        Time spent paused does not count toward the next move: on resume the
        move baseline is shifted by the length of the pause.
        """
        if self.state == GameState.PLAYING:
            self.pause_start_time = now
            self._set_state(GameState.PAUSED)
            return True
        if self.state == GameState.PAUSED:
            self.last_move_time += now - self.pause_start_time
            self._set_state(GameState.PLAYING)
            return True
        return False

    def game_over(self, now: float):
        self.game_over_start_time = now
        self.game_over_remaining = seconds_left(self.config.game_over_ms)
        try:
            self.is_new_record = self.storage.set_high_score(self.score)
        except OSError as e:
            logger.error("Could not save high score %d: %s", self.score, e)
            self.is_new_record = False
        self.high_score = self.storage.get_high_score()
        self._set_state(GameState.GAME_OVER)

    # Input

    def handle_action(self, action: InputAction, now: float) -> bool:
        """Apply one input action, return False if the current state ignores it"""
        direction = action.direction
        if direction is not None:
            if self.state in (GameState.COUNTDOWN, GameState.PLAYING):
                self.snake.set_direction(direction)
                return True
            return False

        if action == InputAction.START:
            return self.start_new_game(now)
        if action == InputAction.SKIP:
            return self.skip_countdown(now)
        if action == InputAction.PAUSE:
            if self.state == GameState.COUNTDOWN:
                return self.skip_countdown(now)
            return self.toggle_pause(now)
        return False

    # Per-frame update

    def update(self, now: float):
        if self.state == GameState.COUNTDOWN:
            self._update_countdown(now)
        elif self.state == GameState.PLAYING:
            self._update_gameplay(now)
        elif self.state == GameState.GAME_OVER:
            self._update_game_over(now)

        self.food.update(now)

    def _update_countdown(self, now: float):
        remaining = self.config.countdown_ms - (now - self.countdown_start_time)
        if remaining <= 0:
            self._begin_playing(now)
        else:
            self.countdown_remaining = seconds_left(remaining)

    def _update_gameplay(self, now: float):
        if now - self.last_move_time < self.move_interval:
            return

        if not self.snake.move():
            self.game_over(now)
            return

        if self.snake.check_food_collision(self.food.position):
            self.score += self.config.points_per_food
            self.snake.grow()
            self.food.regenerate(self.snake.occupied_positions())
            logger.debug("Food eaten, score %d, length %d", self.score, self.snake.length)
        else:
            self.snake.remove_tail()

        self.last_move_time = now

    def _update_game_over(self, now: float):
        remaining = self.config.game_over_ms - (now - self.game_over_start_time)
        self.game_over_remaining = seconds_left(remaining)
        if remaining <= 0:
            self._set_state(GameState.START)

    # Render contract

    def snapshot(self) -> GameSnapshot:
        segments = tuple(
            Segment(position, self.snake.segment_color(i))
            for i, position in enumerate(self.snake.body)
        )
        return GameSnapshot(
            state=self.state,
            score=self.score,
            high_score=self.high_score,
            is_new_record=self.is_new_record,
            countdown_remaining=self.countdown_remaining,
            game_over_remaining=self.game_over_remaining,
            segments=segments,
            head=self.snake.head,
            direction=self.snake.direction,
            food_position=self.food.position,
            food_pixel_position=self.food.pixel_position,
            food_radius=self.food.radius,
            food_color=self.food.color,
            grid_count=self.config.grid_count,
            grid_size=self.config.grid_size,
        )
