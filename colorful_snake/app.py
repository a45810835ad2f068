#!/usr/bin/env python3
"""
Colorful Snake
A grid snake that eats blinking food, grows, and dies on walls or itself.

Controls:
- Arrow keys / WASD: steer
- SPACE: pause, or skip the countdown
- ENTER: start a game
- ESC: quit

Run with: python -m colorful_snake
For headless testing: python -m colorful_snake --headless
"""

import logging
import os
import sys

import pygame

from .config import GameConfig
from .constants import FPS, SCORE_BAR_HEIGHT
from .controls import InputAction, action_for_key
from .game import Game, GameState
from .renderer import Renderer
from .storage import HighScoreStorage, JsonFileBackend

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "COLORFUL_SNAKE_LOG_LEVEL"
HEADLESS_FRAMES = 3000


def is_headless(argv) -> bool:
    return '--headless' in argv or os.environ.get('SDL_VIDEODRIVER') == 'dummy'


class App:
    """Frame loop driver: feeds input and time to the game, then renders"""

    def __init__(self, config: GameConfig, storage: HighScoreStorage, headless: bool = False,
                 rng=None):
        if headless:
            # Must be set before pygame initializes its display
            os.environ['SDL_VIDEODRIVER'] = 'dummy'
            os.environ['SDL_AUDIODRIVER'] = 'dummy'
        pygame.init()

        self.config = config
        self.headless = headless
        self.screen = pygame.display.set_mode(
            (config.board_pixels, config.board_pixels + SCORE_BAR_HEIGHT)
        )
        pygame.display.set_caption("Colorful Snake")
        self.clock = pygame.time.Clock()

        self.game = Game(config, storage, rng=rng)
        self.renderer = Renderer(self.screen, config.grid_size, config.grid_count)
        logger.info(
            "%s session on a %dx%d grid, %g moves/s",
            "Headless" if headless else "Windowed",
            config.grid_count, config.grid_count, config.moves_per_second,
        )

    def handle_input(self, now: float) -> bool:
        """Handle keyboard input, return False when the player quits"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False

            if event.type == pygame.KEYDOWN:
                action = action_for_key(event.key)
                if action is None:
                    continue
                if action == InputAction.QUIT:
                    return False
                self.game.handle_action(action, now)

        return True

    def frame(self, now: float):
        self.game.update(now)
        self.renderer.draw(self.game.snapshot())
        pygame.display.flip()

    def run(self):
        """Main game loop"""
        running = True
        while running:
            self.clock.tick(FPS)
            now = pygame.time.get_ticks()

            running = self.handle_input(now)
            self.frame(now)

        pygame.quit()

    def run_headless(self, frames: int = None) -> int:
        """Play a scripted session on a simulated clock, return the best score reached"""
        frames = HEADLESS_FRAMES if frames is None else frames
        now = 0.0
        step = 1000 / FPS
        final_score = 0

        self.game.handle_action(InputAction.START, now)
        for _ in range(frames):
            now += step
            if self.game.state == GameState.COUNTDOWN:
                self.game.handle_action(InputAction.SKIP, now)
            elif self.game.state == GameState.PLAYING:
                self.steer_towards_food(now)
            self.frame(now)
            final_score = max(final_score, self.game.score)
            if self.game.state == GameState.START:
                break

        # Record a game still running when the script runs out of frames
        if self.game.state in (GameState.PLAYING, GameState.PAUSED):
            self.game.game_over(now)

        pygame.quit()
        return final_score

    def steer_towards_food(self, now: float):
        """Greedy autopilot for headless runs: the safe turn that closes most distance"""
        snake = self.game.snake
        head_x, head_y = snake.head
        food_x, food_y = self.game.food.position

        best_action, best_distance = None, None
        for action in (InputAction.RIGHT, InputAction.LEFT, InputAction.DOWN, InputAction.UP):
            dx, dy = action.direction
            if (dx, dy) == (-snake.direction[0], -snake.direction[1]):
                continue
            x, y = head_x + dx, head_y + dy
            if not (0 <= x < snake.grid_count and 0 <= y < snake.grid_count):
                continue
            if snake.check_self_collision((x, y)):
                continue
            distance = abs(food_x - x) + abs(food_y - y)
            if best_distance is None or distance < best_distance:
                best_action, best_distance = action, distance

        if best_action is not None:
            self.game.handle_action(best_action, now)


def main(argv=None):
    """Entry point"""
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(
        level=os.environ.get(LOG_LEVEL_ENV, "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = GameConfig.from_env()
    storage = HighScoreStorage(JsonFileBackend(config.high_score_path))
    headless = is_headless(argv)
    app = App(config, storage, headless=headless)

    if headless:
        print("Running in headless mode for testing...")
        score = app.run_headless()
        print(f"Headless test complete. Score: {score}, high score: {storage.get_high_score()}")
    else:
        app.run()


if __name__ == "__main__":
    main()
