"""
Shared fixtures for the Colorful Snake test suite.
"""

import random
from collections import deque

import pytest

from colorful_snake.config import GameConfig
from colorful_snake.game import Game
from colorful_snake.snake import RIGHT
from colorful_snake.storage import HighScoreStorage, MemoryBackend


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def storage():
    return HighScoreStorage(MemoryBackend())


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def game(config, storage, rng):
    return Game(config, storage, rng=rng)


@pytest.fixture
def playing_game(game):
    """A game that has just left the countdown at t=0"""
    game.start_new_game(0)
    game.skip_countdown(0)
    return game


@pytest.fixture
def place_snake():
    """Put a snake in an exact configuration"""
    def place(snake, body, direction=RIGHT):
        snake.body = deque(body)
        snake.direction = direction
        snake.pending_direction = direction
    return place


@pytest.fixture
def sdl_dummy(monkeypatch):
    """Initialize pygame against the dummy video and audio drivers"""
    pygame = pytest.importorskip("pygame")
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    pygame.init()
    yield pygame
    pygame.quit()
