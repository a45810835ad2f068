"""
Colorful Snake: a grid snake game with a frame-driven state machine.

The simulation (Snake, Food, Game) is independent of pygame drawing and
window handling, which live in renderer.py and app.py.
"""

from .config import GameConfig
from .food import Food
from .game import Game, GameSnapshot, GameState, Segment
from .snake import DIRECTIONS, DOWN, LEFT, RIGHT, UP, Snake
from .storage import HighScoreStorage, JsonFileBackend, MemoryBackend

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'DIRECTIONS',
    'GameConfig',
    'Food',
    'Snake',
    'Game', 'GameSnapshot', 'GameState', 'Segment',
    'HighScoreStorage', 'JsonFileBackend', 'MemoryBackend',
]
