"""
Tests for config.py.
"""

from pathlib import Path

import pytest

from colorful_snake.config import DEFAULT_DATA_DIR, GameConfig


class TestGameConfig:

    def test_defaults(self):
        config = GameConfig()
        assert config.grid_count == 30
        assert config.grid_size == 20
        assert config.points_per_food == 20
        assert config.move_interval == 200
        assert config.board_pixels == 600
        assert config.high_score_path == DEFAULT_DATA_DIR / "highscore.json"

    @pytest.mark.parametrize("kwargs", [
        {"grid_count": 4},
        {"grid_size": 0},
        {"moves_per_second": 0},
        {"moves_per_second": float("nan")},
        {"moves_per_second": float("inf")},
        {"points_per_food": -1},
    ])
    def test_rejects_nonsense(self, kwargs):
        with pytest.raises(ValueError):
            GameConfig(**kwargs)

    def test_from_env(self, tmp_path):
        config = GameConfig.from_env({
            "COLORFUL_SNAKE_GRID_COUNT": "12",
            "COLORFUL_SNAKE_SPEED": "8",
            "COLORFUL_SNAKE_DATA_DIR": str(tmp_path),
        })
        assert config.grid_count == 12
        assert config.move_interval == 125
        assert config.high_score_path == Path(tmp_path) / "highscore.json"

    def test_from_env_rejects_nan_speed(self):
        with pytest.raises(ValueError):
            GameConfig.from_env({"COLORFUL_SNAKE_SPEED": "nan"})

    def test_from_env_without_overrides(self):
        assert GameConfig.from_env({}) == GameConfig()
