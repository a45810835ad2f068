"""
pygame renderer. Draws a GameSnapshot; never touches the game itself.
"""

from typing import Tuple

import pygame

from .constants import (
    BLACK,
    FOOD_OUTLINE,
    GAME_OVER_COLOR,
    GRID_LINE,
    LIGHT_BG,
    SCORE_BAR_HEIGHT,
    SCORE_COLOR,
    SNAKE_BODY_OUTLINE,
    SNAKE_HEAD_OUTLINE,
    TITLE_COLOR,
    WHITE,
)
from .game import GameSnapshot, GameState
from .snake import DOWN, LEFT, RIGHT


def darken_color(color: Tuple[int, int, int], factor: float) -> Tuple[int, int, int]:
    """Scale each channel down by factor (0 keeps the color, 1 gives black)"""
    return tuple(int(c * (1 - factor)) for c in color)


class Renderer:
    """Draws the board below a score bar"""

    def __init__(self, surface: pygame.Surface, grid_size: int, grid_count: int):
        self.surface = surface
        self.grid_size = grid_size
        self.grid_count = grid_count
        self.board_pixels = grid_size * grid_count
        self.board_top = SCORE_BAR_HEIGHT

        self.font_large = pygame.font.Font(None, 72)
        self.font_medium = pygame.font.Font(None, 48)
        self.font_small = pygame.font.Font(None, 32)

    def cell_center(self, position: Tuple[int, int]) -> Tuple[float, float]:
        return (
            position[0] * self.grid_size + self.grid_size / 2,
            self.board_top + position[1] * self.grid_size + self.grid_size / 2,
        )

    def draw(self, snapshot: GameSnapshot):
        """Draw everything for one frame"""
        self.clear()
        self.draw_score_bar(snapshot)

        if snapshot.state == GameState.START:
            self.draw_start_screen(snapshot)
            return
        if snapshot.state == GameState.GAME_OVER:
            self.draw_game_over(snapshot)
            return

        self.draw_food(snapshot)
        self.draw_snake(snapshot)

        if snapshot.state == GameState.COUNTDOWN:
            self.draw_countdown(snapshot)
        elif snapshot.state == GameState.PAUSED:
            self.draw_paused()

    def clear(self):
        self.surface.fill(LIGHT_BG)
        self.draw_grid()

    def draw_grid(self):
        top = self.board_top
        bottom = top + self.board_pixels
        for i in range(self.grid_count + 1):
            offset = i * self.grid_size
            pygame.draw.line(self.surface, GRID_LINE, (offset, top), (offset, bottom))
            pygame.draw.line(self.surface, GRID_LINE, (0, top + offset), (self.board_pixels, top + offset))

    def draw_score_bar(self, snapshot: GameSnapshot):
        bar = pygame.Rect(0, 0, self.board_pixels, SCORE_BAR_HEIGHT)
        pygame.draw.rect(self.surface, WHITE, bar)

        score_surface = self.font_small.render(f"Score: {snapshot.score}", True, SCORE_COLOR)
        self.surface.blit(score_surface, (10, 8))

        high_surface = self.font_small.render(f"High: {snapshot.high_score}", True, SCORE_COLOR)
        self.surface.blit(high_surface, (self.board_pixels - high_surface.get_width() - 10, 8))

    def draw_snake(self, snapshot: GameSnapshot):
        # Tail first so the head ends up on top
        for index in range(snapshot.length - 1, -1, -1):
            segment = snapshot.segments[index]
            if index == 0:
                self.draw_snake_head(segment.position, segment.color, snapshot.direction)
            else:
                self.draw_snake_body(segment.position, segment.color)

    def draw_snake_head(self, position, color, direction):
        """Diamond head with a pair of eyes looking along direction"""
        x, y = self.cell_center(position)
        half = self.grid_size * 0.8 / 2
        points = [(x, y - half), (x + half, y), (x, y + half), (x - half, y)]
        pygame.draw.polygon(self.surface, color, points)
        pygame.draw.polygon(self.surface, SNAKE_HEAD_OUTLINE, points, 1)

        eye_size = max(1, int(half * 2 * 0.15))
        eye_offset = half * 2 * 0.2
        if direction == RIGHT:
            eyes = [(x + eye_offset, y - eye_offset), (x + eye_offset, y + eye_offset)]
        elif direction == LEFT:
            eyes = [(x - eye_offset, y - eye_offset), (x - eye_offset, y + eye_offset)]
        elif direction == DOWN:
            eyes = [(x - eye_offset, y + eye_offset), (x + eye_offset, y + eye_offset)]
        else:  # UP
            eyes = [(x - eye_offset, y - eye_offset), (x + eye_offset, y - eye_offset)]

        for ex, ey in eyes:
            pygame.draw.circle(self.surface, WHITE, (int(ex), int(ey)), eye_size)
            pygame.draw.circle(self.surface, BLACK, (int(ex), int(ey)), max(1, int(eye_size * 0.6)))

    def draw_snake_body(self, position, color):
        size = int(self.grid_size * 0.9)
        offset = (self.grid_size - size) // 2
        rect = pygame.Rect(
            position[0] * self.grid_size + offset,
            self.board_top + position[1] * self.grid_size + offset,
            size,
            size,
        )
        pygame.draw.rect(self.surface, darken_color(color, 0.3), rect, border_radius=3)
        pygame.draw.rect(self.surface, color, rect.inflate(-4, -4), border_radius=3)
        pygame.draw.rect(self.surface, SNAKE_BODY_OUTLINE, rect, 1, border_radius=3)

    def draw_food(self, snapshot: GameSnapshot):
        """Blinking circle with a soft glow"""
        x, y = snapshot.food_pixel_position
        y += self.board_top
        radius = snapshot.food_radius
        color = snapshot.food_color

        glow_size = int(radius * 2)
        glow_surface = pygame.Surface((glow_size * 2, glow_size * 2), pygame.SRCALPHA)
        for i in range(3):
            size = glow_size - i * 3
            if size > 0:
                pygame.draw.circle(glow_surface, (*color, 40 + i * 20), (glow_size, glow_size), size)
        self.surface.blit(glow_surface, (int(x) - glow_size, int(y) - glow_size))

        pygame.draw.circle(self.surface, color, (int(x), int(y)), int(radius))
        pygame.draw.circle(self.surface, FOOD_OUTLINE, (int(x), int(y)), int(radius), 2)

    def draw_overlay(self, alpha: int):
        overlay = pygame.Surface((self.board_pixels, self.board_pixels), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, alpha))
        self.surface.blit(overlay, (0, self.board_top))

    def draw_centered(self, font, text, color, dy=0):
        text_surface = font.render(text, True, color)
        center = (self.board_pixels // 2, self.board_top + self.board_pixels // 2 + dy)
        self.surface.blit(text_surface, text_surface.get_rect(center=center))

    def draw_start_screen(self, snapshot: GameSnapshot):
        self.draw_centered(self.font_large, "COLORFUL SNAKE", TITLE_COLOR, -60)
        self.draw_centered(self.font_small, f"High score: {snapshot.high_score}", SCORE_COLOR, 0)
        self.draw_centered(self.font_small, "Press ENTER to start", SCORE_COLOR, 50)

    def draw_countdown(self, snapshot: GameSnapshot):
        if snapshot.countdown_remaining > 0:
            self.draw_centered(self.font_large, str(snapshot.countdown_remaining), TITLE_COLOR)
            self.draw_centered(self.font_small, "SPACE to skip", SCORE_COLOR, 60)

    def draw_paused(self):
        self.draw_overlay(128)
        self.draw_centered(self.font_large, "PAUSED", TITLE_COLOR)
        self.draw_centered(self.font_small, "Press SPACE to continue", WHITE, 50)

    def draw_game_over(self, snapshot: GameSnapshot):
        self.draw_centered(self.font_large, "GAME OVER", GAME_OVER_COLOR, -80)
        self.draw_centered(self.font_medium, f"Final Score: {snapshot.score}", SCORE_COLOR, -10)
        self.draw_centered(self.font_small, f"High score: {snapshot.high_score}", SCORE_COLOR, 40)
        if snapshot.is_new_record:
            self.draw_centered(self.font_small, "NEW HIGH SCORE!", (255, 160, 0), 80)
        self.draw_centered(
            self.font_small,
            f"Back to menu in {snapshot.game_over_remaining}s  |  ENTER to play again",
            SCORE_COLOR,
            130,
        )
