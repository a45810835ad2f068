"""
Game constants for Colorful Snake.
"""

# Grid
GRID_SIZE = 20  # Pixels per cell
GRID_COUNT = 30  # Cells per side
SCORE_BAR_HEIGHT = 40
FPS = 60

# Movement
SNAKE_SPEED = 5  # Moves per second
INITIAL_SNAKE_LENGTH = 4

# Scoring
POINTS_PER_FOOD = 20

# Timing (milliseconds)
COUNTDOWN_MS = 3000
GAME_OVER_MS = 5000
FOOD_BLINK_MS = 500

# Food placement
FOOD_MAX_ATTEMPTS = 1000
FOOD_RADIUS = 7.5

# High score slot
HIGH_SCORE_KEY = "colorfulSnake_highScore"

# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
LIGHT_BG = (240, 240, 240)
GRID_LINE = (215, 215, 215)
SCORE_COLOR = (60, 60, 80)
TITLE_COLOR = (100, 200, 255)
GAME_OVER_COLOR = (255, 80, 100)

# Snake colors: black head, rainbow body
SNAKE_HEAD_COLOR = BLACK
SNAKE_HEAD_OUTLINE = (68, 68, 68)
SNAKE_BODY_OUTLINE = (34, 34, 34)
SNAKE_BODY_COLORS = (
    (255, 0, 0),
    (255, 128, 0),
    (255, 255, 0),
    (0, 255, 0),
    (0, 255, 255),
    (0, 128, 255),
    (128, 0, 255),
)

# Food blinks between pink and white
FOOD_COLORS = ((255, 105, 180), WHITE)
FOOD_OUTLINE = (255, 20, 147)
