"""
Star Pong constants.

World units: the orthographic camera spans x in [-5, 5] and y in [-3.75, 3.75].
"""

import pygame

# ============================================================================
# WINDOW & CAMERA
# ============================================================================

WINDOW_WIDTH = 640 * 2
WINDOW_HEIGHT = 480 * 2
WINDOW_TITLE = "Star Pong"

BG_COLOR = (0.9765625, 0.97265625, 0.9609375, 1.0)

# left, right, bottom, top, near, far
ORTHO_BOUNDS = (-5.0, 5.0, -3.75, 3.75, -1.0, 1.0)

# ============================================================================
# PLAYFIELD
# ============================================================================

VERTICAL_LIMIT = 2.5        # paddles clamp and balls bounce here
HORIZONTAL_LIMIT = 4.0      # paddle x
OUTER_LIMIT = HORIZONTAL_LIMIT + 1.0   # a ball past this triggers a reset

# ============================================================================
# ENTITIES
# ============================================================================

PADDLE_SPEED = 3.0
BALL_SPEED = 1.0

# Collision extents (full sizes 0.1 x 0.8 and 0.2)
PADDLE_HALF_WIDTH = 0.05
PADDLE_HALF_HEIGHT = 0.4
BALL_HALF_WIDTH = 0.1

LEFT_PADDLE_START = (-HORIZONTAL_LIMIT, 0.0)
RIGHT_PADDLE_START = (HORIZONTAL_LIMIT, 0.0)

# Balls all start at the origin on different diagonals
BALL_START = (0.0, 0.0)
BALL_DIRECTIONS = (
    (-1.0, 1.0),
    (1.0, 1.0),
    (-1.0, -1.0),
)
MAX_BALLS = len(BALL_DIRECTIONS)

# Spin variant, degrees per second
ROTATION_SPEED = 60.0

# Sprite scales (drawn size, independent of collision extents)
PADDLE_SCALE = (0.25, 0.75595)
BALL_SCALE = (0.3, 0.3)
BG_SCALE = (15.0, 8.43055)

# ============================================================================
# ASSETS
# ============================================================================

RED_PADDLE_SPRITE = "red_paddle.png"
BLUE_PADDLE_SPRITE = "blue_paddle.png"
BACKGROUND_SPRITE = "starwars_bg.jpg"
BALL_SPRITE = "ball.png"

# ============================================================================
# CONTROLS
# ============================================================================

KEY_LEFT_UP = pygame.K_w
KEY_LEFT_DOWN = pygame.K_s
KEY_RIGHT_UP = pygame.K_UP
KEY_RIGHT_DOWN = pygame.K_DOWN
KEY_TOGGLE_AUTONOMOUS = pygame.K_t
KEY_RESET = pygame.K_p
KEY_QUIT = pygame.K_ESCAPE
BALL_COUNT_KEYS = {
    pygame.K_1: 1,
    pygame.K_2: 2,
    pygame.K_3: 3,
}

VARIANTS = ("pong", "spin")
