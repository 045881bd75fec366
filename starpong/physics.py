"""
Paddle and ball physics for Star Pong.

Everything here is pure: each function takes immutable values and returns new
ones. The game loop owns the single current GameState and swaps it each frame.

Frame order (see step):
    left paddle -> right paddle (keyboard or autopilot) -> spin -> balls 1..n
"""

from dataclasses import dataclass, replace

from starpong.config import (
    BALL_DIRECTIONS,
    BALL_HALF_WIDTH,
    BALL_SPEED,
    BALL_START,
    LEFT_PADDLE_START,
    MAX_BALLS,
    OUTER_LIMIT,
    PADDLE_HALF_HEIGHT,
    PADDLE_HALF_WIDTH,
    PADDLE_SPEED,
    RIGHT_PADDLE_START,
    ROTATION_SPEED,
    VERTICAL_LIMIT,
)


# ============================================================================
# VALUES
# ============================================================================

@dataclass(frozen=True)
class Vec2:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __mul__(self, k):
        return Vec2(self.x * k, self.y * k)

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Paddle:
    position: Vec2
    direction: float = 0.0   # y only: -1, 0 or +1
    angle: float = 0.0       # degrees, spin variant


@dataclass(frozen=True)
class Ball:
    position: Vec2
    direction: Vec2


@dataclass(frozen=True)
class Controls:
    """Held-key snapshot for one frame."""
    left_up: bool = False
    left_down: bool = False
    right_up: bool = False
    right_down: bool = False


@dataclass(frozen=True)
class GameState:
    left: Paddle
    right: Paddle
    balls: tuple
    ball_count: int = 1
    autonomous: bool = False
    autopilot_direction: float = 1.0
    spin: bool = False

    @property
    def active_balls(self):
        return self.balls[:self.ball_count]


# ============================================================================
# RESET
# ============================================================================

def initial_paddles():
    return Paddle(Vec2(*LEFT_PADDLE_START)), Paddle(Vec2(*RIGHT_PADDLE_START))


def initial_balls():
    return tuple(Ball(Vec2(*BALL_START), Vec2(*d)) for d in BALL_DIRECTIONS)


def initial_state(spin=False, ball_count=1, autonomous=False):
    left, right = initial_paddles()
    state = GameState(left=left, right=right, balls=initial_balls(), spin=spin)
    state = select_ball_count(state, ball_count)
    if autonomous:
        state = toggle_autonomous(state)
    return state


def reset_state(state=None):
    """
    Put paddles and balls back where they started.

    Mode choices (ball count, autonomous mode, variant) are kept.
    """
    if state is None:
        return initial_state()
    left, right = initial_paddles()
    return replace(state, left=left, right=right, balls=initial_balls())


# ============================================================================
# PADDLES
# ============================================================================

def input_direction(up, down):
    """+1 for up alone, -1 for down alone, 0 for both or neither."""
    if up == down:
        return 0.0
    return 1.0 if up else -1.0


def clamp(v, lo, hi):
    return max(lo, min(hi, v))


def advance_paddle(paddle, direction, speed, dt, limit=VERTICAL_LIMIT):
    y = paddle.position.y + direction * speed * dt
    y = clamp(y, -limit, limit)
    return replace(paddle, position=Vec2(paddle.position.x, y), direction=direction)


def advance_autonomous(paddle, direction, speed, dt, limit=VERTICAL_LIMIT):
    """
    Move a computer-driven paddle at a fixed speed, turning at the limits.

    Returns (paddle, direction). The turn happens once the clamped position
    has reached the limit, so a large step cannot skip past it.
    """
    paddle = advance_paddle(paddle, direction, speed, dt, limit)
    y = paddle.position.y
    if direction > 0 and y >= limit:
        direction = -1.0
    elif direction < 0 and y <= -limit:
        direction = 1.0
    return replace(paddle, direction=direction), direction


def spin_paddle(paddle, dt, speed=ROTATION_SPEED):
    return replace(paddle, angle=(paddle.angle + speed * dt) % 360.0)


# ============================================================================
# BALLS
# ============================================================================

def overlaps(ball_pos, paddle_pos):
    """Axis-aligned box test between a ball and a paddle."""
    dx = abs(ball_pos.x - paddle_pos.x) - (PADDLE_HALF_WIDTH + BALL_HALF_WIDTH)
    dy = abs(ball_pos.y - paddle_pos.y) - (PADDLE_HALF_HEIGHT + BALL_HALF_WIDTH)
    return dx < 0 and dy < 0


def advance_ball(ball, left, right, speed, dt):
    """
    Run one frame of the bounce model for a single ball.

    Returns (ball, out_of_bounds). When out_of_bounds is True the ball is
    returned untouched and the caller is expected to reset the game.
    """
    dx, dy = ball.direction.x, ball.direction.y

    # Direction is set, not reflected. Right is checked last and wins.
    if overlaps(ball.position, left.position):
        dx = 1.0
    if overlaps(ball.position, right.position):
        dx = -1.0

    if ball.position.x > OUTER_LIMIT or ball.position.x < -OUTER_LIMIT:
        return ball, True

    direction = Vec2(dx, dy)
    position = ball.position + direction * (speed * dt)

    # No clamping: the ball may overshoot the wall for a frame
    if position.y > VERTICAL_LIMIT:
        direction = Vec2(direction.x, -1.0)
    elif position.y < -VERTICAL_LIMIT:
        direction = Vec2(direction.x, 1.0)

    return Ball(position, direction), False


# ============================================================================
# MODES
# ============================================================================

def toggle_autonomous(state):
    seed = state.right.direction if state.right.direction else 1.0
    return replace(state, autonomous=not state.autonomous, autopilot_direction=seed)


def select_ball_count(state, count):
    if not 1 <= count <= MAX_BALLS:
        raise ValueError(f"ball count must be between 1 and {MAX_BALLS}, got {count}")
    return replace(state, ball_count=count)


# ============================================================================
# FRAME
# ============================================================================

def step(state, controls, dt):
    """Advance the whole game by dt seconds."""
    left = advance_paddle(
        state.left, input_direction(controls.left_up, controls.left_down), PADDLE_SPEED, dt)

    autopilot = state.autopilot_direction
    if state.autonomous:
        right, autopilot = advance_autonomous(state.right, autopilot, PADDLE_SPEED, dt)
    else:
        right = advance_paddle(
            state.right, input_direction(controls.right_up, controls.right_down), PADDLE_SPEED, dt)

    if state.spin:
        left = spin_paddle(left, dt)
        right = spin_paddle(right, dt)

    balls = list(state.balls)
    for i in range(state.ball_count):
        ball, out_of_bounds = advance_ball(balls[i], left, right, BALL_SPEED, dt)
        if out_of_bounds:
            return reset_state(state)
        balls[i] = ball

    return replace(state, left=left, right=right, balls=tuple(balls),
                   autopilot_direction=autopilot)
