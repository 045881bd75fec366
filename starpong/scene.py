"""
What the renderer draws each frame.

Every entity is a textured unit quad (-0.5..0.5) placed by one model matrix:
translate(position) * rotate_z(angle) * scale(sprite scale).
"""

import math
from dataclasses import dataclass

from starpong.config import BALL_SCALE, BG_SCALE, PADDLE_SCALE


@dataclass(frozen=True)
class Drawable:
    texture: str
    position: tuple
    scale: tuple
    angle: float = 0.0


def model_matrix(position, scale, angle=0.0):
    """Column-major 4x4 matrix, ready for glLoadMatrixf."""
    tx, ty = position
    sx, sy = scale
    rad = math.radians(angle)
    c, s = math.cos(rad), math.sin(rad)
    return (
        c * sx, s * sx, 0.0, 0.0,
        -s * sy, c * sy, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        tx, ty, 0.0, 1.0,
    )


def draw_list(state):
    """Everything to draw this frame, back to front."""
    items = [
        Drawable('background', (0.0, 0.0), BG_SCALE),
        Drawable('red_paddle', tuple(state.left.position), PADDLE_SCALE, state.left.angle),
        Drawable('blue_paddle', tuple(state.right.position), PADDLE_SCALE, state.right.angle),
    ]
    for ball in state.active_balls:
        items.append(Drawable('ball', tuple(ball.position), BALL_SCALE))
    return items
