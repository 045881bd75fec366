"""Keyboard -> game state mapping."""

from starpong import physics
from starpong.config import (
    BALL_COUNT_KEYS,
    KEY_LEFT_DOWN,
    KEY_LEFT_UP,
    KEY_RESET,
    KEY_RIGHT_DOWN,
    KEY_RIGHT_UP,
    KEY_TOGGLE_AUTONOMOUS,
)


def read_controls(keys):
    """Snapshot of held keys, from pygame.key.get_pressed() or anything indexable like it."""
    return physics.Controls(
        left_up=bool(keys[KEY_LEFT_UP]),
        left_down=bool(keys[KEY_LEFT_DOWN]),
        right_up=bool(keys[KEY_RIGHT_UP]),
        right_down=bool(keys[KEY_RIGHT_DOWN]),
    )


def apply_key(state, key):
    """Apply a key-down event to the game state. Unbound keys are ignored."""
    if key == KEY_TOGGLE_AUTONOMOUS:
        state = physics.toggle_autonomous(state)
        print(f"Single player: {'ON' if state.autonomous else 'OFF'}")
    elif key == KEY_RESET:
        state = physics.reset_state(state)
        print("Reset")
    elif key in BALL_COUNT_KEYS:
        state = physics.select_ball_count(state, BALL_COUNT_KEYS[key])
        print(f"Balls: {state.ball_count}")
    return state
