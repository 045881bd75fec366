"""Pytest fixtures for Star Pong tests."""
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from starpong import physics


@pytest.fixture
def state():
    """Fresh game state: one ball, two-player, classic variant."""
    return physics.initial_state()


@pytest.fixture
def idle():
    """No keys held."""
    return physics.Controls()
