import os
import random

# Headless pygame for event/surface tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # type: ignore  # noqa: E402
import pytest  # noqa: E402

from src.snake.config import RIGHT  # noqa: E402
from src.snake.game import GameState  # noqa: E402
from src.snake.store import MemoryStore  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def pygame_init():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def rng():
    return random.Random(1234)


def _make_state(snake, direction=RIGHT, food=(0, 0), score=0, best=0, grid=(10, 10)):
    """Hand-built state for scenario tests."""
    return GameState(
        snake=list(snake),
        direction=direction,
        pending=direction,
        food=food,
        score=score,
        best=best,
        grid_w=grid[0],
        grid_h=grid[1],
    )


@pytest.fixture
def make_state():
    return _make_state
