"""
Tests for the board snapshot and drawing onto an offscreen surface.
"""

import numpy as np  # type: ignore
import pygame  # type: ignore
import pytest

from src.snake.config import BODY, FOOD, HEAD
from src.snake.render import (
    BODY_CELL,
    EMPTY,
    FOOD_CELL,
    HEAD_CELL,
    board_array,
    draw_game,
    draw_game_over,
    draw_paused,
)

CELL = 24


@pytest.fixture
def font():
    return pygame.font.Font(None, 20)


@pytest.fixture
def screen():
    return pygame.Surface((10 * CELL, 10 * CELL))


def center(gx, gy):
    return (gx * CELL + CELL // 2, gy * CELL + CELL // 2)


class TestBoardArray:
    def test_codes(self, make_state):
        """Head, body and food each get their own code."""
        state = make_state([(5, 5), (4, 5), (3, 5)], food=(7, 2), grid=(10, 8))
        board = board_array(state)
        assert board.shape == (8, 10)
        assert board[5, 5] == HEAD_CELL
        assert board[5, 4] == BODY_CELL
        assert board[5, 3] == BODY_CELL
        assert board[2, 7] == FOOD_CELL
        assert int(np.count_nonzero(board == EMPTY)) == 80 - 4

    def test_does_not_touch_state(self, make_state):
        """Taking a snapshot leaves the game alone."""
        state = make_state([(5, 5), (4, 5), (3, 5)], food=(7, 2))
        board = board_array(state)
        board[:] = EMPTY
        assert state.snake == [(5, 5), (4, 5), (3, 5)]


class TestDraw:
    def test_cells_painted_in_palette(self, make_state, screen, font):
        """Head is drawn in its own colour, distinct from the body."""
        state = make_state([(5, 5), (4, 5), (3, 5)], food=(7, 8))
        draw_game(screen, font, state, CELL)
        assert tuple(screen.get_at(center(5, 5)))[:3] == HEAD
        assert tuple(screen.get_at(center(4, 5)))[:3] == BODY
        assert tuple(screen.get_at(center(7, 8)))[:3] == FOOD
        assert HEAD != BODY

    def test_overlays_darken_the_board(self, make_state, screen, font):
        """Game-over and pause overlays dim what's underneath."""
        state = make_state([(5, 5), (4, 5), (3, 5)], food=(7, 8))
        state.dead = True
        state.death_reason = "wall"
        draw_game(screen, font, state, CELL)
        before = tuple(screen.get_at(center(7, 8)))[:3]
        draw_game_over(screen, font, state)
        after = tuple(screen.get_at(center(7, 8)))[:3]
        assert sum(after) < sum(before)

        draw_game(screen, font, state, CELL)
        draw_paused(screen, font)
        assert sum(tuple(screen.get_at(center(7, 8)))[:3]) < sum(before)
