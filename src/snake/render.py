# render.py
from typing import Tuple

import numpy as np  # type: ignore
import pygame       # type: ignore

from .config import BG, GRID_LINE, HEAD, BODY, FOOD, TEXT, OVERLAY
from .game import GameState

# Board codes produced by board_array()
EMPTY, BODY_CELL, HEAD_CELL, FOOD_CELL = 0, 1, 2, 3

PALETTE = {
    BODY_CELL: BODY,
    HEAD_CELL: HEAD,
    FOOD_CELL: FOOD,
}


def board_array(state: GameState) -> np.ndarray:
    """
    Read-only snapshot of the board as a (grid_h, grid_w) uint8 array of
    EMPTY / BODY_CELL / HEAD_CELL / FOOD_CELL codes.
    """
    board = np.zeros((state.grid_h, state.grid_w), dtype=np.uint8)
    fx, fy = state.food
    board[fy, fx] = FOOD_CELL
    if state.snake:
        xs, ys = zip(*state.snake)
        board[list(ys), list(xs)] = BODY_CELL
        hx, hy = state.snake[0]
        board[hy, hx] = HEAD_CELL
    return board


def draw_cell(screen: pygame.Surface, gx: int, gy: int, cell: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * cell + 2, gy * cell + 2, cell - 4, cell - 4)
    pygame.draw.rect(screen, color, rect)


def draw_grid(screen: pygame.Surface, state: GameState, cell: int) -> None:
    w, h = state.grid_w * cell, state.grid_h * cell
    for x in range(state.grid_w + 1):
        pygame.draw.line(screen, GRID_LINE, (x * cell, 0), (x * cell, h))
    for y in range(state.grid_h + 1):
        pygame.draw.line(screen, GRID_LINE, (0, y * cell), (w, y * cell))


def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: GameState, cell: int) -> None:
    screen.fill(BG)
    draw_grid(screen, state, cell)

    board = board_array(state)
    for code, color in PALETTE.items():
        for gy, gx in np.argwhere(board == code):
            draw_cell(screen, int(gx), int(gy), cell, color)

    # HUD
    txt = font.render(f"Score: {state.score}   Best: {state.shown_best}", True, TEXT)
    screen.blit(txt, (8, 6))


def _draw_overlay(screen: pygame.Surface) -> None:
    overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    overlay.fill(OVERLAY)  # RGBA
    screen.blit(overlay, (0, 0))


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    _draw_overlay(screen)
    cx, cy = screen.get_width() // 2, screen.get_height() // 2

    title = font.render("Game Over - press R to restart", True, TEXT)
    reason = "Hit the wall" if state.death_reason == "wall" else "Bit yourself"
    sub = font.render(f"{reason}. Score: {state.score}", True, TEXT)

    screen.blit(title, title.get_rect(center=(cx, cy - 14)))
    screen.blit(sub, sub.get_rect(center=(cx, cy + 14)))


def draw_paused(screen: pygame.Surface, font: pygame.font.Font) -> None:
    _draw_overlay(screen)
    txt = font.render("Paused - press P to resume", True, TEXT)
    screen.blit(txt, txt.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2)))
