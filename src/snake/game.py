# game.py
from dataclasses import dataclass
from typing import List, Tuple, Optional, Iterable
import logging
import random

from .config import GRID_W, GRID_H, RIGHT, BEST_KEY
from .store import ScoreStore

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]
Heading = Tuple[int, int]

START_LENGTH = 3


# ---------- Helpers ----------
def spawn_food(
    snake: Iterable[Cell],
    rng: random.Random,
    grid_w: int = GRID_W,
    grid_h: int = GRID_H,
) -> Cell:
    """
    Pick a free cell uniformly at random by rejection sampling.
    Never returns if the snake covers the whole grid.
    """
    occupied = set(snake)
    while True:
        fx = rng.randrange(grid_w)
        fy = rng.randrange(grid_h)
        if (fx, fy) not in occupied:
            return (fx, fy)


def is_opposite(a: Heading, b: Heading) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def in_bounds(cell: Cell, grid_w: int, grid_h: int) -> bool:
    x, y = cell
    return 0 <= x < grid_w and 0 <= y < grid_h


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    direction: Heading             # heading applied on the last completed step
    pending: Heading               # buffered request, committed on the next step
    food: Cell
    score: int
    best: int
    grid_w: int = GRID_W
    grid_h: int = GRID_H
    dead: bool = False
    death_reason: Optional[str] = None   # "wall" or "self"

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def shown_best(self) -> int:
        """High score as the HUD shows it: counts the game in progress."""
        return max(self.best, self.score)


def new_game_state(
    rng: random.Random,
    store: ScoreStore,
    grid_w: int = GRID_W,
    grid_h: int = GRID_H,
    best_key: str = BEST_KEY,
) -> GameState:
    """Fresh game: snake centred and facing right, best score read from the store."""
    cx, cy = grid_w // 2, grid_h // 2
    snake = [(cx - i, cy) for i in range(START_LENGTH)]
    food = spawn_food(snake, rng, grid_w, grid_h)
    best = store.get(best_key)
    logger.info("New game on %dx%d grid (best=%d)", grid_w, grid_h, best)
    return GameState(
        snake=snake,
        direction=RIGHT,
        pending=RIGHT,
        food=food,
        score=0,
        best=best,
        grid_w=grid_w,
        grid_h=grid_h,
    )


# ---------- Input / Update ----------
def request_heading(state: GameState, heading: Heading) -> bool:
    """
    Buffer a heading for the next step. A request for the exact reverse of
    the committed direction is dropped. Returns True if it was buffered.
    """
    if is_opposite(heading, state.direction):
        logger.debug("Dropped reverse heading %s (moving %s)", heading, state.direction)
        return False
    state.pending = heading
    return True


def _die(state: GameState, reason: str, store: ScoreStore, best_key: str) -> None:
    state.dead = True
    state.death_reason = reason
    best = max(state.best, state.score)
    store.set(best_key, best)
    if best > state.best:
        logger.info("New best score: %d", best)
    state.best = best
    logger.info("Game over (%s) with score %d", reason, state.score)


def step_game(
    state: GameState,
    rng: random.Random,
    store: ScoreStore,
    best_key: str = BEST_KEY,
) -> bool:
    """
    Advance the game by one tick.
    Returns True if the snake is still alive afterwards, False on game over.
    A dead state is left untouched.
    """
    if state.dead:
        return False

    direction = state.pending
    hx, hy = state.snake[0]
    dx, dy = direction
    new_head = (hx + dx, hy + dy)

    # Wall collision
    if not in_bounds(new_head, state.grid_w, state.grid_h):
        _die(state, "wall", store, best_key)
        return False

    # Self collision, checked against every current cell including the tail
    if new_head in state.snake:
        _die(state, "self", store, best_key)
        return False

    # Move / grow
    state.snake.insert(0, new_head)
    if new_head == state.food:
        state.score += 1
        state.food = spawn_food(state.snake, rng, state.grid_w, state.grid_h)
        logger.debug("Ate food, score=%d, next food at %s", state.score, state.food)
    else:
        state.snake.pop()

    # Commit direction once per tick
    state.direction = direction
    return True


def restart(
    rng: random.Random,
    store: ScoreStore,
    grid_w: int = GRID_W,
    grid_h: int = GRID_H,
    best_key: str = BEST_KEY,
) -> GameState:
    """Throw the old game away; the new one only inherits the persisted best."""
    return new_game_state(rng, store, grid_w, grid_h, best_key)
