from dataclasses import dataclass
from typing import Optional
import os

# ----- Window & grid -----
WIDTH, HEIGHT = 480, 480
CELL_SIZE = 24
GRID_W, GRID_H = WIDTH // CELL_SIZE, HEIGHT // CELL_SIZE

# ----- Colors -----
BG        = (13, 17, 23)
GRID_LINE = (40, 46, 56)
HEAD      = (167, 139, 250)
BODY      = (139, 92, 246)
FOOD      = (34, 211, 238)
TEXT      = (230, 237, 243)
OVERLAY   = (0, 0, 0, 115)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
HEADINGS = (UP, DOWN, LEFT, RIGHT)

# ----- Persistence -----
BEST_KEY = "best"
DEFAULT_BEST_FILE = os.environ.get(
    "SNAKE_BEST_FILE", os.path.join(os.path.expanduser("~"), ".snake_best.json")
)


# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None          # None -> nondeterministic food
    tick_ms: int = 120                  # speed; make smaller to go faster
    cell_size: int = CELL_SIZE
    width: int = WIDTH
    height: int = HEIGHT
    fps: int = 60
    swipe_threshold: int = 24           # px of drag before a swipe counts
    best_key: str = BEST_KEY
    best_file: str = DEFAULT_BEST_FILE

    @property
    def grid_w(self) -> int:
        return self.width // self.cell_size

    @property
    def grid_h(self) -> int:
        return self.height // self.cell_size

    def validate(self) -> "Config":
        """Raise ValueError if the board can't hold a starting snake and a food cell."""
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.grid_w < 4 or self.grid_h < 1:
            raise ValueError(
                f"grid {self.grid_w}x{self.grid_h} is too small "
                f"(need at least 4x1 cells of {self.cell_size}px)"
            )
        return self


CFG = Config()
