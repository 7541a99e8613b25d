# controls.py
from typing import Optional, Tuple
import logging

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT
from .game import Heading

logger = logging.getLogger(__name__)

# pygame.key.name() -> heading; arrows and WASD
KEY_HEADINGS = {
    "up": UP, "w": UP,
    "down": DOWN, "s": DOWN,
    "left": LEFT, "a": LEFT,
    "right": RIGHT, "d": RIGHT,
}
PAUSE_KEYS = ("p", "space")
RESTART_KEYS = ("r",)
QUIT_KEYS = ("escape",)


def key_heading(name: str) -> Optional[Heading]:
    """Heading for a key name, ignoring case. None if the key doesn't steer."""
    return KEY_HEADINGS.get(name.lower())


def swipe_heading(dx: float, dy: float) -> Heading:
    """Direction of a drag along its dominant axis (ties go vertical)."""
    if abs(dx) > abs(dy):
        return RIGHT if dx > 0 else LEFT
    return DOWN if dy > 0 else UP


class SwipeTracker:
    """
    Recognises drags of at least `threshold` pixels (Manhattan distance).
    After each recognised swipe the anchor moves to the current point, so a
    single long drag can steer several times.
    """

    def __init__(self, threshold: float = 24):
        self.threshold = threshold
        self.anchor: Optional[Tuple[float, float]] = None

    def begin(self, pos: Tuple[float, float]) -> None:
        self.anchor = pos

    def move(self, pos: Tuple[float, float]) -> Optional[Heading]:
        if self.anchor is None:
            return None
        dx = pos[0] - self.anchor[0]
        dy = pos[1] - self.anchor[1]
        if abs(dx) + abs(dy) < self.threshold:
            return None
        self.anchor = pos
        return swipe_heading(dx, dy)

    def end(self) -> None:
        self.anchor = None


# ---------- pygame event dispatch ----------
def handle_event(session, event, swipe: SwipeTracker) -> bool:
    """
    Route one pygame event to the session. Steering only ever buffers a
    heading; pause and restart go through the session. Returns False to quit.
    """
    if event.type == pygame.QUIT:
        return False

    if event.type == pygame.KEYDOWN:
        name = pygame.key.name(event.key).lower()
        if name in QUIT_KEYS:
            return False
        if name in PAUSE_KEYS:
            session.toggle_pause()
        elif name in RESTART_KEYS:
            session.restart()
        else:
            heading = key_heading(name)
            if heading is not None:
                session.request(heading)
        return True

    # Touch: finger coordinates are normalised to [0, 1]
    if event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION, pygame.FINGERUP):
        pos = (event.x * session.cfg.width, event.y * session.cfg.height)
        if event.type == pygame.FINGERDOWN:
            swipe.begin(pos)
        elif event.type == pygame.FINGERUP:
            swipe.end()
        else:
            heading = swipe.move(pos)
            if heading is not None:
                session.request(heading)
        return True

    # Mouse drag stands in for touch; skip the mouse events SDL synthesises from touches
    if getattr(event, "touch", False):
        return True
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        swipe.begin(event.pos)
    elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
        swipe.end()
    elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
        heading = swipe.move(event.pos)
        if heading is not None:
            session.request(heading)
    return True
