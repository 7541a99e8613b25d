# clock.py
from typing import Callable, Optional
import logging

logger = logging.getLogger(__name__)


class FixedStepClock:
    """
    Turns display frames of arbitrary cadence into fixed-length game ticks.

    Each frame adds its elapsed time to an accumulator; once the accumulator
    reaches the interval, `step` runs once and the accumulator is cleared.
    A frame never triggers more than one step, so the game runs at
    min(frame rate, tick rate) and cannot fall into catch-up bursts.
    """

    def __init__(self, interval_ms: float, step: Callable[[], object]):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self.step = step
        self.acc = 0.0
        self.last: Optional[float] = None
        self.paused = False

    def reset(self) -> None:
        """Forget accumulated time; the next frame counts as the first."""
        self.acc = 0.0
        self.last = None

    def set_paused(self, paused: bool) -> None:
        if paused == self.paused:
            return
        self.paused = paused
        self.reset()
        logger.info("Game %s", "paused" if paused else "resumed")

    def toggle_pause(self) -> bool:
        self.set_paused(not self.paused)
        return self.paused

    def frame(self, now_ms: float, active: bool = True) -> bool:
        """
        Feed one frame timestamp. `active=False` (e.g. game over) keeps time
        from piling up. Returns True if a step ran.
        """
        # First frame, or a timer that went backwards: no elapsed time
        if self.last is None or now_ms < self.last:
            dt = 0.0
        else:
            dt = now_ms - self.last
        self.last = now_ms

        if self.paused or not active:
            return False

        self.acc += dt
        if self.acc < self.interval_ms:
            return False
        self.acc = 0.0
        self.step()
        return True
