# session.py
from typing import Optional
import logging
import random

from .clock import FixedStepClock
from .config import Config, CFG
from .game import GameState, Heading, new_game_state, request_heading, step_game
from .store import ScoreStore

logger = logging.getLogger(__name__)


class Session:
    """
    Owns everything mutable about a play session: the current game, the
    clock that paces it, the food RNG and the best-score store.
    Input and rendering go through this object instead of touching globals.
    """

    def __init__(
        self,
        store: ScoreStore,
        cfg: Config = CFG,
        rng: Optional[random.Random] = None,
    ):
        self.cfg = cfg
        self.store = store
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.clock = FixedStepClock(cfg.tick_ms, self._step)
        self.state: GameState = self._new_state()

    def _new_state(self) -> GameState:
        return new_game_state(
            self.rng, self.store, self.cfg.grid_w, self.cfg.grid_h, self.cfg.best_key
        )

    def _step(self) -> bool:
        return step_game(self.state, self.rng, self.store, self.cfg.best_key)

    @property
    def paused(self) -> bool:
        return self.clock.paused

    def request(self, heading: Heading) -> bool:
        return request_heading(self.state, heading)

    def toggle_pause(self) -> bool:
        return self.clock.toggle_pause()

    def set_paused(self, paused: bool) -> None:
        self.clock.set_paused(paused)

    def restart(self) -> GameState:
        self.state = self._new_state()
        self.clock.reset()
        return self.state

    def frame(self, now_ms: float) -> bool:
        """One display frame; returns True if the game advanced a tick."""
        return self.clock.frame(now_ms, active=not self.state.dead)
