# main.py
import argparse
import logging

import pygame # type: ignore

from .config import Config, DEFAULT_BEST_FILE
from .controls import SwipeTracker, handle_event
from .render import draw_game, draw_game_over, draw_paused
from .session import Session
from .store import JsonFileStore

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> Config:
    defaults = Config()
    parser = argparse.ArgumentParser(description="Grid snake.")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument("--tick-ms", type=int, default=defaults.tick_ms,
                        help="milliseconds per move; smaller is faster")
    parser.add_argument("--cell-size", type=int, default=defaults.cell_size)
    parser.add_argument("--width", type=int, default=defaults.width, help="window width in px")
    parser.add_argument("--height", type=int, default=defaults.height, help="window height in px")
    parser.add_argument("--fps", type=int, default=defaults.fps)
    parser.add_argument("--best-file", type=str, default=DEFAULT_BEST_FILE,
                        help="JSON file the best score is kept in")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return Config(
        seed=args.seed,
        tick_ms=args.tick_ms,
        cell_size=args.cell_size,
        width=args.width,
        height=args.height,
        fps=args.fps,
        best_file=args.best_file,
    ).validate()


def main(argv=None):
    cfg = parse_args(argv)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((cfg.width, cfg.height))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    session = Session(JsonFileStore(cfg.best_file), cfg)
    swipe = SwipeTracker(cfg.swipe_threshold)
    running = True

    while running:
        # 1) input
        for event in pygame.event.get():
            if not handle_event(session, event, swipe):
                running = False
                break
        if not running:
            break

        # 2) update: at most one tick per frame
        session.frame(pygame.time.get_ticks())

        # 3) render
        state = session.state
        draw_game(screen, font, state, cfg.cell_size)
        if state.dead:
            draw_game_over(screen, font, state)
        elif session.paused:
            draw_paused(screen, font)
        pygame.display.flip()
        clock.tick(cfg.fps)

    pygame.quit()
    print(f"Score: {session.state.score}  Best: {session.state.shown_best}")


if __name__ == "__main__":
    main()
