#!/usr/bin/env python3
"""HeartCatch - Standalone entry point.

Plays the mini-game on its own, without the proposal screens.
ENTER starts a new round once one is over, Q or ESC quits.
"""

import argparse
import os
import random
import sys
from typing import List, Optional

import pygame

# Add project root to path
_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _root not in sys.path:
    sys.path.insert(0, _root)

from games.HeartCatch import game_info
from games.HeartCatch.game_mode import HeartCatchMode
from games.HeartCatch.renderer import render_session
from valentine.cli import add_common_arguments, add_game_arguments, apply_log_level
from valentine.input import InputManager
from valentine.input.input_event import KEY_ENTER, KEY_ESCAPE, KEY_QUIT
from valentine.input.sources.keyboard import KeyboardInputSource
from valentine.logging import get_logger, set_clock
from valentine.scheduler import TickScheduler
from valentine.screens import open_display

log = get_logger('heart_catch_main')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=game_info.DESCRIPTION)
    add_common_arguments(parser)
    add_game_arguments(parser, game_info.ARGUMENTS)
    return parser


def run(screen: pygame.Surface, scheduler: TickScheduler, rng: Optional[random.Random],
        fps: int) -> None:
    """Host loop: rounds back to back until the player quits."""
    input_manager = InputManager(KeyboardInputSource())

    def new_game() -> HeartCatchMode:
        game = HeartCatchMode(scheduler, rng=rng)
        game.start()
        return game

    game = new_game()
    clock = pygame.time.Clock()

    running = True
    try:
        while running:
            dt = clock.tick(fps) / 1000.0
            input_manager.update(dt)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            events = input_manager.get_events()
            for event in events:
                if event.key in (KEY_QUIT, KEY_ESCAPE):
                    running = False
                elif event.key == KEY_ENTER and game.reported:
                    game.stop()
                    game = new_game()

            game.handle_input(events)
            scheduler.advance(dt)
            render_session(screen, game.snapshot())
            pygame.display.flip()
    finally:
        game.stop()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    apply_log_level(args.log_level)

    pygame.init()
    scheduler = TickScheduler()
    set_clock(lambda: scheduler.now)
    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        screen = open_display(args.resolution, args.fullscreen, game_info.NAME)
        run(screen, scheduler, rng, args.fps)
    except Exception:
        log.exception("Unhandled error at t=%.2f", scheduler.now)
        raise
    finally:
        set_clock(None)
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
