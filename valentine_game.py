#!/usr/bin/env python3
"""
Valentine - Main Launcher

Opens the window and runs the whole experience: the proposal, the
"no" interstitial, the HeartCatch mini-game and the celebration.

Usage:
    python valentine_game.py
    python valentine_game.py --resolution 1920x1080 --seed 14
    VALENTINE_LOG_LEVEL=DEBUG python valentine_game.py

Controls:
    UP/DOWN + ENTER   answer the proposal
    LEFT/RIGHT        move the basket
    ENTER             try again after a lost round
    Q                 quit
"""

import argparse
import os
import random
import sys
from typing import List, Optional

import pygame

# Ensure project root is on path
_project_root = os.path.dirname(os.path.abspath(__file__))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from games.HeartCatch import game_info
from valentine import config
from valentine.app import ValentineApp
from valentine.cli import add_common_arguments, add_game_arguments, apply_log_level
from valentine.input import InputManager
from valentine.input.sources.keyboard import KeyboardInputSource
from valentine.logging import get_logger, set_clock
from valentine.scheduler import TickScheduler
from valentine.screens import open_display, render_app

log = get_logger('launcher')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Will you be my Valentine? An animated proposal with a heart-catching finale.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    add_common_arguments(parser)
    add_game_arguments(parser, game_info.ARGUMENTS)
    return parser


def run(app: ValentineApp, screen: pygame.Surface, fps: int) -> None:
    """Host loop: input, then timers, then drawing, once per frame."""
    input_manager = InputManager(KeyboardInputSource())
    clock = pygame.time.Clock()

    while app.running:
        dt = clock.tick(fps) / 1000.0

        input_manager.update(dt)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                app.request_quit()

        app.handle_input(input_manager.get_events())
        app.update(dt)

        if app.running:
            render_app(screen, app.snapshot())
            pygame.display.flip()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    apply_log_level(args.log_level)

    pygame.init()
    rng = random.Random(args.seed) if args.seed is not None else None
    app = ValentineApp(TickScheduler(), rng=rng)
    set_clock(lambda: app.scheduler.now)

    try:
        screen = open_display(args.resolution, args.fullscreen, config.WINDOW_TITLE)
        log.info("starting at %dx%d, %d fps", *screen.get_size(), args.fps)
        run(app, screen, args.fps)
    except Exception:
        log.exception("Unhandled error on screen %s", app.screen.value)
        raise
    finally:
        set_clock(None)
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
