"""
Shared command-line helpers for the launchers.
"""
import argparse
from typing import Any, Dict, List, Tuple

from valentine import config
from valentine.logging import configure_logging


def parse_resolution(value: str) -> Tuple[int, int]:
    """argparse type for WIDTHxHEIGHT."""
    try:
        width, height = value.lower().split('x')
        size = int(width), int(height)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid resolution {value!r}, expected WIDTHxHEIGHT (e.g. 1920x1080)"
        )
    if size[0] <= 0 or size[1] <= 0:
        raise argparse.ArgumentTypeError(f"Resolution must be positive, got {value!r}")
    return size


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Display and logging options every launcher accepts."""
    parser.add_argument(
        '--resolution', '-r',
        type=parse_resolution,
        default=(config.SCREEN_WIDTH, config.SCREEN_HEIGHT),
        help=f'Window resolution as WIDTHxHEIGHT (default: {config.SCREEN_WIDTH}x{config.SCREEN_HEIGHT})'
    )
    parser.add_argument(
        '--fullscreen', '-f',
        action='store_true',
        default=config.FULLSCREEN,
        help='Run in fullscreen mode'
    )
    parser.add_argument(
        '--fps',
        type=int,
        default=config.FPS,
        help=f'Frame rate cap (default: {config.FPS})'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
        help='Log level for all modules (default: VALENTINE_LOG_LEVEL or INFO)'
    )


def add_game_arguments(parser: argparse.ArgumentParser, arguments: List[Dict[str, Any]]) -> None:
    """Register a game's ARGUMENTS list on ``parser``."""
    for arg_def in arguments:
        kwargs = {}
        if 'type' in arg_def:
            kwargs['type'] = arg_def['type']
        if 'default' in arg_def:
            kwargs['default'] = arg_def['default']
        if 'help' in arg_def:
            kwargs['help'] = arg_def['help']
        if 'action' in arg_def:
            kwargs['action'] = arg_def['action']
            kwargs.pop('type', None)  # action and type are mutually exclusive
        if 'choices' in arg_def:
            kwargs['choices'] = arg_def['choices']
        parser.add_argument(arg_def['name'], **kwargs)


def apply_log_level(level) -> None:
    if level:
        configure_logging(level=level)
