"""Tests for the launcher command line."""
import argparse
from unittest.mock import patch

import pygame
import pytest

import valentine_game
from games.HeartCatch import game_info
from games.HeartCatch import main as heart_catch_main
from valentine import logging as vlog
from valentine.cli import add_common_arguments, add_game_arguments, parse_resolution
from valentine.logging import configure_logging
from valentine.screens import open_display
from valentine_game import build_parser


class TestResolution:
    """WIDTHxHEIGHT parsing."""

    @pytest.mark.parametrize("value,size", [('1280x720', (1280, 720)), ('800X600', (800, 600))])
    def test_valid(self, value, size):
        assert parse_resolution(value) == size

    @pytest.mark.parametrize("value", ['1280', 'axb', '0x600', '1280x720x2'])
    def test_invalid(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_resolution(value)


class TestParser:
    """Launcher argument wiring."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.seed is None
        assert args.log_level is None
        assert args.fps > 0

    def test_game_arguments(self):
        args = build_parser().parse_args(['--seed', '14', '-r', '640x480', '--log-level', 'DEBUG'])
        assert args.seed == 14
        assert args.resolution == (640, 480)
        assert args.log_level == 'DEBUG'

    def test_add_game_arguments_from_game_info(self):
        parser = argparse.ArgumentParser()
        add_common_arguments(parser)
        add_game_arguments(parser, game_info.ARGUMENTS)
        assert parser.parse_args(['--seed', '3']).seed == 3


class TestLaunchers:
    """Display flags and crash handling in both entry points."""

    def test_open_display_fullscreen(self):
        with patch('pygame.display.set_mode') as set_mode, \
                patch('pygame.display.set_caption') as set_caption:
            open_display((640, 480), True, 'Heart Catch')

        set_mode.assert_called_once_with((0, 0), pygame.FULLSCREEN)
        set_caption.assert_called_once_with('Heart Catch')

    def test_open_display_windowed(self):
        with patch('pygame.display.set_mode') as set_mode, \
                patch('pygame.display.set_caption'):
            open_display((640, 480), False, 'Valentine')

        set_mode.assert_called_once_with((640, 480))

    @pytest.mark.parametrize("module", [heart_catch_main, valentine_game])
    def test_fullscreen_flag_reaches_display(self, module):
        with patch('pygame.init'), patch('pygame.quit'), \
                patch.object(module, 'open_display') as display, \
                patch.object(module, 'run'):
            display.return_value.get_size.return_value = (800, 600)
            assert module.main(['--fullscreen', '-r', '800x600']) == 0

        assert display.call_args.args[:2] == ((800, 600), True)

    @pytest.mark.parametrize("module", [heart_catch_main, valentine_game])
    def test_crash_is_logged_and_reraised(self, module, capsys):
        configure_logging(level='ERROR')
        with patch('pygame.init'), patch('pygame.quit') as quit_, \
                patch.object(module, 'open_display'), \
                patch.object(module, 'run', side_effect=RuntimeError('boom')):
            with pytest.raises(RuntimeError, match='boom'):
                module.main([])

        out = capsys.readouterr().out
        assert "ERROR t=0.00: Unhandled error" in out
        assert "RuntimeError: boom" in out
        quit_.assert_called_once_with()
        assert vlog._config['clock'] is None
