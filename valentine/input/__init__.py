"""
Input abstraction layer for the Valentine app.

Screens and games only ever see KeyEvent models, never pygame events.
"""

from valentine.input.input_event import KeyEvent
from valentine.input.input_manager import InputManager

__all__ = ['KeyEvent', 'InputManager']
