"""
Keyboard input source.

Converts pygame KEYDOWN events into KeyEvent models.
"""
import time
from typing import List

import pygame

from valentine.input.input_event import KeyEvent
from valentine.input.sources.base import InputSource


class KeyboardInputSource(InputSource):
    """Keyboard input source backed by the pygame event queue.

    Non-keyboard events (QUIT, window events) are re-posted to the pygame
    event queue for the main loop to handle.
    """

    def __init__(self):
        """Initialize the keyboard input source."""
        self._event_queue: List[KeyEvent] = []

    def poll_events(self) -> List[KeyEvent]:
        """Get new key events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Process pygame events and collect key presses."""
        for event in pygame.event.get():
            if event.type == pygame.KEYDOWN:
                name = pygame.key.name(event.key)
                if not name:
                    continue
                self._event_queue.append(
                    KeyEvent(key=name, timestamp=time.monotonic())
                )
            elif event.type not in (pygame.KEYUP, pygame.MOUSEMOTION, pygame.TEXTINPUT):
                # Re-post the rest for the main loop to handle
                pygame.event.post(event)

