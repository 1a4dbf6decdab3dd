"""
Input Manager - Collects input from the active source.
"""
from typing import List, Optional

from valentine.input.input_event import KeyEvent
from valentine.input.sources.base import InputSource


class InputManager:
    """Drives the input source once per frame and hands out its events.

    Screen and game logic only see the KeyEvents returned here, never the
    backend that produced them.
    """

    def __init__(self, source: Optional[InputSource] = None):
        """Initialize with an optional input source."""
        self._source = source

    def update(self, dt: float) -> None:
        """Update the active input source.

        Args:
            dt: Delta time in seconds since last update.
        """
        if self._source is not None:
            self._source.update(dt)

    def get_events(self) -> List[KeyEvent]:
        """Get collected events since last update."""
        if self._source is None:
            return []
        return self._source.poll_events()
