"""
Base Input Source - Abstract interface for input backends.
"""
from abc import ABC, abstractmethod
from typing import List

from valentine.input.input_event import KeyEvent


class InputSource(ABC):
    """Abstract base class for input sources.

    Input backends (the pygame keyboard, test doubles) implement this interface.
    """

    @abstractmethod
    def poll_events(self) -> List[KeyEvent]:
        """Poll for new input events.

        Returns:
            List of KeyEvent objects since last poll.
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update the input source, collecting events.

        Args:
            dt: Delta time in seconds since last update.
        """
        pass
