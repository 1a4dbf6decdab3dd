"""
Tick Scheduler - the one clock every timed behaviour runs on.

Countdowns, spawners, the simulation step, expiry polls and screen
interstitials are all timers registered here. Each timer carries an owner
tag such as ``session-3/playing``; cancelling ``session-3`` tears down
every timer beneath it in one call.

The scheduler keeps its own notion of "now" (seconds since creation) and
only moves forward when the host calls ``advance(dt)``. Due timers fire in
deadline order, one at a time, so callbacks never overlap and a callback
that cancels a tag stops any sibling that was due in the same advance.

Usage:
    scheduler = TickScheduler()
    scheduler.every(0.05, session.step, tag='session-1/playing')
    scheduler.after(3.5, app.return_to_proposal, tag='screen/no')

    # host loop
    scheduler.advance(clock.tick(60) / 1000.0)
"""
import itertools
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from valentine.logging import get_logger

log = get_logger('scheduler')

TimerCallback = Callable[[], None]

# Guard against float drift when summing many small intervals
_EPSILON = 1e-9


@dataclass
class Timer:
    """A scheduled callback.

    Attributes:
        name: Human-readable label for logging
        tag: Owner tag (slash-separated hierarchy)
        callback: Zero-argument function to call
        due: Scheduler time at which the timer next fires
        interval: Repeat period in seconds, None for one-shot timers
    """
    name: str
    tag: str
    callback: TimerCallback
    due: float
    interval: Optional[float] = None
    cancelled: bool = False
    seq: int = field(default=0, compare=False)

    @property
    def repeating(self) -> bool:
        return self.interval is not None

    def cancel(self) -> None:
        self.cancelled = True


def tag_matches(tag: str, owner: str) -> bool:
    """Check if ``tag`` is ``owner`` or nested beneath it."""
    return tag == owner or tag.startswith(owner + '/')


class TickScheduler:
    """Fixed-tick scheduler with tag-scoped cancellation."""

    def __init__(self, start_time: float = 0.0):
        self._now = start_time
        self._timers: List[Timer] = []
        self._seq = itertools.count()
        self._advancing = False

    @property
    def now(self) -> float:
        """Current scheduler time in seconds."""
        return self._now

    def every(
        self,
        interval: float,
        callback: TimerCallback,
        tag: str,
        name: Optional[str] = None,
        delay: Optional[float] = None,
    ) -> Timer:
        """Register a repeating timer.

        Args:
            interval: Seconds between firings (must be positive)
            callback: Function to call on each firing
            tag: Owner tag used for cancellation
            name: Optional label for logging
            delay: Seconds until the first firing (defaults to ``interval``)

        Returns:
            The registered Timer
        """
        if interval <= 0:
            raise ValueError(f'Timer interval must be positive, got {interval}')
        first = interval if delay is None else delay
        if first < 0:
            raise ValueError(f'Timer delay must be non-negative, got {first}')
        return self._add(Timer(
            name=name or getattr(callback, '__name__', 'timer'),
            tag=tag,
            callback=callback,
            due=self._now + first,
            interval=interval,
        ))

    def after(
        self,
        delay: float,
        callback: TimerCallback,
        tag: str,
        name: Optional[str] = None,
    ) -> Timer:
        """Register a one-shot timer firing ``delay`` seconds from now."""
        if delay < 0:
            raise ValueError(f'Timer delay must be non-negative, got {delay}')
        return self._add(Timer(
            name=name or getattr(callback, '__name__', 'timer'),
            tag=tag,
            callback=callback,
            due=self._now + delay,
        ))

    def _add(self, timer: Timer) -> Timer:
        timer.seq = next(self._seq)
        self._timers.append(timer)
        log.trace("scheduled %s [%s] due=%.3f", timer.name, timer.tag, timer.due)
        return timer

    def cancel(self, timer: Timer) -> None:
        """Cancel a single timer."""
        timer.cancel()
        self._prune()

    def cancel_tag(self, tag: str) -> int:
        """Cancel every timer owned by ``tag`` or any of its sub-tags.

        Returns:
            Number of timers cancelled
        """
        count = 0
        for timer in self._timers:
            if not timer.cancelled and tag_matches(timer.tag, tag):
                timer.cancel()
                count += 1
        self._prune()
        if count:
            log.debug("cancelled %d timer(s) under %s", count, tag)
        return count

    def cancel_all(self) -> int:
        """Cancel every registered timer."""
        count = sum(1 for t in self._timers if not t.cancelled)
        for timer in self._timers:
            timer.cancel()
        self._prune()
        return count

    def timers(self, tag: Optional[str] = None) -> List[Timer]:
        """Live timers, optionally restricted to a tag subtree."""
        return [
            t for t in self._timers
            if not t.cancelled and (tag is None or tag_matches(t.tag, tag))
        ]

    def has_timers(self, tag: str) -> bool:
        return bool(self.timers(tag))

    def _prune(self) -> None:
        if not self._advancing:
            self._timers = [t for t in self._timers if not t.cancelled]

    def _next_due(self, until: float) -> Optional[Timer]:
        candidates = [
            t for t in self._timers
            if not t.cancelled and t.due <= until + _EPSILON
        ]
        if not candidates:
            return None
        return min(candidates, key=lambda t: (t.due, t.seq))

    def advance(self, dt: float) -> int:
        """Move time forward by ``dt`` seconds, firing every due timer.

        Args:
            dt: Seconds to advance (must be non-negative)

        Returns:
            Number of timer callbacks fired
        """
        if dt < 0:
            raise ValueError(f'Cannot advance scheduler by negative dt {dt}')
        if self._advancing:
            raise RuntimeError('TickScheduler.advance() is not re-entrant')

        until = self._now + dt
        fired = 0
        self._advancing = True
        try:
            while True:
                timer = self._next_due(until)
                if timer is None:
                    break
                self._now = max(self._now, timer.due)
                if timer.repeating:
                    timer.due += timer.interval
                else:
                    timer.cancelled = True
                fired += 1
                timer.callback()
        finally:
            self._advancing = False
            self._now = max(self._now, until)
            self._prune()
        return fired
