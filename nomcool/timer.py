"""A countdown for answering one question, driven by an injectable clock."""

from __future__ import annotations

import time
from typing import Callable, Optional

TIMER_STEPS = 100
TIMER_INTERVAL_MS = 100
DEFAULT_DURATION = TIMER_STEPS * TIMER_INTERVAL_MS / 1000.0


class QuestionTimer:
    """Counts down ``duration`` seconds; it can be paused and resumed.

    Before the first ``start`` and after ``stop`` the remaining time is
    frozen. ``clock`` returns the current time in seconds.
    """

    def __init__(
        self,
        duration: float = DEFAULT_DURATION,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        if duration <= 0:
            raise ValueError(f"duration must be positive, got {duration}")
        self.duration = float(duration)
        self._clock = clock if clock is not None else time.monotonic
        self._left = self.duration
        self._mark = 0.0
        self._running = False
        self._paused = False

    def _current_left(self) -> float:
        if not self._running:
            return self._left
        return max(0.0, self._left - (self._clock() - self._mark))

    def start(self) -> None:
        """Restart the countdown from the full duration."""
        self._paused = False
        self._left = self.duration
        self._mark = self._clock()
        self._running = True

    def stop(self) -> None:
        """Stop counting; a stopped timer cannot be resumed."""
        self._paused = False
        if self._running:
            self._left = self._current_left()
            self._running = False

    def pause(self) -> None:
        """Freeze a running countdown that has not yet run out."""
        if self._running and self._current_left() > 0:
            self._left = self._current_left()
            self._running = False
            self._paused = True

    def resume(self) -> None:
        """Continue a paused countdown."""
        if self._paused:
            self._paused = False
            self._mark = self._clock()
            self._running = True

    def is_paused(self) -> bool:
        return self._paused

    def remaining(self) -> float:
        """Seconds left, never below zero."""
        return self._current_left()

    def expired(self) -> bool:
        """Whether the countdown has reached zero."""
        return self._current_left() <= 0