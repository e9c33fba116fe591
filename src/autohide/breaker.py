"""Sliding-window error guard for the watch loop."""

from __future__ import annotations

import logging
import time
from typing import Callable

from autohide import WatchError

logger = logging.getLogger(__name__)

# Number of errors to allow before giving up
ERROR_LIMIT = 20

# Seconds the errors have to cluster within
ERROR_WINDOW = 5.0


class ErrorWindow:
    """Count errors and trip once too many land inside one window.

    The window only moves with wall-clock time: successful events neither
    reset nor advance it. Create one per watch loop.
    """

    def __init__(
        self,
        limit: int = ERROR_LIMIT,
        window: float = ERROR_WINDOW,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the window.

        Args:
            limit: Errors that trip the breaker when reached inside a window.
            window: Window length in seconds.
            clock: Monotonic time source, replaceable in tests.
        """
        self.limit = limit
        self.window = window
        self._clock = clock
        self._count = 0
        self._started = clock()
        self._tripped = False

    @property
    def count(self) -> int:
        return self._count

    @property
    def tripped(self) -> bool:
        return self._tripped

    def record(self) -> None:
        """Count one error against the current window."""
        self._count += 1

    def check(self) -> None:
        """Apply the transition rule once; call after every loop iteration.

        Raises:
            WatchError: If the limit was reached inside the window.
        """
        elapsed = self._clock() - self._started
        if self._count >= self.limit and elapsed <= self.window:
            self._tripped = True
            raise WatchError(
                f"Too many errors in a short period of time "
                f"({self._count} in {elapsed:.1f}s). Exiting."
            )
        if elapsed > self.window:
            if self._count:
                logger.debug("Error window expired, resetting %d errors", self._count)
            self._count = 0
            self._started = self._clock()
