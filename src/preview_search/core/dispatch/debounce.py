"""Policies deciding when a query recompute runs.

The search engine itself always recomputes synchronously. Large documents
make that cost visible on every keystroke, so the overlay hands recomputes
to one of these policies at the event boundary.
"""

import time
from collections.abc import Callable

from loguru import logger

from preview_search.config import DEBOUNCE_DELAY


class ImmediatePolicy:
    """Run every submitted task right away."""

    def submit(self, task: Callable[[], None]) -> None:
        task()

    def flush(self) -> None:
        pass

    def cancel(self) -> None:
        pass


class DebouncePolicy:
    """Run only the latest task, once ``delay`` seconds passed without a new one.

    The host event loop calls ``poll()`` periodically (e.g. from an idle or
    timer callback). ``flush()`` runs the pending task immediately.
    """

    def __init__(
        self,
        delay: float = DEBOUNCE_DELAY,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if delay < 0:
            msg = f"Debounce delay must be non-negative, got {delay}"
            raise ValueError(msg)
        self.delay = delay
        self._clock = clock
        self._pending: Callable[[], None] | None = None
        self._submitted_at = 0.0

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def submit(self, task: Callable[[], None]) -> None:
        if self._pending is not None:
            logger.debug("Superseding pending recompute")
        self._pending = task
        self._submitted_at = self._clock()

    def poll(self) -> bool:
        """Run the pending task if its delay has elapsed. Returns True if it ran."""
        if self._pending is None:
            return False
        if self._clock() - self._submitted_at < self.delay:
            return False
        self.flush()
        return True

    def flush(self) -> None:
        task, self._pending = self._pending, None
        if task is not None:
            task()

    def cancel(self) -> None:
        self._pending = None
