"""Search-box timing: debounce typing and drop superseded responses."""
import threading
from typing import Any, Callable, Optional

from jobtracker.core.logging import setup_logging

logger = setup_logging('search_input')

DEFAULT_DEBOUNCE_SECONDS = 0.3


class LatestRequestRegister:
    """Single slot holding the most recently issued request.

    Each :meth:`issue` returns a new ticket and invalidates every earlier
    one, so a response may only be applied while its ticket is current.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._current = 0

    def issue(self) -> int:
        with self._lock:
            self._current += 1
            return self._current

    def is_current(self, ticket: int) -> bool:
        with self._lock:
            return ticket == self._current

    def invalidate(self) -> None:
        """Make every outstanding ticket stale."""
        self.issue()


class SearchDebouncer:
    """Collapse rapid input changes into one callback.

    Every :meth:`submit` restarts the quiet period; ``callback`` runs once,
    with the last submitted value, when ``delay`` seconds pass without
    another submit.

    Args:
        callback: Called with the settled value, on the timer thread
        delay: Quiet period in seconds
        timer_factory: ``threading.Timer``-compatible constructor
    """

    def __init__(
        self,
        callback: Callable[[Any], None],
        delay: float = DEFAULT_DEBOUNCE_SECONDS,
        timer_factory: Callable[..., Any] = threading.Timer,
    ):
        self.callback = callback
        self.delay = delay
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer: Optional[Any] = None
        self._pending_value: Any = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def submit(self, value: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._pending_value = value
            self._generation += 1
            self._timer = self._timer_factory(self.delay, self._fire, args=(self._generation,))
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        """Drop the pending value without running the callback."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending_value = None

    def flush(self) -> None:
        """Run the callback now if a value is pending."""
        with self._lock:
            if self._timer is None:
                return
            self._timer.cancel()
            generation = self._generation
        self._fire(generation)

    def _fire(self, generation: int) -> None:
        with self._lock:
            # A timer cancelled after it started must not fire a newer value
            if self._timer is None or generation != self._generation:
                return
            value = self._pending_value
            self._timer = None
            self._pending_value = None
        logger.debug(f"Search input settled: {value!r}")
        self.callback(value)
