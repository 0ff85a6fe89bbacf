import threading
import time
from collections.abc import Callable


class RateLimiter:
    """Enforces a minimum interval between consecutive calls.

    Shared by every caller of a rate-sensitive collaborator. Calls are
    serialized on an internal lock so the interval holds across threads.
    """

    def __init__(
        self,
        min_interval_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._min_interval = max(0.0, min_interval_seconds)
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()
        self._last_call: float | None = None

    @property
    def min_interval_seconds(self) -> float:
        return self._min_interval

    def wait(self) -> None:
        """Block until the next call is allowed, then record it."""
        with self._lock:
            if self._last_call is not None and self._min_interval > 0:
                elapsed = self._clock() - self._last_call
                remaining = self._min_interval - elapsed
                if remaining > 0:
                    self._sleep(remaining)
            self._last_call = self._clock()
