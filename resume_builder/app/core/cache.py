import logging
import time
from collections.abc import Callable

log = logging.getLogger(__name__)


class ResumeCountCache:
    """Process-local cache for the public resume count.

    One instance is created per application in `create_app` and kept on
    `app.state`, so tests can reset it between requests.

    Attributes:
        ttl_seconds (float): How long a stored count is considered fresh.
        count (int | None): The last stored count, kept after it expires so it
            can still be served when the store is unavailable.
        timestamp (float | None): Clock reading at which `count` was stored.

    """

    def __init__(
        self,
        ttl_seconds: float = 300,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self.count: int | None = None
        self.timestamp: float | None = None

    def get_fresh(self) -> int | None:
        """Return the cached count if it is younger than the TTL, otherwise None."""
        if self.count is None or self.timestamp is None:
            return None
        if self._clock() - self.timestamp >= self.ttl_seconds:
            return None
        return self.count

    def last_known(self) -> int:
        """Return the last stored count regardless of age, or 0 if none was stored."""
        return self.count or 0

    def store(self, count: int) -> None:
        _msg = f"Caching resume count {count}"
        log.debug(_msg)
        self.count = count
        self.timestamp = self._clock()

    def reset(self) -> None:
        self.count = None
        self.timestamp = None
