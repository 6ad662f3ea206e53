"""Server clock offset cache."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

DEFAULT_MAX_TIMECACHE_AGE_MS = 20 * 60 * 1000


def wall_clock_ms() -> int:
    return int(time.time() * 1000)


@dataclass(slots=True, frozen=True)
class TimeCacheEntry:
    server_ms: int
    local_ms: int


class ServerTimeCache:
    """Cached ``(server_ms, local_ms)`` pair with a maximum age.

    The cache is cold until the first ``store`` and goes cold again once the
    entry is ``max_age_ms`` old. Transports refresh it with an unsigned time
    probe; concurrent refreshes simply overwrite each other.
    """

    def __init__(
        self,
        max_age_ms: int = DEFAULT_MAX_TIMECACHE_AGE_MS,
        *,
        clock_ms: Callable[[], int] | None = None,
    ) -> None:
        if max_age_ms < 0:
            raise ValueError("max_age_ms must be >= 0")
        self._max_age_ms = max_age_ms
        self._clock_ms = clock_ms or wall_clock_ms
        self._entry: TimeCacheEntry | None = None

    @property
    def max_age_ms(self) -> int:
        return self._max_age_ms

    @property
    def entry(self) -> TimeCacheEntry | None:
        return self._entry

    def is_warm(self) -> bool:
        if self._entry is None:
            return False
        return (self._clock_ms() - self._entry.local_ms) < self._max_age_ms

    def store(self, server_ms: int) -> TimeCacheEntry:
        self._entry = TimeCacheEntry(server_ms=server_ms, local_ms=self._clock_ms())
        return self._entry

    def adjusted(self) -> str:
        """Current server time estimate in milliseconds, as a decimal string."""

        if self._entry is None:
            raise LookupError("server time cache is empty")
        elapsed = self._clock_ms() - self._entry.local_ms
        return str(self._entry.server_ms + elapsed)

    def invalidate(self) -> None:
        self._entry = None


__all__ = [
    "DEFAULT_MAX_TIMECACHE_AGE_MS",
    "TimeCacheEntry",
    "ServerTimeCache",
    "wall_clock_ms",
]
