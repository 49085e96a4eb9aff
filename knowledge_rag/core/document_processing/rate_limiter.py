"""
Cooperative throttle for embedding provider calls.

The pipeline awaits the limiter before every embedding request so that
consecutive calls are at least `min_interval_seconds` apart.

Dependencies: asyncio
System role: Provider rate-limit compliance during ingestion
"""

import asyncio
import time
from typing import Awaitable, Callable


class RateLimiter:
    """Minimum-interval limiter shared by all callers of one provider."""

    def __init__(
        self,
        min_interval_seconds: float = 0.35,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """
        Initialize limiter.

        Args:
            min_interval_seconds: Minimum gap between two acquisitions
            clock: Monotonic clock in seconds
            sleep: Async sleep used while waiting
        """
        if min_interval_seconds < 0:
            raise ValueError("min_interval_seconds cannot be negative")
        self._interval = min_interval_seconds
        self._clock = clock
        self._sleep = sleep
        self._last: float | None = None
        self._lock = asyncio.Lock()

    @property
    def min_interval_seconds(self) -> float:
        return self._interval

    async def acquire(self) -> None:
        """Wait until the minimum interval since the previous call has passed."""
        async with self._lock:
            if self._last is not None:
                remaining = self._interval - (self._clock() - self._last)
                if remaining > 0:
                    await self._sleep(remaining)
            self._last = self._clock()
