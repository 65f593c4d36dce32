"""
Global fetch-start throttle shared by every crawl task of a run.
"""
from __future__ import annotations

import asyncio
import time

__all__ = ("RateLimiter",)


class RateLimiter:
    """Spaces fetch starts at least ``1 / requests_per_second`` seconds apart.

    The limiter gates only the *start* of a request: once ``wait_turn`` returns
    the caller is free to take as long as it needs. One instance must be shared
    by all tasks, otherwise the aggregate rate bound does not hold.
    """

    def __init__(self, requests_per_second: float) -> None:
        if requests_per_second <= 0:
            raise ValueError("requests_per_second must be > 0")
        self.requests_per_second = float(requests_per_second)
        self.interval = 1.0 / self.requests_per_second
        self._lock = asyncio.Lock()
        self._last_tick: float | None = None

    async def wait_turn(self) -> None:
        """Block until the next permitted slot."""
        async with self._lock:
            if self._last_tick is not None:
                wait = self.interval - (time.monotonic() - self._last_tick)
                if wait > 0:
                    await asyncio.sleep(wait)
            self._last_tick = time.monotonic()
