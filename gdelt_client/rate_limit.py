"""Process-wide request spacing for the upstream API."""

import asyncio
import threading
import time
from collections.abc import Awaitable, Callable

from loguru import logger

from settings import RATE_LIMIT_SECONDS


class RateLimiter:
    """Enforces a minimum gap between consecutive upstream requests.

    Each caller reserves the next free slot under a thread lock and then
    sleeps until that slot outside the lock, so one limiter can be shared by
    callers on any thread and any event loop.
    """

    def __init__(
        self,
        spacing: float = RATE_LIMIT_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._spacing = spacing
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()
        self._last: float | None = None

    @property
    def spacing(self) -> float:
        return self._spacing

    @property
    def last_request_at(self) -> float | None:
        """Time of the latest reserved slot."""
        return self._last

    def reserve(self) -> float:
        """Claim the next free slot. Returns seconds until it starts."""
        with self._lock:
            now = self._clock()
            slot = now if self._last is None else max(now, self._last + self._spacing)
            self._last = slot
            return slot - now

    async def acquire(self) -> float:
        """Wait for the next free slot and claim it. Returns seconds waited."""
        waited = self.reserve()
        if waited > 0:
            logger.info("RateLimit: waiting {:.1f}s before next request", waited)
            await self._sleep(waited)
        return waited


_default: RateLimiter | None = None
_default_lock = threading.Lock()


def default_limiter() -> RateLimiter:
    """Shared limiter for every client in this process."""
    global _default
    with _default_lock:
        if _default is None:
            _default = RateLimiter()
        return _default
