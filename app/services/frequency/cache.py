"""Cache tiers - TTL applied lazily on read over a shared store."""

from collections.abc import Callable, Iterable
from datetime import datetime, timedelta, timezone
from typing import Any

from loguru import logger

from app.models.common import CHUNK_CACHE_TABLE, RESPONSE_CACHE_TABLE
from app.repositories.common import CacheStore
from settings import CACHE_VERSION, CHUNK_CACHE_TTL, RESPONSE_CACHE_TTL


def utc_now() -> datetime:
    """Timezone-aware current time."""
    return datetime.now(timezone.utc)


def is_stale(created_at: datetime, now: datetime, ttl: timedelta) -> bool:
    """An entry is stale once its age exceeds ``ttl``."""
    return now - created_at > ttl


class CacheTier:
    """One cache tier: a store table plus a TTL.

    Stale rows are treated as absent and left in place; the next write under
    the same key overwrites them.
    """

    def __init__(
        self,
        store: CacheStore,
        table: str,
        ttl: timedelta,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._store = store
        self._table = table
        self._ttl = ttl
        self._clock = clock

    @property
    def table(self) -> str:
        return self._table

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def get_many(self, keys: Iterable[str]) -> dict[str, dict[str, Any]]:
        """Payloads of non-stale entries, by key."""
        unique = list(dict.fromkeys(keys))
        if not unique:
            return {}
        rows = self._store.get_many(self._table, unique)
        now = self._clock()
        fresh = {k: row.data for k, row in rows.items() if not is_stale(row.created_at, now, self._ttl)}
        if len(fresh) < len(rows):
            logger.debug("Cache {}: ignored {} stale entries", self._table, len(rows) - len(fresh))
        return fresh

    def get(self, key: str) -> dict[str, Any] | None:
        """Payload of a fresh entry, or None."""
        return self.get_many([key]).get(key)

    def put(self, key: str, data: dict[str, Any]) -> None:
        """Upsert stamped with the current time and ``CACHE_VERSION``."""
        self._store.upsert(self._table, key, data, self._clock(), CACHE_VERSION)


def chunk_tier(store: CacheStore, clock: Callable[[], datetime] = utc_now) -> CacheTier:
    """Per-chunk daily counts, 7-day TTL."""
    return CacheTier(store, CHUNK_CACHE_TABLE, CHUNK_CACHE_TTL, clock)


def response_tier(store: CacheStore, clock: Callable[[], datetime] = utc_now) -> CacheTier:
    """Full aggregated responses, 24-hour TTL."""
    return CacheTier(store, RESPONSE_CACHE_TABLE, RESPONSE_CACHE_TTL, clock)
