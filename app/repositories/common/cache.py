"""Cache stores - key-value rows with a creation timestamp.

Stores never expire anything. Freshness is decided by the caller
(see ``app.services.frequency.cache``).
"""

import json
from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

import duckdb
from loguru import logger

from app.errors import StorageError
from app.models.common import CACHE_TABLES, CacheRow
from app.repositories.base import BaseRepository


def _check_table(table: str) -> None:
    if table not in CACHE_TABLES:
        raise ValueError(f"Unknown cache table: {table}")


class CacheStore(ABC):
    """Get-many and upsert-by-key. Last write wins."""

    @abstractmethod
    def get_many(self, table: str, keys: Sequence[str]) -> dict[str, CacheRow]:
        """Rows present for ``keys``, stale or not."""

    @abstractmethod
    def upsert(
        self,
        table: str,
        key: str,
        data: dict[str, Any],
        created_at: datetime,
        version: str | None = None,
    ) -> None:
        """Insert or overwrite the row for ``key``."""


class CacheRepository(BaseRepository, CacheStore):
    """DuckDB-backed cache store."""

    def get_many(self, table: str, keys: Sequence[str]) -> dict[str, CacheRow]:
        _check_table(table)
        if not keys:
            return {}
        placeholders = ", ".join("?" for _ in keys)
        try:
            rows = self.fetchall(
                f"SELECT cache_key, data, created_at, version FROM {table} WHERE cache_key IN ({placeholders})",
                list(keys),
            )
        except duckdb.Error as e:
            logger.error("Cache read failed: table={}, error={}", table, e)
            raise StorageError(f"Cache read failed: {e}") from e

        result = {
            key: CacheRow(
                cache_key=key,
                data=json.loads(data),
                created_at=created_at.replace(tzinfo=timezone.utc),
                version=version,
            )
            for key, data, created_at, version in rows
        }
        logger.debug("Cache read: table={}, {}/{} rows", table, len(result), len(keys))
        return result

    def upsert(
        self,
        table: str,
        key: str,
        data: dict[str, Any],
        created_at: datetime,
        version: str | None = None,
    ) -> None:
        _check_table(table)
        # TIMESTAMP columns hold naive UTC
        stamp = created_at.astimezone(timezone.utc).replace(tzinfo=None)
        try:
            self.execute(
                f"""
                INSERT OR REPLACE INTO {table} (cache_key, data, created_at, version)
                VALUES (?, ?, ?, ?)
                """,
                [key, json.dumps(data), stamp, version],
            )
        except duckdb.Error as e:
            logger.error("Cache write failed: table={}, error={}", table, e)
            raise StorageError(f"Cache write failed: {e}") from e
        logger.debug("Cache saved: table={}, key={}", table, key[:12])

    def count(self, table: str) -> int:
        """Rows stored in a table, stale or not."""
        _check_table(table)
        return self.fetchone(f"SELECT COUNT(*) FROM {table}")[0]

    def clear(self, table: str | None = None) -> None:
        """Delete every row of one table, or of all cache tables."""
        for name in [table] if table else CACHE_TABLES:
            _check_table(name)
            self.execute(f"DELETE FROM {name}")
        logger.info("Cache cleared: {}", table or "all tables")


class MemoryCacheStore(CacheStore):
    """In-process store for tests and throwaway runs."""

    def __init__(self):
        self._tables: dict[str, dict[str, CacheRow]] = {name: {} for name in CACHE_TABLES}
        self.writes = 0

    def get_many(self, table: str, keys: Sequence[str]) -> dict[str, CacheRow]:
        _check_table(table)
        rows = self._tables[table]
        return {k: rows[k] for k in keys if k in rows}

    def upsert(
        self,
        table: str,
        key: str,
        data: dict[str, Any],
        created_at: datetime,
        version: str | None = None,
    ) -> None:
        _check_table(table)
        # Round-trip through JSON so callers never share mutable payloads
        self._tables[table][key] = CacheRow(
            cache_key=key,
            data=json.loads(json.dumps(data)),
            created_at=created_at,
            version=version,
        )
        self.writes += 1

    def count(self, table: str) -> int:
        """Rows stored in a table."""
        _check_table(table)
        return len(self._tables[table])
