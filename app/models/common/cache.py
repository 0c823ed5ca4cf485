"""Cache tables - one per tier, identical layout."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

CHUNK_CACHE_TABLE = "chunk_cache"
RESPONSE_CACHE_TABLE = "response_cache"

CACHE_TABLES = (CHUNK_CACHE_TABLE, RESPONSE_CACHE_TABLE)

_CACHE_DDL_TEMPLATE = """
CREATE TABLE IF NOT EXISTS {table} (
    cache_key VARCHAR PRIMARY KEY,
    data JSON NOT NULL,
    created_at TIMESTAMP NOT NULL,
    version VARCHAR
)
"""

CHUNK_CACHE_DDL = _CACHE_DDL_TEMPLATE.format(table=CHUNK_CACHE_TABLE)
RESPONSE_CACHE_DDL = _CACHE_DDL_TEMPLATE.format(table=RESPONSE_CACHE_TABLE)


@dataclass(frozen=True)
class CacheRow:
    """A stored cache entry. ``created_at`` is timezone-aware UTC."""

    cache_key: str
    data: dict[str, Any]
    created_at: datetime
    version: str | None = None
