"""Common models - base classes and cache tables."""

from app.models.common.base import BaseEntity
from app.models.common.cache import (
    CACHE_TABLES,
    CHUNK_CACHE_DDL,
    CHUNK_CACHE_TABLE,
    RESPONSE_CACHE_DDL,
    RESPONSE_CACHE_TABLE,
    CacheRow,
)

__all__ = [
    "BaseEntity",
    "CacheRow",
    "CACHE_TABLES",
    "CHUNK_CACHE_TABLE",
    "RESPONSE_CACHE_TABLE",
    "CHUNK_CACHE_DDL",
    "RESPONSE_CACHE_DDL",
]
