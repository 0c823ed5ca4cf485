"""Common repositories."""

from app.repositories.common.cache import CacheRepository, CacheStore, MemoryCacheStore

__all__ = [
    "CacheStore",
    "CacheRepository",
    "MemoryCacheStore",
]
