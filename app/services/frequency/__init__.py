"""Frequency aggregation services."""

from app.services.frequency.cache import CacheTier, chunk_tier, is_stale, response_tier
from app.services.frequency.fetcher import ChunkResolver, Resolution
from app.services.frequency.service import FrequencyService

__all__ = [
    "CacheTier",
    "chunk_tier",
    "response_tier",
    "is_stale",
    "ChunkResolver",
    "Resolution",
    "FrequencyService",
]
