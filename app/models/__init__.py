"""Models package - DDL and entities."""

from app.models.common import (
    CHUNK_CACHE_DDL,
    CHUNK_CACHE_TABLE,
    RESPONSE_CACHE_DDL,
    RESPONSE_CACHE_TABLE,
    BaseEntity,
    CacheRow,
)
from app.models.frequency import (
    ALL_REGIONS,
    ChunkResult,
    ChunkTask,
    DataPoint,
    Estimate,
    FrequencyQuery,
    FrequencyRequest,
    FrequencyResult,
    Granularity,
    Mode,
    ProbeResult,
    Region,
    SeriesData,
)

ALL_DDL = [
    CHUNK_CACHE_DDL,
    RESPONSE_CACHE_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "CacheRow",
    "CHUNK_CACHE_TABLE",
    "RESPONSE_CACHE_TABLE",
    "CHUNK_CACHE_DDL",
    "RESPONSE_CACHE_DDL",
    # Frequency
    "Region",
    "Mode",
    "Granularity",
    "ALL_REGIONS",
    "DataPoint",
    "FrequencyRequest",
    "FrequencyQuery",
    "ChunkTask",
    "ChunkResult",
    "SeriesData",
    "FrequencyResult",
    "Estimate",
    "ProbeResult",
    # All DDL
    "ALL_DDL",
]
