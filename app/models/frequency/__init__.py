"""Frequency domain models."""

from app.models.frequency.entities import (
    ChunkResult,
    ChunkTask,
    DataPoint,
    Estimate,
    FrequencyMeta,
    FrequencyQuery,
    FrequencyRequest,
    FrequencyResult,
    ProbeResult,
    SeriesData,
)
from app.models.frequency.enums import ALL_REGIONS, Granularity, Mode, Region

__all__ = [
    # Enums
    "Region",
    "Mode",
    "Granularity",
    "ALL_REGIONS",
    # Entities
    "DataPoint",
    "FrequencyRequest",
    "FrequencyQuery",
    "ChunkTask",
    "ChunkResult",
    "SeriesData",
    "FrequencyMeta",
    "FrequencyResult",
    "Estimate",
    "ProbeResult",
]
