"""Frequency domain entities - plans, chunk results and series."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from app.models.common import BaseEntity
from app.models.frequency.enums import Granularity, Mode, Region
from gdelt_client.doc.query import end_datetime, start_datetime


@dataclass
class DataPoint(BaseEntity):
    """Count for one day or bucket (``date`` is YYYY-MM-DD)."""

    date: str
    value: int


def _points(items: list[dict]) -> list[DataPoint]:
    return [DataPoint(date=p["date"], value=int(p["value"])) for p in items]


@dataclass
class FrequencyRequest(BaseEntity):
    """Caller request as received, before validation."""

    phrases: list[str]
    regions: list[str]
    mode: str = Mode.DOMAINS.value
    start_date: str = ""
    end_date: str = ""
    granularity: str = Granularity.MONTHLY.value
    custom_domains: dict[str, list[str]] | None = None
    test_mode: bool = False
    estimate_only: bool = False


@dataclass
class FrequencyQuery:
    """Validated, normalized request."""

    phrases: list[str]
    regions: list[Region]
    mode: Mode
    start_date: date
    end_date: date
    granularity: Granularity
    allow_lists: dict[Region, list[str]]
    test_mode: bool = False
    estimate_only: bool = False

    @property
    def start_datetime(self) -> str:
        return start_datetime(self.start_date)

    @property
    def end_datetime(self) -> str:
        return end_datetime(self.end_date)


@dataclass
class ChunkTask(BaseEntity):
    """One upstream request: a phrase against a slice of a region's allow-list."""

    phrase: str
    region: Region
    chunk_index: int
    chunk_items: tuple[str, ...]
    cache_key: str


@dataclass
class ChunkResult(BaseEntity):
    """Daily counts of one chunk, as stored in the chunk cache."""

    phrase: str
    region: str
    chunk_index: int
    total: int
    points: list[DataPoint] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChunkResult":
        """Rebuild from a chunk cache payload."""
        return cls(
            phrase=data["phrase"],
            region=data["region"],
            chunk_index=data["chunk_index"],
            total=data["total"],
            points=_points(data.get("points", [])),
        )


@dataclass
class SeriesData(BaseEntity):
    """Bucketed series for a phrase in a region (or ``ALL``)."""

    phrase: str
    region: str
    total: int
    points: list[DataPoint] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SeriesData":
        return cls(
            phrase=data["phrase"],
            region=data["region"],
            total=data["total"],
            points=_points(data.get("points", [])),
        )


@dataclass
class FrequencyMeta(BaseEntity):
    """Echo of the resolved request: datetimes as YYYYMMDDHHMMSS."""

    start_datetime: str
    end_datetime: str
    granularity: str
    regions: list[str]
    mode: str


@dataclass
class FrequencyResult(BaseEntity):
    """Full response, as stored in the response cache."""

    meta: FrequencyMeta
    series: list[SeriesData]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FrequencyResult":
        """Rebuild from a response cache payload."""
        return cls(
            meta=FrequencyMeta(**data["meta"]),
            series=[SeriesData.from_dict(s) for s in data["series"]],
        )


@dataclass
class Estimate(BaseEntity):
    """Upstream cost of a request, computed without fetching."""

    total_requests: int
    cached_requests: int
    new_requests: int
    estimated_time_seconds: int
    exceeds_limit: bool
    max_requests: int


@dataclass
class ProbeResult(BaseEntity):
    """Raw outcome of a single diagnostic upstream request."""

    url: str
    query: str
    phrase: str
    region: str
    raw_text: str
    parsed_json: Any | None
    error: str | None
