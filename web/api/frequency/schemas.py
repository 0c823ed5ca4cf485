"""Frequency API request/response schemas (camelCase on the wire)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: snake_case fields, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrequencyRequestSchema(CamelModel):
    """Incoming request. Semantic checks happen in the service."""

    phrases: list[str] = Field(default_factory=list)
    regions: list[str] = Field(default_factory=list)
    mode: str = "domains"
    start_date: str = ""
    end_date: str = ""
    granularity: str = "monthly"
    custom_domains: dict[str, list[str]] | None = None
    test_mode: bool = False
    estimate_only: bool = False


class DataPointItem(CamelModel):
    date: str
    value: int


class SeriesItem(CamelModel):
    """Series for a phrase in a region, or ``ALL``."""

    phrase: str
    region: str
    total: int
    points: list[DataPointItem]


class MetaItem(CamelModel):
    """Resolved request parameters echoed in the response."""

    start_datetime: str
    end_datetime: str
    granularity: str
    regions: list[str]
    mode: str


class FrequencyResponse(CamelModel):
    """Aggregated frequency response."""

    meta: MetaItem
    series: list[SeriesItem]


class EstimateResponse(CamelModel):
    """Cost estimate response."""

    total_requests: int
    cached_requests: int
    new_requests: int
    estimated_time_seconds: int
    exceeds_limit: bool
    max_requests: int


class ProbeResponse(CamelModel):
    """Single-query diagnostic response."""

    url: str
    query: str
    phrase: str
    region: str
    raw_text: str
    parsed_json: Any | None = None
    error: str | None = None
