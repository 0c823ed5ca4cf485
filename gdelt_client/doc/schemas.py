"""DOC API timeline schemas."""

import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator


class TimelinePointSchema(BaseModel):
    """One day of a ``timelinevolraw`` series, e.g. ``{"date": "20230101T000000Z", "value": 4}``."""

    date: datetime.date
    value: int = 0

    @field_validator("date", mode="before")
    @classmethod
    def parse_gdelt_date(cls, v: Any) -> Any:
        if isinstance(v, str) and len(v) >= 8 and v[:8].isdigit():
            return datetime.datetime.strptime(v[:8], "%Y%m%d").date()
        return v

    @field_validator("value", mode="before")
    @classmethod
    def missing_value_is_zero(cls, v: Any) -> Any:
        return 0 if v is None else v


class TimelineSeriesSchema(BaseModel):
    """A named series inside the ``timeline`` array."""

    series: str | None = None
    data: list[TimelinePointSchema] = Field(default_factory=list)


class TimelineSchema(BaseModel):
    """Top-level ``timelinevolraw`` response."""

    timeline: list[TimelineSeriesSchema] = Field(default_factory=list)

    def daily_counts(self) -> list[tuple[str, int]]:
        """(YYYY-MM-DD, count) pairs of the first series, in published order."""
        if not self.timeline:
            return []
        return [(p.date.isoformat(), p.value) for p in self.timeline[0].data]


class ProbeSchema(BaseModel):
    """Raw outcome of a single diagnostic request."""

    url: str
    query: str
    raw_text: str = ""
    parsed_json: Any | None = None
    error: str | None = None
