"""DOC 2.0 API client."""

from gdelt_client.doc.client import DocClient, timeline_params
from gdelt_client.doc.query import build_query, end_datetime, phrase_clause, source_clause, start_datetime
from gdelt_client.doc.schemas import ProbeSchema, TimelinePointSchema, TimelineSchema, TimelineSeriesSchema

__all__ = [
    "DocClient",
    "timeline_params",
    # Query
    "build_query",
    "phrase_clause",
    "source_clause",
    "start_datetime",
    "end_datetime",
    # Schemas
    "TimelineSchema",
    "TimelineSeriesSchema",
    "TimelinePointSchema",
    "ProbeSchema",
]
