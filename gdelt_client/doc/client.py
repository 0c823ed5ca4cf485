"""DOC API client - raw volume timelines."""

import json

import httpx
from loguru import logger
from pydantic import ValidationError

from gdelt_client.base import BaseClient
from gdelt_client.doc.schemas import ProbeSchema, TimelineSchema
from gdelt_client.errors import UpstreamError
from settings import PROBE_SNIPPET_LENGTH, RAW_SNIPPET_LENGTH


def timeline_params(query: str, start_datetime: str, end_datetime: str) -> dict:
    """Query string of a raw-volume JSON timeline request."""
    return {
        "query": query,
        "mode": "timelinevolraw",
        "format": "json",
        "startdatetime": start_datetime,
        "enddatetime": end_datetime,
    }


class DocClient(BaseClient):
    """Client for the DOC 2.0 ``timelinevolraw`` endpoint."""

    async def timeline(self, query: str, start_datetime: str, end_datetime: str) -> TimelineSchema:
        """Daily article counts for a query. Empty body means no coverage."""
        logger.info("GDELT query: {}", query)
        try:
            resp = await self._get(timeline_params(query, start_datetime, end_datetime))
        except httpx.HTTPError as e:
            raise UpstreamError(f"GDELT request failed: {e} | Query: {query}", query=query) from e

        raw = resp.text
        if not resp.is_success:
            snippet = raw[:RAW_SNIPPET_LENGTH]
            logger.error("GDELT HTTP error {}: {}", resp.status_code, snippet)
            raise UpstreamError(
                f"GDELT error ({resp.status_code}): {snippet} | Query: {query}",
                status=resp.status_code,
                snippet=snippet,
                query=query,
            )

        if not raw.strip():
            logger.info("GDELT empty response for query")
            return TimelineSchema()

        try:
            data = json.loads(raw)
        except ValueError as e:
            snippet = raw[:RAW_SNIPPET_LENGTH]
            logger.error("GDELT JSON parse error. Raw response: {}", snippet)
            raise UpstreamError(
                f'GDELT returned non-JSON: "{snippet}..." | Query: {query}',
                status=resp.status_code,
                snippet=snippet,
                query=query,
            ) from e

        try:
            result = TimelineSchema.model_validate(data)
        except ValidationError as e:
            snippet = raw[:RAW_SNIPPET_LENGTH]
            raise UpstreamError(
                f"GDELT returned an unexpected timeline: {snippet} | Query: {query}",
                status=resp.status_code,
                snippet=snippet,
                query=query,
            ) from e

        counts = result.daily_counts()
        logger.info("GDELT success: {} points, total={}", len(counts), sum(v for _, v in counts))
        return result

    async def probe(self, query: str, start_datetime: str, end_datetime: str) -> ProbeSchema:
        """Single spaced request without retry. Failures are reported, not raised."""
        params = timeline_params(query, start_datetime, end_datetime)
        url = self.build_url(params)
        try:
            resp = await self._send(params)
        except httpx.HTTPError as e:
            return ProbeSchema(url=url, query=query, error=str(e) or type(e).__name__)

        raw = resp.text
        parsed, error = None, None
        if not resp.is_success:
            error = f"HTTP {resp.status_code}"
        else:
            try:
                parsed = json.loads(raw)
            except ValueError:
                error = "Failed to parse JSON"

        return ProbeSchema(
            url=url,
            query=query,
            raw_text=raw[:PROBE_SNIPPET_LENGTH],
            parsed_json=parsed,
            error=error,
        )
