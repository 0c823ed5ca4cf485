"""Frequency service - request lifecycle.

Validating -> Planning -> one of:
  * EstimateOnly: report cached/new request counts, no upstream calls.
  * ProbeOnly: one raw upstream request for the first phrase/region chunk,
    no caches, no budget ceiling.
  * CacheHit: a fresh full response is returned as stored.
  * Executing: budget check, chunk resolution, aggregation, response write.
"""

from collections.abc import Callable

from loguru import logger

from app.errors import BudgetExceeded
from app.models.frequency import (
    ChunkTask,
    Estimate,
    FrequencyMeta,
    FrequencyQuery,
    FrequencyRequest,
    FrequencyResult,
    ProbeResult,
)
from app.services.frequency import aggregator, budget
from app.services.frequency.cache import CacheTier
from app.services.frequency.fetcher import ChunkResolver
from app.services.frequency.keys import response_cache_key
from app.services.frequency.planner import chunked, plan_chunks
from app.services.frequency.validation import validate_request
from gdelt_client import DocClient
from gdelt_client.doc import build_query
from settings import MAX_REQUESTS_PER_RUN, RATE_LIMIT_SECONDS


class FrequencyService:
    """Answers phrase frequency requests over the rate-limited DOC API."""

    def __init__(
        self,
        chunks: CacheTier,
        responses: CacheTier,
        client_factory: Callable[[], DocClient],
        max_requests: int = MAX_REQUESTS_PER_RUN,
        spacing: float = RATE_LIMIT_SECONDS,
    ):
        self._responses = responses
        self._client_factory = client_factory
        self._resolver = ChunkResolver(chunks, client_factory)
        self._max_requests = max_requests
        self._spacing = spacing
        logger.debug("FrequencyService initialized")

    async def handle(self, request: FrequencyRequest) -> FrequencyResult | Estimate | ProbeResult:
        """Validate and plan a request, then estimate, probe or execute it."""
        logger.info(
            "Request: phrases={}, regions={}, mode={}, dates={} to {}, testMode={}, estimateOnly={}",
            request.phrases,
            request.regions,
            request.mode,
            request.start_date,
            request.end_date,
            request.test_mode,
            request.estimate_only,
        )
        query = validate_request(request)
        tasks = self.plan(query)

        if query.estimate_only:
            return self.estimate(tasks)
        if query.test_mode:
            return await self.probe(query)
        return await self.execute(query, tasks)

    def plan(self, query: FrequencyQuery) -> list[ChunkTask]:
        """Chunk tasks for a validated query."""
        return plan_chunks(
            query.phrases,
            query.regions,
            query.mode,
            query.allow_lists,
            query.start_date,
            query.end_date,
        )

    def estimate(self, tasks: list[ChunkTask]) -> Estimate:
        """Cost of resolving ``tasks`` right now."""
        result = budget.estimate(tasks, self._resolver, self._max_requests, self._spacing)
        logger.info(
            "Estimate: {} total, {} cached, {} new (limit {})",
            result.total_requests,
            result.cached_requests,
            result.new_requests,
            result.max_requests,
        )
        return result

    async def probe(self, query: FrequencyQuery) -> ProbeResult:
        """Raw diagnostic request. Never reads or writes any cache."""
        phrase, region = query.phrases[0], query.regions[0]
        chunks = chunked(query.allow_lists[region])
        q = build_query(phrase, chunks[0] if chunks else [], query.mode)

        async with self._client_factory() as client:
            raw = await client.probe(q, query.start_datetime, query.end_datetime)

        return ProbeResult(
            url=raw.url,
            query=q,
            phrase=phrase,
            region=str(region),
            raw_text=raw.raw_text,
            parsed_json=raw.parsed_json,
            error=raw.error,
        )

    async def execute(self, query: FrequencyQuery, tasks: list[ChunkTask]) -> FrequencyResult:
        """Full pipeline: response cache, budget check, chunk resolution, aggregation."""
        key = response_cache_key(
            query.phrases,
            query.regions,
            query.mode,
            query.start_date,
            query.end_date,
            query.granularity,
            query.allow_lists,
        )
        cached = self._responses.get(key)
        if cached is not None:
            logger.info("Cache: full response hit")
            return FrequencyResult.from_dict(cached)

        projected = self.estimate(tasks)
        if projected.exceeds_limit:
            raise BudgetExceeded(projected.new_requests, projected.max_requests)

        logger.info("Processing {} chunks ({} new requests)", len(tasks), projected.new_requests)
        resolution = await self._resolver.resolve(tasks, query.mode, query.start_datetime, query.end_datetime)
        logger.info("Chunks: {} from cache, {} fetched", resolution.cached, resolution.fetched)

        series = aggregator.build_series(tasks, resolution.results, query.granularity)
        if len(query.regions) > 1:
            series += aggregator.combine_regions(series, query.phrases)

        result = FrequencyResult(
            meta=FrequencyMeta(
                start_datetime=query.start_datetime,
                end_datetime=query.end_datetime,
                granularity=str(query.granularity),
                regions=[str(r) for r in query.regions],
                mode=str(query.mode),
            ),
            series=series,
        )
        self._responses.put(key, result.to_dict())
        logger.info("Response: {} series", len(series))
        return result
