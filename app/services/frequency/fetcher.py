"""Chunk resolution - cache first, then one upstream request per missing chunk."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from loguru import logger

from app.models.frequency import ChunkResult, ChunkTask, DataPoint, Mode
from app.services.frequency.cache import CacheTier
from gdelt_client import DocClient
from gdelt_client.doc import build_query


@dataclass
class Resolution:
    """Chunk results by cache key, with where they came from."""

    results: dict[str, ChunkResult] = field(default_factory=dict)
    cached: int = 0
    fetched: int = 0


class ChunkResolver:
    """Resolves chunk tasks strictly one at a time.

    Fetches are never issued concurrently. Each fetched chunk is written to
    the chunk cache before the next request.
    """

    def __init__(self, chunks: CacheTier, client_factory: Callable[[], DocClient]):
        self._chunks = chunks
        self._client_factory = client_factory

    def pending(self, tasks: Sequence[ChunkTask]) -> list[str]:
        """Distinct cache keys with no fresh cache entry, in plan order."""
        keys = list(dict.fromkeys(t.cache_key for t in tasks))
        cached = self._chunks.get_many(keys)
        return [k for k in keys if k not in cached]

    async def resolve(
        self,
        tasks: Sequence[ChunkTask],
        mode: Mode,
        start_datetime: str,
        end_datetime: str,
    ) -> Resolution:
        cached = self._chunks.get_many(t.cache_key for t in tasks)
        resolution = Resolution(
            results={k: ChunkResult.from_dict(v) for k, v in cached.items()},
            cached=len(cached),
        )
        todo = [t for t in tasks if t.cache_key not in resolution.results]
        logger.info("Cache: {}/{} chunks cached, {} to fetch", len(cached), len(tasks), len(todo))
        if not todo:
            return resolution

        async with self._client_factory() as client:
            for task in todo:
                if task.cache_key in resolution.results:
                    continue
                query = build_query(task.phrase, task.chunk_items, mode)
                timeline = await client.timeline(query, start_datetime, end_datetime)
                points = [DataPoint(date=d, value=v) for d, v in timeline.daily_counts()]
                result = ChunkResult(
                    phrase=task.phrase,
                    region=str(task.region),
                    chunk_index=task.chunk_index,
                    total=sum(p.value for p in points),
                    points=points,
                )
                self._chunks.put(task.cache_key, result.to_dict())
                resolution.results[task.cache_key] = result
                resolution.fetched += 1

        logger.info("Fetched {} chunks from GDELT", resolution.fetched)
        return resolution
