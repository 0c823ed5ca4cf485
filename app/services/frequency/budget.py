"""Upstream cost estimation."""

import math
from collections.abc import Sequence

from app.models.frequency import ChunkTask, Estimate
from app.services.frequency.fetcher import ChunkResolver
from settings import MAX_REQUESTS_PER_RUN, RATE_LIMIT_SECONDS


def estimate(
    tasks: Sequence[ChunkTask],
    resolver: ChunkResolver,
    max_requests: int = MAX_REQUESTS_PER_RUN,
    spacing: float = RATE_LIMIT_SECONDS,
) -> Estimate:
    """Cached vs. new request counts for a plan. Performs no upstream fetch.

    New requests are counted with the same cache probe the resolver uses, so
    the figure equals what a run at the same moment would fetch.
    """
    total = len(tasks)
    new = len(resolver.pending(tasks))
    return Estimate(
        total_requests=total,
        cached_requests=total - new,
        new_requests=new,
        estimated_time_seconds=math.ceil(new * spacing),
        exceeds_limit=new > max_requests,
        max_requests=max_requests,
    )
