"""Chunk planning - pure, deterministic expansion of a request into upstream tasks."""

from collections.abc import Mapping, Sequence
from datetime import date

from app.models.frequency import ChunkTask, Mode, Region
from app.services.frequency.keys import chunk_cache_key
from settings import CHUNK_SIZE
from settings.sources import DEFAULT_DOMAINS, SOURCE_COUNTRIES


def chunked(items: Sequence[str], size: int = CHUNK_SIZE) -> list[list[str]]:
    """Split into consecutive groups of at most ``size`` items."""
    if size < 1:
        raise ValueError("chunk size must be positive")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def resolve_allow_lists(
    regions: Sequence[Region],
    mode: Mode,
    custom_domains: Mapping[Region, Sequence[str]] | None = None,
) -> dict[Region, list[str]]:
    """Allow-list per region. Custom domain lists override defaults in domains mode only."""
    if mode == Mode.SOURCECOUNTRY:
        return {r: list(SOURCE_COUNTRIES[r]) for r in regions}

    lists = {r: list(DEFAULT_DOMAINS[r]) for r in regions}
    for region, domains in (custom_domains or {}).items():
        if region in lists:
            lists[region] = list(domains)
    return lists


def plan_chunks(
    phrases: Sequence[str],
    regions: Sequence[Region],
    mode: Mode,
    allow_lists: Mapping[Region, Sequence[str]],
    start_date: date,
    end_date: date,
    chunk_size: int = CHUNK_SIZE,
) -> list[ChunkTask]:
    """Every (phrase, region, chunk) task, ordered phrase-major then region then chunk."""
    tasks = []
    for phrase in phrases:
        for region in regions:
            for index, items in enumerate(chunked(allow_lists[region], chunk_size)):
                tasks.append(
                    ChunkTask(
                        phrase=phrase,
                        region=region,
                        chunk_index=index,
                        chunk_items=tuple(items),
                        cache_key=chunk_cache_key(phrase, region, items, mode, start_date, end_date),
                    )
                )
    return tasks
