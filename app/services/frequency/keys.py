"""Cache key derivation for both cache tiers.

Keys are sha256 digests of a canonical JSON payload. Before hashing, phrases
are trimmed and lowercased and every list is sorted, so requests that differ
only in casing, whitespace or ordering resolve to the same key.
``CACHE_VERSION`` is part of every payload; bumping it is the only way to
invalidate cached data.
"""

import hashlib
import json
from collections.abc import Iterable, Mapping, Sequence
from datetime import date
from typing import Any

from settings import CACHE_VERSION


def normalize_phrase(phrase: str) -> str:
    """Phrase as it takes part in cache keys: trimmed and lowercased."""
    return phrase.strip().lower()


def digest(payload: Mapping[str, Any]) -> str:
    """Stable hash of a JSON-serializable payload."""
    raw = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()


def canonical_chunk_payload(
    phrase: str,
    region: str,
    items: Iterable[str],
    mode: str,
    start_date: date,
    end_date: date,
    version: str = CACHE_VERSION,
) -> dict[str, Any]:
    return {
        "phrase": normalize_phrase(phrase),
        "region": str(region),
        "items": sorted(items),
        "mode": str(mode),
        "start_date": start_date.isoformat(),
        "end_date": end_date.isoformat(),
        "version": version,
    }


def chunk_cache_key(
    phrase: str,
    region: str,
    items: Iterable[str],
    mode: str,
    start_date: date,
    end_date: date,
    version: str = CACHE_VERSION,
) -> str:
    """Key of one chunk's daily counts. Shared across granularities."""
    return digest(canonical_chunk_payload(phrase, region, items, mode, start_date, end_date, version))


def canonical_response_payload(
    phrases: Iterable[str],
    regions: Iterable[str],
    mode: str,
    start_date: date,
    end_date: date,
    granularity: str,
    allow_lists: Mapping[str, Sequence[str]],
    version: str = CACHE_VERSION,
) -> dict[str, Any]:
    sorted_regions = sorted(str(r) for r in regions)
    domains = None
    if str(mode) == "domains":
        # Source-country lists are fixed per version, custom domain lists are not
        domains = {r: sorted(allow_lists[r]) for r in sorted_regions}
    return {
        "phrases": sorted(normalize_phrase(p) for p in phrases),
        "regions": sorted_regions,
        "mode": str(mode),
        "start_date": start_date.isoformat(),
        "end_date": end_date.isoformat(),
        "granularity": str(granularity),
        "domains": domains,
        "version": version,
    }


def response_cache_key(
    phrases: Iterable[str],
    regions: Iterable[str],
    mode: str,
    start_date: date,
    end_date: date,
    granularity: str,
    allow_lists: Mapping[str, Sequence[str]],
    version: str = CACHE_VERSION,
) -> str:
    """Key of a fully aggregated response."""
    return digest(
        canonical_response_payload(phrases, regions, mode, start_date, end_date, granularity, allow_lists, version)
    )
