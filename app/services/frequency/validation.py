"""Request validation and normalization."""

import re
from collections.abc import Mapping
from datetime import date, datetime
from enum import StrEnum
from typing import TypeVar

from app.errors import ValidationError
from app.models.frequency import FrequencyQuery, FrequencyRequest, Granularity, Mode, Region
from app.services.frequency.keys import normalize_phrase
from app.services.frequency.planner import resolve_allow_lists
from settings import MAX_PHRASE_LENGTH, MAX_PHRASES, MIN_PHRASE_LENGTH

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

E = TypeVar("E", bound=StrEnum)


def _parse_enum(enum: type[E], value: str, name: str) -> E:
    try:
        return enum(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum)
        raise ValidationError(f"Invalid {name}: {value!r}. Expected one of: {allowed}") from None


def _parse_date(value: str, name: str) -> date:
    if not value:
        raise ValidationError("Start date and end date are required")
    if not _DATE_RE.match(value):
        raise ValidationError(f"Invalid {name} format: {value}. Expected YYYY-MM-DD.")
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid {name}: {value}") from None


def validate_phrases(phrases: list[str]) -> list[str]:
    """Trimmed phrases, duplicates (ignoring case) dropped."""
    if not phrases:
        raise ValidationError("At least one phrase is required")
    if len(phrases) > MAX_PHRASES:
        raise ValidationError(f"Maximum {MAX_PHRASES} phrases allowed")

    result, seen = [], set()
    for phrase in phrases:
        trimmed = phrase.strip()
        if len(trimmed) < MIN_PHRASE_LENGTH:
            raise ValidationError(f'Phrase too short (min {MIN_PHRASE_LENGTH} chars): "{phrase}"')
        if len(trimmed) > MAX_PHRASE_LENGTH:
            raise ValidationError(f'Phrase too long (max {MAX_PHRASE_LENGTH} chars): "{trimmed[:20]}..."')
        if normalize_phrase(trimmed) not in seen:
            seen.add(normalize_phrase(trimmed))
            result.append(trimmed)
    return result


def validate_regions(regions: list[str]) -> list[Region]:
    """Known regions in caller order, duplicates dropped."""
    if not regions:
        raise ValidationError("At least one region is required")
    return list(dict.fromkeys(_parse_enum(Region, r, "region") for r in regions))


def validate_custom_domains(custom: Mapping[str, list[str]] | None) -> dict[Region, list[str]]:
    """Lowercased, trimmed, de-duplicated domain lists per region."""
    result = {}
    for region, domains in (custom or {}).items():
        key = _parse_enum(Region, region, "region in customDomains")
        cleaned = list(dict.fromkeys(d.strip().lower() for d in domains if d.strip()))
        if not cleaned:
            raise ValidationError(f"customDomains for {key} must not be empty")
        result[key] = cleaned
    return result


def validate_request(request: FrequencyRequest) -> FrequencyQuery:
    """Reject malformed requests; normalize the rest."""
    phrases = validate_phrases(request.phrases)
    regions = validate_regions(request.regions)
    mode = _parse_enum(Mode, request.mode, "mode")
    granularity = _parse_enum(Granularity, request.granularity, "granularity")

    start = _parse_date(request.start_date, "start date")
    end = _parse_date(request.end_date, "end date")
    if start > end:
        raise ValidationError("Start date must be before end date")

    custom = validate_custom_domains(request.custom_domains)
    return FrequencyQuery(
        phrases=phrases,
        regions=regions,
        mode=mode,
        start_date=start,
        end_date=end,
        granularity=granularity,
        allow_lists=resolve_allow_lists(regions, mode, custom),
        test_mode=request.test_mode,
        estimate_only=request.estimate_only,
    )
