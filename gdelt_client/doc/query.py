"""Query expression and datetime helpers for the DOC API."""

from collections.abc import Sequence
from datetime import date

from settings import EXACT_MATCH_MIN_LENGTH

SOURCE_OPERATORS = {
    "domains": "domain",
    "sourcecountry": "sourcecountry",
}


def phrase_clause(phrase: str) -> str:
    """Quote the phrase for exact matching. Short phrases stay bare."""
    trimmed = phrase.strip()
    if len(trimmed) >= EXACT_MATCH_MIN_LENGTH:
        return f'"{trimmed}"'
    return trimmed


def source_clause(items: Sequence[str], mode: str) -> str:
    """OR-join ``domain:`` / ``sourcecountry:`` terms."""
    operator = SOURCE_OPERATORS[str(mode)]
    if not items:
        return ""
    if len(items) == 1:
        return f"{operator}:{items[0]}"
    return "(" + " OR ".join(f"{operator}:{item}" for item in items) + ")"


def build_query(phrase: str, items: Sequence[str], mode: str) -> str:
    """Full query expression, e.g. ``"interest rates" (domain:a.com OR domain:b.com)``."""
    return f"{phrase_clause(phrase)} {source_clause(items, mode)}".strip()


def start_datetime(day: date) -> str:
    """First second of ``day`` as YYYYMMDDHHMMSS."""
    return day.strftime("%Y%m%d") + "000000"


def end_datetime(day: date) -> str:
    """Last second of ``day`` as YYYYMMDDHHMMSS."""
    return day.strftime("%Y%m%d") + "235959"
