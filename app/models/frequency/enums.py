"""Closed request vocabularies."""

from enum import StrEnum


class Region(StrEnum):
    """Coverage region."""

    CA = "CA"
    US = "US"
    EU = "EU"


class Mode(StrEnum):
    """How a region is scoped: curated outlets or source countries."""

    DOMAINS = "domains"
    SOURCECOUNTRY = "sourcecountry"


class Granularity(StrEnum):
    """Output bucket width."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


# Region label of the cross-region combined series
ALL_REGIONS = "ALL"
