"""Frequency API."""

from web.api.frequency.views import parse_request, post_frequency, to_response

__all__ = [
    "post_frequency",
    "parse_request",
    "to_response",
]
