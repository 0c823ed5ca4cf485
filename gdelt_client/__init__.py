"""GDELT API client package."""

from gdelt_client.base import BaseClient
from gdelt_client.doc import DocClient
from gdelt_client.errors import GdeltError, UpstreamError, UpstreamRateLimited
from gdelt_client.rate_limit import RateLimiter, default_limiter

__all__ = [
    # Base
    "BaseClient",
    "RateLimiter",
    "default_limiter",
    # Errors
    "GdeltError",
    "UpstreamError",
    "UpstreamRateLimited",
    # Clients
    "DocClient",
]
