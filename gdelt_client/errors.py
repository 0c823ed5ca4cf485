"""Upstream API errors."""


class GdeltError(Exception):
    """Base class for upstream failures."""

    code = "UPSTREAM_ERROR"
    retryable = False

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class UpstreamError(GdeltError):
    """Non-2xx status, unparsable body or transport failure. Not retried."""

    def __init__(self, message: str, status: int | None = None, snippet: str = "", query: str = ""):
        self.status = status
        self.snippet = snippet
        self.query = query
        super().__init__(message)


class UpstreamRateLimited(GdeltError):
    """HTTP 429 persisted through every retry. Safe to retry after a cooldown."""

    code = "RATE_LIMIT"
    retryable = True

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"GDELT rate limit hit after {attempts} attempts. Please try again in ~30 seconds.")
