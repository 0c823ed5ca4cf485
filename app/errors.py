"""Service errors - each carries a stable code and an HTTP-equivalent status."""


class FrequencyError(Exception):
    """Base error for the frequency service."""

    code = "SERVER_ERROR"
    status = 500
    retryable = False

    def __init__(self, message: str = "Internal server error"):
        self.message = message
        super().__init__(self.message)


class ValidationError(FrequencyError):
    """Malformed request. Never retried."""

    code = "VALIDATION_ERROR"
    status = 400

    def __init__(self, message: str = "Validation error"):
        super().__init__(message)


class BudgetExceeded(FrequencyError):
    """Projected new upstream requests exceed the per-run ceiling."""

    code = "TOO_MANY_REQUESTS"
    status = 400

    def __init__(self, new_requests: int, max_requests: int):
        self.new_requests = new_requests
        self.max_requests = max_requests
        super().__init__(
            f"This query requires {new_requests} new GDELT requests, but the maximum is {max_requests}. "
            "Please reduce the number of phrases or regions."
        )


class InternalError(FrequencyError):
    """Unexpected failure. Surfaced generically."""


class StorageError(InternalError):
    """Cache store read or write failed."""
