"""API error mapping - every failure becomes a status code and a JSON body."""

from loguru import logger
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.errors import BudgetExceeded, FrequencyError, InternalError
from gdelt_client.errors import GdeltError, UpstreamError, UpstreamRateLimited


class ErrorResponse(BaseModel):
    """Error body returned to callers."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    error: str
    code: str
    retryable: bool = False
    new_requests: int | None = None
    max_requests: int | None = None
    query: str | None = None


def error_payload(exc: Exception) -> tuple[int, dict]:
    """Map an exception to ``(status, body)``. Unknown errors are logged and hidden."""
    if isinstance(exc, BudgetExceeded):
        status, body = exc.status, ErrorResponse(
            error=exc.message,
            code=exc.code,
            new_requests=exc.new_requests,
            max_requests=exc.max_requests,
        )
    elif isinstance(exc, FrequencyError) and not isinstance(exc, InternalError):
        status, body = exc.status, ErrorResponse(error=exc.message, code=exc.code)
    elif isinstance(exc, UpstreamRateLimited):
        status, body = 429, ErrorResponse(error=exc.message, code=exc.code, retryable=True)
    elif isinstance(exc, UpstreamError):
        status, body = 502, ErrorResponse(error=exc.message, code=exc.code, query=exc.query or None)
    elif isinstance(exc, GdeltError):
        status, body = 502, ErrorResponse(error=exc.message, code=exc.code)
    else:
        logger.opt(exception=exc).error("Unhandled error: {}", exc)
        body = ErrorResponse(error="Internal server error", code=InternalError.code)
        return 500, body.model_dump(by_alias=True, exclude_none=True)

    logger.warning("Request failed ({}): {}", body.code, body.error)
    return status, body.model_dump(by_alias=True, exclude_none=True)
