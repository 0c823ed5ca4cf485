"""Base HTTP client with rate limiting and retry logic."""

import asyncio
from collections.abc import Awaitable, Callable

import httpx
from loguru import logger
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

import settings
from gdelt_client.errors import UpstreamRateLimited
from gdelt_client.rate_limit import RateLimiter, default_limiter

API_BASE_URL = settings.API_BASE_URL
API_TIMEOUT = settings.API_TIMEOUT


class BaseClient:
    """Async HTTP client sharing one global rate limiter.

    Requests are spaced by the limiter and HTTP 429 responses are retried
    with a fixed backoff. Every other status is returned to the caller.
    """

    def __init__(
        self,
        limiter: RateLimiter | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        max_retries: int = settings.MAX_RETRIES,
        retry_delay: float = settings.RETRY_DELAY_SECONDS,
    ):
        self._client: httpx.AsyncClient | None = None
        self._limiter = limiter or default_limiter()
        self._transport = transport
        self._sleep = sleep
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self._request_count = 0

    async def __aenter__(self):
        self._client = httpx.AsyncClient(timeout=API_TIMEOUT, transport=self._transport)
        return self

    async def __aexit__(self, *_):
        logger.debug("{}: {} upstream requests", self.__class__.__name__, self._request_count)
        if self._client:
            await self._client.aclose()

    @property
    def request_count(self) -> int:
        return self._request_count

    @staticmethod
    def build_url(params: dict) -> str:
        """Full request URL, as reported by diagnostics."""
        return str(httpx.URL(API_BASE_URL, params=params))

    async def _send(self, params: dict) -> httpx.Response:
        """One spaced GET, no retry."""
        await self._limiter.acquire()
        self._request_count += 1
        return await self._client.get(API_BASE_URL, params=params)

    def _log_retry(self, state: RetryCallState) -> None:
        logger.warning(
            "RateLimit: got 429, attempt {}/{}, backing off",
            state.attempt_number,
            self._max_retries + 1,
        )

    async def _get(self, params: dict) -> httpx.Response:
        """GET with spacing and bounded 429 retry."""
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._max_retries + 1),
            wait=wait_fixed(self._retry_delay),
            retry=retry_if_exception_type(UpstreamRateLimited),
            before_sleep=self._log_retry,
            sleep=self._sleep,
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                resp = await self._send(params)
                if resp.status_code == 429:
                    raise UpstreamRateLimited(attempts=attempt.retry_state.attempt_number)
                return resp
