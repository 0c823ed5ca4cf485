"""Shared pytest fixtures for frequency tests."""

from collections.abc import Callable

import httpx
import pytest

from app.container import container
from app.repositories.common import MemoryCacheStore
from app.services.frequency import FrequencyService, chunk_tier, response_tier
from fakes import FakeClock, FakeUpstream
from gdelt_client import DocClient, RateLimiter


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return MemoryCacheStore()


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def limiter(clock):
    return RateLimiter(spacing=5.0, clock=clock.monotonic, sleep=clock.sleep)


@pytest.fixture
def client_factory(upstream, limiter, clock) -> Callable[[], DocClient]:
    transport = httpx.MockTransport(upstream)
    return lambda: DocClient(limiter=limiter, transport=transport, sleep=clock.sleep)


@pytest.fixture
def service(store, client_factory, clock):
    return FrequencyService(
        chunks=chunk_tier(store, clock.now),
        responses=response_tier(store, clock.now),
        client_factory=client_factory,
    )


@pytest.fixture
def wired(store, limiter, client_factory):
    """Global container wired to in-memory fakes."""
    container.reset()
    container.init(store=store, limiter=limiter, client_factory=client_factory)
    yield container
    container.reset()
