"""Dependency Injection container - initialized at app startup."""

from collections.abc import Callable

from app.repositories.common import CacheRepository, CacheStore
from app.services.frequency import FrequencyService, chunk_tier, response_tier
from gdelt_client import DocClient, RateLimiter, default_limiter


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(
        self,
        store: CacheStore | None = None,
        db_path: str | None = None,
        limiter: RateLimiter | None = None,
        client_factory: Callable[[], DocClient] | None = None,
    ) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Storage shared by both cache tiers
        self.store = store or CacheRepository(db_path)

        # Every client shares the process-wide limiter
        self.limiter = limiter or default_limiter()
        self.client_factory = client_factory or (lambda: DocClient(limiter=self.limiter))

        self.frequency = FrequencyService(
            chunks=chunk_tier(self.store),
            responses=response_tier(self.store),
            client_factory=self.client_factory,
            spacing=self.limiter.spacing,
        )

        self._initialized = True

    def reset(self) -> None:
        """Drop wiring so the next ``init`` rebuilds it (tests, reconfiguration)."""
        self._initialized = False


# Global container instance
container = Container()
