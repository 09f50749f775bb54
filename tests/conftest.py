"""
Shared test configuration and fixtures.
"""

from datetime import UTC, datetime, timedelta

import pytest

from domain.models.currency import RateSnapshot
from infrastructure.cache.currency_registry import CurrencyCodeRegistry
from infrastructure.cache.rate_cache import RateCacheService

START_TIME = datetime(2025, 11, 5, 10, 0, 0, tzinfo=UTC)


class FakeClock:
    """Manually advanced clock for driving cache expiry."""

    def __init__(self, now: datetime = START_TIME):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class FakeProvider:
    """Provider double that replays a queue of rate tables or errors."""

    name = 'fake'

    def __init__(self, clock: FakeClock, responses: list | None = None):
        self.clock = clock
        self.responses = list(responses or [])
        self.calls = 0
        self.closed = False

    def queue(self, *responses) -> None:
        self.responses.extend(responses)

    async def fetch_rates(self, base_currency: str = 'USD') -> RateSnapshot:
        self.calls += 1
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return RateSnapshot(rates=response, fetched_at=self.clock(), base=base_currency)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def provider(clock):
    return FakeProvider(clock)


@pytest.fixture
def registry():
    return CurrencyCodeRegistry()


@pytest.fixture
def rate_cache(provider, registry, clock):
    return RateCacheService(provider=provider, registry=registry, clock=clock)
