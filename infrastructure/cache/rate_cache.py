import asyncio
import logging
from collections.abc import Callable
from datetime import datetime, timedelta

from domain.models.currency import BASE_CURRENCY, CacheState, RateSnapshot, utc_now
from infrastructure.cache.currency_registry import CurrencyCodeRegistry
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)

CACHE_TTL = timedelta(hours=1)


class RateCacheService:
	"""In-memory holder of the current USD rate snapshot.

	The cache is Stale when it holds no snapshot or its expiry has passed, and
	Fresh otherwise. Staleness is only detected on read; nothing evicts
	entries in the background.

	Concurrent reads that find the cache Stale each fetch from the provider.
	Only the write of a fetch result is serialized: the snapshot, its expiry
	and the one-time registry population are applied under a single lock.
	"""

	def __init__(
		self,
		provider: ExchangeRateProvider,
		registry: CurrencyCodeRegistry,
		clock: Callable[[], datetime] = utc_now,
	):
		self.provider = provider
		self.registry = registry
		self._clock = clock
		self._state = CacheState()
		self._lock = asyncio.Lock()

	@property
	def state(self) -> CacheState:
		return self._state

	@property
	def snapshot(self) -> RateSnapshot | None:
		return self._state.snapshot

	def is_fresh(self) -> bool:
		return self._state.is_fresh(self._clock())

	async def ensure_fresh(self) -> RateSnapshot:
		if self.is_fresh():
			return self._state.snapshot

		logger.info(f'Rate cache stale, refreshing from {self.provider.name}')
		# UpstreamUnavailableError propagates with the cache left as it was.
		snapshot = await self.provider.fetch_rates(BASE_CURRENCY)

		async with self._lock:
			self._state = CacheState(snapshot=snapshot, expires_at=self._clock() + CACHE_TTL)
			self.registry.populate_once(snapshot)

		logger.info(f'Rate cache refreshed with {len(snapshot.rates)} rates')
		return snapshot
