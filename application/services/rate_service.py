import logging

from application.services.currency_service import CurrencyService
from domain.exceptions.currency import InvalidCurrencyError, NoDataError
from domain.models.currency import CurrencyRate, RateSnapshot
from infrastructure.cache.rate_cache import RateCacheService

logger = logging.getLogger(__name__)


class RateService:
	def __init__(self, cache: RateCacheService, currency_service: CurrencyService):
		self.cache = cache
		self.currency_service = currency_service

	async def get_all_rates(self) -> RateSnapshot:
		snapshot = await self.cache.ensure_fresh()
		if snapshot.is_empty:
			raise NoDataError('No data found!')
		return snapshot

	async def get_rate(self, code: str) -> CurrencyRate:
		code = code.upper()
		snapshot = await self.cache.ensure_fresh()

		# A code must be in the current table and in the registry, which may
		# have been filled from an earlier, differently keyed snapshot.
		if code not in snapshot.rates or not self.currency_service.is_supported(code):
			logger.info(f'Rejected rate query for {code}')
			raise InvalidCurrencyError(f'Invalid currency code or no data found for {code}')

		return CurrencyRate(code=code, rate=snapshot.rates[code])
