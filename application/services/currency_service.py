import logging

from domain.exceptions.currency import UpstreamUnavailableError
from domain.models.currency import BASE_CURRENCY
from infrastructure.cache.currency_registry import CurrencyCodeRegistry
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)


class CurrencyService:
	def __init__(self, registry: CurrencyCodeRegistry, provider: ExchangeRateProvider):
		self.registry = registry
		self.provider = provider

	async def initialize_supported_currencies(self) -> bool:
		"""Pre-populate the code registry from one provider fetch.

		Returns False when the fetch fails; the registry then stays unattempted
		so the next successful rate refresh fills it instead.
		"""
		if self.registry.is_populated:
			logger.info('Supported currencies already initialized')
			return True

		logger.info('Initializing supported currencies...')
		try:
			snapshot = await self.provider.fetch_rates(BASE_CURRENCY)
		except UpstreamUnavailableError as e:
			logger.error(f'Error updating valid currency codes: {e}')
			return False

		self.registry.populate_once(snapshot)
		logger.info(f'{self.provider.name} supports {len(self.get_supported_currencies())} currencies')
		return True

	def get_supported_currencies(self) -> list[str]:
		return list(self.registry.codes)

	def is_supported(self, code: str) -> bool:
		return self.registry.contains(code)
