from typing import Protocol

from domain.models.currency import BASE_CURRENCY, RateSnapshot


class ExchangeRateProvider(Protocol):
	"""A source of base-currency rate tables."""

	@property
	def name(self) -> str: ...

	async def fetch_rates(self, base_currency: str = BASE_CURRENCY) -> RateSnapshot:
		"""Fetch the full rate table in one request.

		Raises UpstreamUnavailableError on any network, HTTP or payload failure.
		Implementations never retry.
		"""
		...

	async def close(self) -> None: ...
