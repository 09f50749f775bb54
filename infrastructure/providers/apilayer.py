import logging
from collections.abc import Callable
from datetime import datetime

import httpx

from domain.exceptions.currency import UpstreamUnavailableError
from domain.models.currency import BASE_CURRENCY, RateSnapshot, utc_now

logger = logging.getLogger(__name__)


class ApiLayerProvider:
	BASE_URL = 'https://api.apilayer.com/exchangerates_data'

	def __init__(
		self,
		api_key: str,
		base_url: str = BASE_URL,
		client: httpx.AsyncClient | None = None,
		timeout: int = 10,
		clock: Callable[[], datetime] = utc_now,
	):
		self.api_key = api_key
		self.base_url = base_url.rstrip('/')
		self._client = client or httpx.AsyncClient(timeout=timeout)
		self._clock = clock

	@property
	def name(self) -> str:
		return 'apilayer'

	async def _request(self, endpoint: str, params: dict) -> dict:
		url = f'{self.base_url}/{endpoint}'

		try:
			response = await self._client.get(url, params=params, headers={'apikey': self.api_key})
			response.raise_for_status()
			data = response.json()
		except httpx.HTTPStatusError as e:
			raise UpstreamUnavailableError(
				f'apilayer HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise UpstreamUnavailableError(f'apilayer request failed: {e.__class__.__name__}') from e
		except ValueError as e:
			raise UpstreamUnavailableError(f'apilayer response parsing error: {str(e)}') from e

		if not isinstance(data, dict):
			raise UpstreamUnavailableError('apilayer response parsing error: expected a JSON object')
		return data

	async def fetch_rates(self, base_currency: str = BASE_CURRENCY) -> RateSnapshot:
		try:
			data = await self._request('latest', {'base': base_currency.lower()})
			snapshot = self._parse_snapshot(data, base_currency)
		except UpstreamUnavailableError as e:
			logger.error(f'Error fetching exchange rates from {self.name}: {e}')
			raise

		logger.info(f'Fetched {len(snapshot.rates)} rates from {self.name}')
		return snapshot

	def _parse_snapshot(self, data: dict, base_currency: str) -> RateSnapshot:
		raw_rates = data.get('rates')
		if not isinstance(raw_rates, dict):
			raise UpstreamUnavailableError('Malformed payload: missing rates')

		rates: dict[str, float] = {}
		for code, value in raw_rates.items():
			if isinstance(value, bool) or not isinstance(value, int | float):
				raise UpstreamUnavailableError(f'Malformed payload: non-numeric rate for {code}')
			rates[str(code).upper()] = float(value)

		return RateSnapshot(
			rates=rates,
			fetched_at=self._clock(),
			base=base_currency.upper(),
			date=data.get('date'),
		)

	async def close(self) -> None:
		await self._client.aclose()
