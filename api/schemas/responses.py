from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from domain.models.currency import CurrencyRate, RateSnapshot


class RatesResponse(BaseModel):
	base: str = Field(..., description='Base currency of every rate')
	date: str | None = Field(None, description='Rate date reported by the provider')
	fetched_at: datetime = Field(..., description='When the rates were fetched')
	rates: dict[str, float] = Field(..., description='Rates keyed by currency code')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'base': 'USD',
				'date': '2025-09-27',
				'fetched_at': '2025-09-27T10:30:00Z',
				'rates': {'EUR': 0.9, 'GBP': 0.8},
			}
		}
	)

	@classmethod
	def from_snapshot(cls, snapshot: RateSnapshot) -> 'RatesResponse':
		return cls(
			base=snapshot.base,
			date=snapshot.date,
			fetched_at=snapshot.fetched_at,
			rates=dict(snapshot.rates),
		)


class CurrencyRateResponse(BaseModel):
	currency_code: str = Field(..., alias='currencyCode', description='Currency code')
	exchange_rate: float = Field(..., alias='exchangeRate', description='Rate against USD')

	model_config = ConfigDict(
		populate_by_name=True,
		json_schema_extra={'example': {'currencyCode': 'EUR', 'exchangeRate': 0.9}},
	)

	@classmethod
	def from_rate(cls, rate: CurrencyRate) -> 'CurrencyRateResponse':
		return cls(currency_code=rate.code, exchange_rate=rate.rate)
