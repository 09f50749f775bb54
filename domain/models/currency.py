from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from types import MappingProxyType

BASE_CURRENCY = 'USD'


def utc_now() -> datetime:
	return datetime.now(UTC)


@dataclass(frozen=True)
class RateSnapshot:
	rates: Mapping[str, float]
	fetched_at: datetime
	base: str = BASE_CURRENCY
	date: str | None = None  # Provider's own rate date, when reported

	def __post_init__(self) -> None:
		object.__setattr__(self, 'rates', MappingProxyType(dict(self.rates)))

	@property
	def is_empty(self) -> bool:
		return not self.rates


@dataclass(frozen=True)
class CurrencyRate:
	code: str
	rate: float


@dataclass(frozen=True)
class CacheState:
	snapshot: RateSnapshot | None = None
	expires_at: datetime | None = None

	def __post_init__(self) -> None:
		if (self.snapshot is None) != (self.expires_at is None):
			raise ValueError('snapshot and expires_at must be set together')

	def is_fresh(self, now: datetime) -> bool:
		return self.snapshot is not None and now < self.expires_at
