import logging
from enum import Enum

from domain.models.currency import RateSnapshot

logger = logging.getLogger(__name__)


class RegistryState(Enum):
	UNATTEMPTED = 'unattempted'
	POPULATED = 'populated'


class CurrencyCodeRegistry:
	"""Write-once set of currency codes accepted by single-rate queries.

	The registry is filled from the first successful rate fetch of the process
	and then frozen. Later refreshes of the rate table never change it.
	"""

	def __init__(self):
		self._codes: frozenset[str] = frozenset()
		self._state = RegistryState.UNATTEMPTED

	@property
	def state(self) -> RegistryState:
		return self._state

	@property
	def is_populated(self) -> bool:
		return self._state is RegistryState.POPULATED

	@property
	def codes(self) -> tuple[str, ...]:
		return tuple(sorted(self._codes))

	def populate_once(self, snapshot: RateSnapshot) -> None:
		# An empty table still counts as populated.
		if self.is_populated:
			return

		self._codes = frozenset(code.upper() for code in snapshot.rates)
		self._state = RegistryState.POPULATED
		logger.info(f'Currency code registry populated with {len(self._codes)} codes')

	def contains(self, code: str) -> bool:
		return code in self._codes
