class CurrencyException(Exception):
	pass


class InvalidCurrencyError(CurrencyException):
	pass


class NoDataError(CurrencyException):
	pass


class ProviderError(CurrencyException):
	pass


class UpstreamUnavailableError(ProviderError):
	pass
