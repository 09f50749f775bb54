from .responses import CurrencyRateResponse, RatesResponse

__all__ = ['CurrencyRateResponse', 'RatesResponse']
