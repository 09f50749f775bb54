import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, Response

from domain.exceptions.currency import InvalidCurrencyError, NoDataError, ProviderError

logger = logging.getLogger(__name__)


def _no_content(message: str) -> Response:
	# 204 responses cannot carry a body, so the message travels in a header.
	return Response(status_code=status.HTTP_204_NO_CONTENT, headers={'X-Error': message})


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(NoDataError)
	async def no_data_handler(request: Request, exc: NoDataError):
		return _no_content(str(exc))

	@app.exception_handler(InvalidCurrencyError)
	async def invalid_currency_handler(request: Request, exc: InvalidCurrencyError):
		return _no_content(str(exc))

	@app.exception_handler(ProviderError)
	async def provider_error_handler(request: Request, exc: ProviderError):
		logger.error(f'Error fetching exchange rates: {exc}')
		return JSONResponse(
			status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
			content={'detail': 'Internal Server Error'},
		)

	@app.exception_handler(Exception)
	async def global_exception_handler(request: Request, exc: Exception):
		logger.error(f'Unhandled exception: {exc}', exc_info=True)
		return JSONResponse(
			status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
			content={'detail': 'Internal server error'},
		)
