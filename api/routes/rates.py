from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_rate_service
from api.schemas import CurrencyRateResponse, RatesResponse
from application.services import RateService

router = APIRouter(prefix='/api', tags=['rates'])


@router.get(
	'',
	response_model=RatesResponse,
	status_code=status.HTTP_200_OK,
	summary='Get all exchange rates against USD',
	responses={
		status.HTTP_204_NO_CONTENT: {'description': 'No data found'},
		status.HTTP_500_INTERNAL_SERVER_ERROR: {'description': 'Upstream provider unavailable'},
	},
)
async def get_exchange_rates(
	service: Annotated[RateService, Depends(get_rate_service)],
) -> RatesResponse:
	snapshot = await service.get_all_rates()
	return RatesResponse.from_snapshot(snapshot)


@router.get(
	'/{currency_code}',
	response_model=CurrencyRateResponse,
	status_code=status.HTTP_200_OK,
	summary='Get the exchange rate of one currency against USD',
	responses={
		status.HTTP_204_NO_CONTENT: {'description': 'Invalid currency code or no data found'},
		status.HTTP_500_INTERNAL_SERVER_ERROR: {'description': 'Upstream provider unavailable'},
	},
)
async def get_exchange_rate(
	currency_code: str,
	service: Annotated[RateService, Depends(get_rate_service)],
) -> CurrencyRateResponse:
	rate = await service.get_rate(currency_code)
	return CurrencyRateResponse.from_rate(rate)
