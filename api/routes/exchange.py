from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_currency_service, get_exchange_service
from api.schemas import (
	ErrorResponse,
	ExchangeRequestBody,
	ExchangeResponseBody,
	SupportedCurrenciesResponse,
)
from application.services import CurrencyService, ExchangeService
from domain.models.currency import ExchangeNotFound

router = APIRouter(prefix='/api', tags=['exchange'])


@router.post(
	'/exchange',
	response_model=ExchangeResponseBody,
	status_code=status.HTTP_200_OK,
	summary='Exchange a price into another currency',
	responses={
		400: {'model': ErrorResponse},
		404: {'model': ErrorResponse},
		503: {'model': ErrorResponse},
	},
)
async def exchange(
	body: ExchangeRequestBody,
	currency_service: Annotated[CurrencyService, Depends(get_currency_service)],
	service: Annotated[ExchangeService, Depends(get_exchange_service)],
) -> ExchangeResponseBody:
	request = currency_service.build_request(body.price, body.source, body.target)

	result = await service.exchange(request)
	if isinstance(result, ExchangeNotFound):
		raise HTTPException(
			status_code=status.HTTP_404_NOT_FOUND,
			detail=(
				f'The exchange information for the currency {result.source_currency} '
				'was not found or its out of date'
			),
		)

	return ExchangeResponseBody(
		amount=result.amount,
		target_currency=result.target_currency,
		rate=result.rate,
	)


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List supported currencies',
)
async def get_supported_currencies(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> SupportedCurrenciesResponse:
	return SupportedCurrenciesResponse(currencies=service.get_supported_currencies())
