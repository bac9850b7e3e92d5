from decimal import Decimal

from pydantic import BaseModel, Field


class ExchangeResponseBody(BaseModel):
	amount: Decimal = Field(..., description='Exchanged amount, rounded half-to-even to 2 places')
	target_currency: str = Field(..., description='Currency the amount is expressed in')
	rate: Decimal = Field(..., description='Exchange rate applied')

	model_config = {
		'json_schema_extra': {
			'example': {'amount': 19.95, 'target_currency': 'GBP', 'rate': 0.855552}
		}
	}


class ErrorResponse(BaseModel):
	detail: str = Field(..., description='Why the exchange could not be made')


class SupportedCurrenciesResponse(BaseModel):
	currencies: list[str] = Field(description='List of currency codes')

	model_config = {'json_schema_extra': {'examples': [{'currencies': ['EUR', 'GBP', 'USD']}]}}
