from decimal import Decimal

from pydantic import BaseModel, Field


class ExchangeRequestBody(BaseModel):
	# missing fields are reported by CurrencyService.build_request
	price: Decimal | None = Field(default=None, description='Amount to exchange')
	source: str | None = Field(default=None, description='Currency the price is in')
	target: str | None = Field(default=None, description='Currency to exchange into')

	model_config = {
		'json_schema_extra': {'example': {'price': 23.32, 'source': 'eur', 'target': 'gbp'}}
	}
