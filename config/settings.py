from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	RATES_API_BASE_URL: str = 'https://trainlinerecruitment.github.io/exchangerates/api/latest'
	SUPPORTED_CURRENCIES: list[str] = ['EUR', 'GBP', 'USD']

	# Days before a cached rate table is refreshed
	CACHE_REFRESH_DAYS: int = 60
	REQUEST_TIMEOUT: int = 10

	# Application
	APP_NAME: str = 'Currency Exchange API'
	DEBUG: bool = False
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
