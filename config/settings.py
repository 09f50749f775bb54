from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	API_KEY: str = ''
	UPSTREAM_URL: str = 'https://api.apilayer.com/exchangerates_data'
	UPSTREAM_TIMEOUT: int = 10

	# Server
	HOST: str = '0.0.0.0'
	PORT: int = 3000

	# Application
	APP_NAME: str = 'Exchange Rates API'
	DEBUG: bool = False

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_DIRECTORY: str | None = None

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
