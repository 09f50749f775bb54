import asyncio
import contextlib
import logging
from typing import Annotated

from fastapi import Depends

from application.services import CurrencyService, RateService
from config.settings import get_settings
from infrastructure.cache.currency_registry import CurrencyCodeRegistry
from infrastructure.cache.rate_cache import RateCacheService
from infrastructure.providers import ApiLayerProvider, ExchangeRateProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	provider: ExchangeRateProvider | None = None
	registry: CurrencyCodeRegistry | None = None
	rate_cache: RateCacheService | None = None
	bootstrap_task: asyncio.Task | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.provider = ApiLayerProvider(
		api_key=settings.API_KEY,
		base_url=settings.UPSTREAM_URL,
		timeout=settings.UPSTREAM_TIMEOUT,
	)
	deps.registry = CurrencyCodeRegistry()
	deps.rate_cache = RateCacheService(provider=deps.provider, registry=deps.registry)
	logger.info('Dependencies initialized')


async def bootstrap() -> None:
	"""Pre-populate the currency code registry. Runs in the background at startup."""
	logger.info('Bootstrapping application...')

	if deps.registry is None or deps.provider is None:
		raise RuntimeError('Dependencies not initialized. Call init_dependencies() first.')

	service = CurrencyService(registry=deps.registry, provider=deps.provider)
	try:
		await service.initialize_supported_currencies()
	except Exception as e:
		# The background task result is never collected.
		logger.error(f'Bootstrap failed: {e}', exc_info=True)
		return

	logger.info('Bootstrap complete')


def start_bootstrap() -> asyncio.Task:
	deps.bootstrap_task = asyncio.create_task(bootstrap())
	return deps.bootstrap_task


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.bootstrap_task and not deps.bootstrap_task.done():
		deps.bootstrap_task.cancel()
		with contextlib.suppress(asyncio.CancelledError):
			await deps.bootstrap_task
	if deps.provider:
		await deps.provider.close()

	deps.provider = None
	deps.registry = None
	deps.rate_cache = None
	deps.bootstrap_task = None
	logger.info('Cleanup complete')


def get_provider() -> ExchangeRateProvider:
	if deps.provider is None:
		raise RuntimeError('Provider not initialized')
	return deps.provider


def get_registry() -> CurrencyCodeRegistry:
	if deps.registry is None:
		raise RuntimeError('Currency registry not initialized')
	return deps.registry


def get_rate_cache() -> RateCacheService:
	if deps.rate_cache is None:
		raise RuntimeError('Rate cache not initialized')
	return deps.rate_cache


def get_currency_service(
	registry: Annotated[CurrencyCodeRegistry, Depends(get_registry)],
	provider: Annotated[ExchangeRateProvider, Depends(get_provider)],
) -> CurrencyService:
	return CurrencyService(registry=registry, provider=provider)


def get_rate_service(
	cache: Annotated[RateCacheService, Depends(get_rate_cache)],
	currency_service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> RateService:
	return RateService(cache=cache, currency_service=currency_service)
