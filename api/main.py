import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies import cleanup_dependencies, init_dependencies, start_bootstrap
from api.error_handlers import register_exception_handlers
from api.routes import home, rates
from config.logging import setup_logging
from config.settings import get_settings

settings = get_settings()
setup_logging(level=settings.LOG_LEVEL, log_directory=settings.LOG_DIRECTORY)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
	logger.info('Starting Exchange Rates API...')

	init_dependencies()
	start_bootstrap()

	logger.info('Application ready')

	yield

	logger.info('Shutting down...')
	await cleanup_dependencies()


app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)

app.add_middleware(
	CORSMiddleware,
	allow_origins=['*'],
	allow_methods=['*'],
	allow_headers=['*'],
)

app.include_router(home.router)
app.include_router(rates.router)
register_exception_handlers(app)


if __name__ == '__main__':
	import uvicorn

	logger.info(f'Server is running on port {settings.PORT}')
	uvicorn.run('api.main:app', host=settings.HOST, port=settings.PORT, log_level='info')
