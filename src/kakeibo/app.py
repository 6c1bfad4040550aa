from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from kakeibo.api.routes import budget, categorize, entries, pages
from kakeibo.core import settings
from kakeibo.logger import get_logger, setup_logging
from kakeibo.services.ledger import LedgerService
from kakeibo.storage import JsonFileStorage

logger = get_logger(__name__)


def create_app() -> FastAPI:
    setup_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Initializing ledger...")
        settings.log_environment()

        storage = JsonFileStorage(data_path=settings.get_storage_path())
        app.state.ledger = LedgerService(storage=storage)

        logger.info("Ledger ready (%s).", storage.data_path)
        yield
        logger.info("Service shutting down.")

    app = FastAPI(title="Kakeibo", lifespan=lifespan)

    app.include_router(entries.router)
    app.include_router(budget.router)
    app.include_router(categorize.router)
    app.include_router(pages.router)

    return app
