"""FastAPI application setup."""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from transaction_insights.api.controller import get_transaction_service, transactions_router
from transaction_insights.clients import ProductSourceClient, ProductSourceError
from transaction_insights.config import AppConfig, get_config
from transaction_insights.services import (
    ProductSeeder,
    TransactionService,
    initialize_database,
)

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[AppConfig] = None,
    source_client: Optional[ProductSourceClient] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The database is opened and seeded in the lifespan, before the first
    request is served. A store that cannot be initialised aborts startup;
    a failed seed, from the fetch or the insert, is logged and the service
    starts with whatever the table already holds.

    Args:
        config: Application configuration. Defaults to get_config().
        source_client: Dataset client for seeding. Built from config.seed
            when omitted.
    """
    config = config or get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        sqlite_client = initialize_database(config.database.path)
        app.state.sqlite_client = sqlite_client
        app.state.transaction_service = TransactionService(sqlite_client)

        try:
            if config.seed.enabled:
                seeder = ProductSeeder(
                    sqlite_client,
                    source_client
                    or ProductSourceClient(config.seed.source_url, config.seed.timeout_seconds),
                )
                try:
                    await asyncio.to_thread(seeder.seed)
                except ProductSourceError as e:
                    logger.error(f"Error fetching product data: {e}")
                except Exception as e:
                    logger.exception(f"Error inserting product data: {e}")
            else:
                logger.info("Seeding disabled, serving existing data")

            yield
        finally:
            sqlite_client.close()
            logger.info("Database connection closed")

    app = FastAPI(
        title=config.api.title,
        description="Paginated search and monthly analytics over product transactions",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(transactions_router)

    @app.get("/health")
    def health_check(service: TransactionService = Depends(get_transaction_service)) -> dict:
        """Health check endpoint."""
        return {"status": "healthy", "records": service.count_records()}

    return app


def __getattr__(name: str):
    # `app` is built on first access so importing create_app never loads config
    if name == "app":
        application = create_app()
        globals()["app"] = application
        return application
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["app", "create_app"]
