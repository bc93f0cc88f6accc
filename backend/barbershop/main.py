"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from barbershop.application.services import BarberStore
from barbershop.config import get_settings
from barbershop.infrastructure.database import Base, async_session_factory, engine
from barbershop.infrastructure.database.repositories import SQLAlchemyCollectionStorage
from barbershop.infrastructure.database.session import ensure_sqlite_directory
from barbershop.infrastructure.logging.log_config import setup_logging
from barbershop.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — create tables, then build and hydrate the store."""
    settings = get_settings()
    setup_logging()

    # 1. Create the key-value table (and the SQLite directory if needed)
    ensure_sqlite_directory(settings.database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # 2. Build the store owned by this application and load its collections
    store = BarberStore(SQLAlchemyCollectionStorage(async_session_factory))
    await store.load()
    app.state.store = store
    logger.info(
        "Store ready: %d clients, %d services, %d appointments, %d payments",
        len(store.clients),
        len(store.services),
        len(store.appointments),
        len(store.payments),
    )

    yield

    # Shutdown
    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "barbershop.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
