"""FastAPI application factory.

``create_app()`` builds everything from settings, logging included; tests
pass their own storage context and games client instead.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from mythic.domain.model.event import EventKind
from mythic.infrastructure.api.errors import install_error_handlers
from mythic.infrastructure.api.routers import games, orders, products, users
from mythic.infrastructure.api.routers.analytics import build_event_router
from mythic.infrastructure.config import Settings, get_settings
from mythic.infrastructure.external.f2p_client import FreeToGameClient
from mythic.infrastructure.logging_setup import configure_logging
from mythic.infrastructure.persistence.database import StorageContext

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[StorageContext] = None,
    f2p_client: Optional[FreeToGameClient] = None,
) -> FastAPI:
    settings = settings or get_settings()
    owns_storage = storage is None
    if storage is None:
        configure_logging(settings.LOG_LEVEL)
        storage = StorageContext.from_url(
            settings.SQLALCHEMY_DATABASE_URI, settings.STATEMENT_TIMEOUT_MS
        )
    if f2p_client is None:
        f2p_client = FreeToGameClient(settings.F2P_API_BASE, settings.F2P_TIMEOUT_SECONDS)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.CREATE_TABLES:
            app.state.storage.init_db()
        logger.info("%s ready", settings.PROJECT_NAME)
        yield
        app.state.f2p_client.close()
        if owns_storage:
            app.state.storage.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="REST API for the products, users and orders of a video game shop",
        lifespan=lifespan,
    )
    app.state.storage = storage
    app.state.f2p_client = f2p_client
    install_error_handlers(app)

    app.include_router(products.router, prefix="/products", tags=["Products"])
    app.include_router(products.categories_router, prefix="/categories", tags=["Categories"])
    app.include_router(users.router, prefix="/users", tags=["Users"])
    app.include_router(orders.router, prefix="/orders", tags=["Orders"])
    app.include_router(games.router, prefix="/f2p-games", tags=["FreeToPlay Games"])
    for kind in EventKind:
        app.include_router(build_event_router(kind), prefix=f"/{kind.value}s", tags=["Analytics"])

    @app.get("/")
    def root() -> dict:
        """Health check."""
        return {"status": "online", "name": settings.PROJECT_NAME}

    return app
