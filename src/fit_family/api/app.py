"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from fit_family.api.auth import router as auth_router
from fit_family.api.dashboard import router as dashboard_router
from fit_family.api.errors import register_exception_handlers
from fit_family.api.families import router as families_router
from fit_family.api.food_logs import router as food_logs_router
from fit_family.api.foods import router as foods_router
from fit_family.app_logging import configure_logging
from fit_family.containers import AppContainer

APPLICATION_NAME = "FitFamily Backend"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if app.state.container.settings.seed_catalog:
            try:
                app.state.container.catalog_service.seed()
            except Exception:
                logger.exception("Failed to seed the food catalog")
        yield

    app = FastAPI(title=APPLICATION_NAME, lifespan=lifespan)
    app.state.container = container

    register_exception_handlers(app)
    app.include_router(auth_router)
    app.include_router(families_router)
    app.include_router(foods_router)
    app.include_router(food_logs_router)
    app.include_router(dashboard_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {
            "status": "UP",
            "application": APPLICATION_NAME,
            "message": "Application is running",
        }

    return app
