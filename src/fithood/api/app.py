"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from fithood.api.analytics import router as analytics_router
from fithood.api.entries import foods_router, weights_router, workouts_router
from fithood.app_logging import configure_logging
from fithood.containers import AppContainer
from fithood.domain.errors import StoreError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title=container.settings.app_name, lifespan=lifespan)
    app.state.container = container

    app.include_router(foods_router)
    app.include_router(workouts_router)
    app.include_router(weights_router)
    app.include_router(analytics_router)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        logger.error("Entry store failure on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "Storage unavailable, please retry."},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
