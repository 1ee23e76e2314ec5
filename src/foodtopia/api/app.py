"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from foodtopia.api.routes import router
from foodtopia.app_logging import configure_logging
from foodtopia.containers import AppContainer
from foodtopia.domain.errors import (
    InvalidMetricError,
    InvalidWorkoutDetailsError,
    UsernameTakenError,
)
from foodtopia.services.seed import seed_sample_data


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        if state_container.settings.seed_sample_data:
            seed_sample_data(state_container)
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.include_router(router)

    @app.exception_handler(InvalidMetricError)
    async def invalid_metric(request: Request, exc: InvalidMetricError) -> JSONResponse:
        logger.warning("Rejected metric %s=%r", exc.field, exc.value)
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "field": exc.field},
        )

    @app.exception_handler(InvalidWorkoutDetailsError)
    async def invalid_details(
        request: Request, exc: InvalidWorkoutDetailsError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.exception_handler(UsernameTakenError)
    async def username_taken(request: Request, exc: UsernameTakenError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
