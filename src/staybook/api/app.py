"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from staybook.api.auth import router as auth_router
from staybook.api.bookings import router as bookings_router
from staybook.api.places import router as places_router
from staybook.api.uploads import router as uploads_router
from staybook.app_logging import configure_logging
from staybook.config import parse_cors_origins
from staybook.containers import AppContainer
from staybook.errors import (
    EmailTakenError,
    ForbiddenError,
    IncorrectPasswordError,
    NotFoundError,
    StaybookError,
    UnauthenticatedError,
    ValidationError,
)

# Checked in order; subclasses come before their bases.
_STATUS_BY_ERROR: list[tuple[type[StaybookError], int]] = [
    (IncorrectPasswordError, 422),
    (UnauthenticatedError, 401),
    (ForbiddenError, 403),
    (NotFoundError, 404),
    (EmailTakenError, 409),
    (ValidationError, 422),
]


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StaybookError)
    async def handle_staybook_error(
        request: Request, exc: StaybookError
    ) -> JSONResponse:
        status_code = error_status(exc)
        if status_code >= 500:
            logger.error(
                "Request failed: %s %s", request.method, request.url.path, exc_info=exc
            )
            # Class-level message only; instance messages may carry internals.
            return JSONResponse(
                status_code=status_code, content={"detail": exc.default_message}
            )
        return JSONResponse(status_code=status_code, content={"detail": exc.message})

    app.include_router(auth_router)
    app.include_router(places_router)
    app.include_router(bookings_router)
    app.include_router(uploads_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/test")
    async def smoke_test() -> str:
        """Smoke-test route kept for existing clients."""
        logger.info("Received POST request on /test")
        return "Success!"

    uploads_dir = Path(container.settings.uploads_dir)
    uploads_dir.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=uploads_dir), name="uploads")

    return app


def error_status(exc: StaybookError) -> int:
    """Return the HTTP status code for an application error."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return 500
