"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures exception handlers, routers, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from src.adapters.repository.memory import InMemoryZooRepository
from src.api.routes import animals_router, locomotion_modes_router
from src.config.logging import configure_logging
from src.config.settings import Settings, get_settings
from src.domain.ports import ZooRepository

logger = logging.getLogger(__name__)

ROOT_MESSAGE = "API Animales + Desplazamientos OK!"

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "animals",
        "description": "Animals and the locomotion modes they reference",
    },
    {
        "name": "locomotion-modes",
        "description": "Locomotion modes (category and speed in km/h)",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Configures logging from the app settings, then reports what the
    catalog starts with. State is discarded on shutdown.
    """
    configure_logging(app.state.settings.log_level)
    repository = app.state.repository
    logger.info("Starting application...")
    logger.info(
        "Catalog holds %d animal(s) and %d locomotion mode(s)",
        len(repository.list_animals()),
        len(repository.list_locomotion_modes()),
    )

    yield

    logger.info("Shutting down application...")


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Report malformed request bodies as 400 instead of FastAPI's default 422.

    The offending input is left out of each error: it may be a non-finite
    float, which cannot be encoded as JSON.
    """
    logger.debug("Rejected malformed request to %s", request.url.path)
    errors = [
        {key: value for key, value in error.items() if key != "input"} for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(errors)},
    )


def create_app(
    settings: Settings | None = None,
    repository: ZooRepository | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Application settings; defaults to get_settings()
        repository: Repository to serve; defaults to a new in-memory one,
            seeded unless settings.seed_data is False

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    if repository is None:
        repository = (
            InMemoryZooRepository.seeded() if settings.seed_data else InMemoryZooRepository()
        )

    app = FastAPI(
        title="zoo-api",
        description="Animals + Locomotion Modes API - In-memory catalog of animals and how they move",
        version="0.1.0",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )

    # Store settings and repository in app state for lifespan and dependency injection
    app.state.settings = settings
    app.state.repository = repository

    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(animals_router)
    app.include_router(locomotion_modes_router)

    @app.get("/", response_class=PlainTextResponse, summary="Service banner")
    async def root() -> str:
        return ROOT_MESSAGE

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


def run() -> None:
    """Serve the module-level app with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
