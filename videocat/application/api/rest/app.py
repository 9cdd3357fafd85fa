import logging
from contextlib import asynccontextmanager

import logfire
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from videocat.application.api.v1.errors import map_error, map_request_validation_error
from videocat.application.api.v1.routes import health, testing, videos
from videocat.application.di import create_container
from videocat.config import Config, configure_logging
from videocat.domain.shared.error import VideoCatError
from videocat.domain.video.port.repository import VideoRepository
from videocat.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.dishka_container

    # Build the store up front so the first request does not pay for it
    repo = await container.get(VideoRepository)
    logger.info("Video store ready (%d videos)", await repo.count())

    yield

    await container.close()


def create_app(config: Config | None = None) -> FastAPI:
    """Create FastAPI application."""
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()

    # Configure logging early
    configure_logging(config.logging)
    logger.info("Starting videocat server: %s v%s", config.server.name, config.server.version)

    logfire.configure(
        service_name=config.logfire.service_name,
        service_version=config.server.version,
        send_to_logfire=config.logfire.send_to_logfire,
        console=False,
    )

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    logfire.instrument_fastapi(app_instance)

    # Setup dependency injection; the container owns the video store
    container = create_container(config)
    setup_dishka(container, app_instance)

    # Route table
    app_instance.include_router(health.router)
    app_instance.include_router(videos.router, prefix=config.paths.videos)
    for path in config.paths.testing:
        app_instance.include_router(testing.router, prefix=path)

    # Global videocat error handler - maps domain errors to HTTP responses
    @app_instance.exception_handler(VideoCatError)
    async def videocat_error_handler(request: Request, exc: VideoCatError):
        http_exc = map_error(exc)
        return JSONResponse(
            status_code=http_exc.status_code,
            content=http_exc.detail,
        )

    # Unparseable request bodies use the same error body shape as domain errors
    @app_instance.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        http_exc = map_request_validation_error(exc)
        return JSONResponse(
            status_code=http_exc.status_code,
            content=http_exc.detail,
        )

    # Global exception handler - logs all unhandled exceptions
    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    return app_instance


# Create app instance for uvicorn
app = create_app()
