"""FastAPI application factory and main entrypoint."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse, PlainTextResponse

from api.config import Settings, get_settings
from api.exceptions import AIVisibilityError
from api.logging import setup_logging
from api.middleware import (
    AIBotDetectionMiddleware,
    AIResponseOptimizationMiddleware,
    LoggingMiddleware,
    RequestIDMiddleware,
)
from api.routers import health, v1
from visibility import __version__
from visibility.crawlers.detector import AIBotDetector
from visibility.generators.robots import RobotsGenerator

setup_logging()
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings = get_settings()
    logger.info(
        "api_starting",
        env=settings.env,
        version=__version__,
        bot_detection=settings.bot_detection_enabled,
        optimize_bot_responses=settings.optimize_bot_responses,
    )
    yield
    logger.info("api_stopped")


def error_response(
    status_code: int, code: str, message: str, **extra: Any
) -> ORJSONResponse:
    """JSON error envelope shared by every handler."""
    error = {"code": code, "message": message}
    error.update({key: value for key, value in extra.items() if value})
    return ORJSONResponse(status_code=status_code, content={"error": error})


def add_middleware(app: FastAPI, settings: Settings) -> None:
    """Install middleware. The last one added runs first on a request."""
    if settings.bot_detection_enabled:
        # Optimization reads request.state set by detection, so it sits inside it
        if settings.optimize_bot_responses:
            app.add_middleware(AIResponseOptimizationMiddleware)
        app.add_middleware(
            AIBotDetectionMiddleware,
            detector=AIBotDetector(
                additional_bots=settings.additional_bots,
                ignore_bots=settings.ignore_bots,
            ),
            verbose=settings.bot_detection_verbose,
        )

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AIVisibilityError)
    async def app_error_handler(request: Request, exc: AIVisibilityError) -> ORJSONResponse:
        logger.warning(
            "request_rejected",
            error_code=exc.code,
            message=exc.message,
            path=request.url.path,
        )
        return error_response(exc.status_code, exc.code, exc.message, details=exc.details)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> ORJSONResponse:
        errors = exc.errors()
        first = errors[0] if errors else {}
        # Drop the leading "body"/"query" location segment
        field = ".".join(str(part) for part in first.get("loc", ())[1:])

        logger.warning("request_invalid", path=request.url.path, errors=len(errors))
        return error_response(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            "validation_error",
            first.get("msg", "Validation error"),
            field=field,
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> ORJSONResponse:
        logger.error(
            "request_failed",
            exc_info=exc,
            method=request.method,
            path=request.url.path,
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "internal_error",
            "An unexpected error occurred",
        )


def create_app() -> FastAPI:
    """Build the API: /api status routes, /v1 analysis and generators, /robots.txt."""
    settings = get_settings()

    app = FastAPI(
        title="AI Visibility API",
        description="Score pages for AI readability and manage AI crawler access",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )

    add_middleware(app, settings)
    register_exception_handlers(app)

    app.include_router(health.router, prefix="/api")
    app.include_router(v1.router, prefix="/v1")

    robots_txt = RobotsGenerator.allow_all(sitemap_url=settings.sitemap_url)

    @app.get("/robots.txt", response_class=PlainTextResponse, include_in_schema=False)
    async def serve_robots_txt() -> str:
        return robots_txt

    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("api.main:app", host=settings.api_host, port=settings.api_port)
