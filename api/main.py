"""FastAPI application factory and main entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from api.config import get_settings
from api.exceptions import analysis_error_response, error_response_for
from api.logging import setup_logging
from api.routers.health import API_VERSION
from inspector.errors import InspectorError

# Initialize logging
setup_logging()
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown events."""
    settings = get_settings()
    logger.info(
        "Starting SEO Inspector API",
        env=settings.env,
        debug=settings.debug,
        render_enabled=settings.render_enabled,
        version=API_VERSION,
    )

    # Browsers are launched per analysis; nothing to warm up

    yield

    logger.info("Shutting down SEO Inspector API")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="SEO Inspector",
        description="Crawler-visible content and SEO signal diagnostics",
        version=API_VERSION,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )

    # Middleware (order matters - first added = last executed)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.metrics import MetricsMiddleware
    from api.middleware import AccessLogMiddleware, RequestContextMiddleware

    app.add_middleware(MetricsMiddleware)
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestContextMiddleware)

    register_exception_handlers(app)

    from api.routers import analyze, health

    app.include_router(health.router)
    app.include_router(analyze.router, prefix="/api")

    return app


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers."""

    @app.exception_handler(InspectorError)
    async def inspector_error_handler(request: Request, exc: InspectorError) -> ORJSONResponse:
        """Handle inspection errors raised outside the analyze route."""
        logger.warning(
            "Application error",
            error_code=exc.code,
            message=exc.message,
            path=request.url.path,
        )
        return error_response_for(exc)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
        """Handle unhandled exceptions."""
        logger.error(
            "Unhandled exception",
            exc_info=exc,
            path=request.url.path,
            method=request.method,
        )
        return analysis_error_response(str(exc))


app = create_app()
