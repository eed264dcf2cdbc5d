"""
FastAPI application factory.
"""

import time
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from calendar_parser import __version__
from calendar_parser.api.dependencies import cleanup_dependencies
from calendar_parser.api.routes import health, parse
from calendar_parser.config.settings import get_settings
from calendar_parser.observability.logging import bind_context, clear_context

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings = get_settings()
    logger.info(
        "Calendar parser API starting up",
        model=settings.openai_model,
        openai_configured=settings.openai_configured,
    )
    if not settings.openai_configured:
        logger.warning("OPENAI_API_KEY is not set; /api/parse will return 500 until it is")

    yield

    logger.info("Calendar parser API shutting down")
    await cleanup_dependencies()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()

    openapi_tags = [
        {"name": "health", "description": "Liveness probe"},
        {"name": "parse", "description": "Calendar event extraction from text and images"},
    ]

    app = FastAPI(
        title="Calendar Parser API",
        description="""
Turns free text and images into calendar events with one schema-constrained
Responses API call.

## Endpoints

- **POST /api/parse**: multipart form with optional `text` and repeated `images`
- **GET /api/health**: liveness probe
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=openapi_tags,
    )

    # CORS (origins from CORS_ORIGINS env var, comma-separated)
    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # Request logging and correlation ID middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = (
            request.headers.get("X-Request-ID")
            or request.headers.get("X-Correlation-ID")
            or str(uuid.uuid4())
        )

        bind_context(request_id=request_id)

        start_time = time.perf_counter()

        try:
            response = await call_next(request)
            duration = time.perf_counter() - start_time

            response.headers["X-Request-ID"] = request_id

            logger.info(
                "HTTP request",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round(duration * 1000, 2),
            )
            return response
        finally:
            clear_context()

    # Exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Server error", "details": str(exc)},
        )

    # Include routers
    app.include_router(health.router, tags=["health"])
    app.include_router(parse.router, tags=["parse"])

    # Static frontend, mounted last so API routes take precedence
    if settings.static_dir:
        static_path = Path(settings.static_dir)
        if static_path.is_dir():
            app.mount("/", StaticFiles(directory=static_path, html=True), name="static")
            logger.info("Serving static frontend", directory=str(static_path))
        else:
            logger.warning("STATIC_DIR does not exist; not mounting", directory=str(static_path))

    return app
