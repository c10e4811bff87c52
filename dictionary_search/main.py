"""Main FastAPI application for the dictionary search service."""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
import structlog

from .api import (
    words_router,
    health_router,
    metrics_router,
)
from .config import get_settings
from .core.errors import UpstreamUnavailableError
from .engine_instance import word_repository
from .models.response import ErrorResponse

settings = get_settings()

# Configure structured logging
logging.basicConfig(format="%(message)s", level=settings.log_level.upper())
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Dictionary Search service", version=settings.app_version)

    try:
        total_words = word_repository.load_file(settings.data_file)
        logger.info("Word corpus loaded", data_file=settings.data_file, total_words=total_words)
    except FileNotFoundError:
        logger.warning("Word corpus file not found, serving without data", data_file=settings.data_file)
    except Exception as e:
        logger.error("Failed to load word corpus", data_file=settings.data_file, error=str(e))
        raise

    yield

    # Shutdown
    logger.info("Shutting down Dictionary Search service")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Bilingual Igbo/English dictionary search engine",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Add middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log all HTTP requests."""
    start_time = time.time()

    logger.info(
        "Request started",
        method=request.method,
        url=str(request.url),
        client_ip=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent")
    )

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        "Request completed",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
        process_time_ms=round(process_time * 1000, 2)
    )

    return response


@app.exception_handler(UpstreamUnavailableError)
async def upstream_exception_handler(request: Request, exc: UpstreamUnavailableError) -> JSONResponse:
    """Report storage failures as service unavailable."""
    logger.error("Word storage unavailable", url=str(request.url), error=str(exc))

    return JSONResponse(
        status_code=503,
        content=ErrorResponse(
            error="Service Unavailable",
            message=str(exc)
        ).model_dump(mode="json")
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle global exceptions."""
    logger.error(
        "Unhandled exception",
        method=request.method,
        url=str(request.url),
        error=str(exc),
        exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal Server Error",
            message="An unexpected error occurred",
            details={"exception": str(exc)} if settings.debug else None
        ).model_dump(mode="json")
    )


# Include API routers
app.include_router(words_router)
app.include_router(health_router)
app.include_router(metrics_router)


# Root endpoint
@app.get("/", summary="Root endpoint", description="Get basic information about the API")
async def root() -> dict:
    """Root endpoint with basic API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Bilingual Igbo/English dictionary search engine",
        "docs_url": "/docs",
        "health_url": "/api/v1/health",
        "endpoints": {
            "words": "/api/v1/words?keyword=...&page=...&range=...&sort=...",
            "word": "/api/v1/words/{word_id}",
            "metrics": "/api/v1/metrics"
        },
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "dictionary_search.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower()
    )
