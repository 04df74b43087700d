"""
FastAPI application factory and configuration
"""

import time
import uuid
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from stockscope.core.config import StockScopeSettings, get_settings
from stockscope.core.exceptions import ErrorCode, IngestionError, StockScopeError, format_error_response
from stockscope.core.logging import configure_logging
from stockscope.core.services import AnalysisSession, InsightClient
from stockscope.web.models import ErrorResponse
from stockscope.web.routes import health_router, series_router


def create_app(
    session: AnalysisSession | None = None,
    settings: StockScopeSettings | None = None,
) -> FastAPI:
    """Create the FastAPI application instance."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        resolved = settings or get_settings()
        log_file = resolved.logging.file_path
        configure_logging(
            resolved.logging.level,
            file_output=log_file is not None,
            file_path=str(log_file) if log_file else None,
        )
        app.state.settings = resolved
        app.state.session = session or AnalysisSession(insight_client=InsightClient.from_settings(resolved))
        app.state.start_time = time.time()
        logger.info("stockscope web service started")
        yield
        logger.info("stockscope web service stopped")

    app = FastAPI(
        title="stockscope",
        description="Upload a stock price CSV and explore its windowed series, statistics and AI insights",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    _setup_middleware(app)
    _setup_routes(app)
    _setup_exception_handlers(app)

    return app


def _setup_middleware(app: FastAPI) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)


def _setup_routes(app: FastAPI) -> None:
    app.include_router(series_router, prefix="/api/v1", tags=["series"])
    app.include_router(health_router, prefix="/api/v1", tags=["health"])


def _error_response(
    status_code: int,
    error: str,
    error_code: ErrorCode | str,
    message: str | None = None,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    payload = format_error_response(error_code, message, **(details or {}))["error"]
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error=error,
            code=payload["code"],
            message=payload["message"],
            details=payload["details"] or None,
            request_id=str(uuid.uuid4()),
        ).model_dump(mode="json"),
    )


def _setup_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(IngestionError)
    async def ingestion_exception_handler(request: Request, exc: IngestionError) -> JSONResponse:
        """Rejected uploads: the stored series is left untouched."""
        return _error_response(422, exc.__class__.__name__, exc.error_code, exc.message, exc.details)

    @app.exception_handler(StockScopeError)
    async def stockscope_exception_handler(request: Request, exc: StockScopeError) -> JSONResponse:
        return _error_response(400, exc.__class__.__name__, exc.error_code, exc.message, exc.details)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return _error_response(
            exc.status_code, "HTTPException", ErrorCode.GENERAL_ERROR, str(exc.detail), {"status_code": exc.status_code}
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error")
        return _error_response(500, "InternalServerError", ErrorCode.INTERNAL_ERROR, details={"type": type(exc).__name__})
