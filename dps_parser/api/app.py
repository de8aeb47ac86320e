"""
FastAPI application for combat log DPS parsing.

Serves the DPS parse/import endpoints and health checks.
"""

import logging
import time
from typing import Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config.settings import ApplicationSettings, get_settings
from .routers import dps

logger = logging.getLogger(__name__)


def _error_response(request: Request, status_code: int, message) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": status_code,
                "message": message,
                "timestamp": time.time(),
                "path": str(request.url.path),
                "method": request.method,
            }
        },
    )


def create_app(settings: Optional[ApplicationSettings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings (defaults to the environment settings)

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    settings.validate()
    show_docs = not settings.is_production()

    app = FastAPI(
        title="Guild DPS Parser API",
        description="""
        Combat log DPS parsing for guild raid tracking.

        ## Endpoints

        * **Parse**: `/api/v1/dps/parse` (file upload), `/api/v1/dps/parse-text` (pasted text)
        * **Import**: `/api/v1/dps/import` - Match a leaderboard against the guild roster
        * **Health Checks**: `/health`, `/api/v1/health`
        """,
        version=__version__,
        docs_url="/docs" if show_docs else None,
        redoc_url="/redoc" if show_docs else None,
        openapi_url="/openapi.json" if show_docs else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Custom HTTP exception handler with detailed error responses."""
        return _error_response(request, exc.status_code, exc.detail)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return _error_response(request, 500, "Internal server error")

    @app.get("/health", tags=["Health"])
    @app.get("/api/v1/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__, "timestamp": time.time()}

    app.state.settings = settings
    app.include_router(dps.router, tags=["DPS"])

    return app


def run_server(host: Optional[str] = None, port: Optional[int] = None, log_level: Optional[str] = None):
    """
    Run the API server.

    Args:
        host: Host to bind to (uses configuration if None)
        port: Port to bind to (uses configuration if None)
        log_level: Logging level (uses configuration if None)
    """
    settings = get_settings()
    settings.setup_logging()
    settings.log_configuration()

    host = host or settings.server.host
    port = port or settings.server.port
    log_level = log_level or settings.server.log_level

    logger.info(f"Starting DPS parser API on {host}:{port}")
    uvicorn.run(create_app(settings), host=host, port=port, log_level=log_level)
