"""
Notes Frontend - FastAPI Application Factory
=============================================

What:  Creates and configures the FastAPI application that hosts the notes view.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn notes_frontend.main:app) and by tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────┐ ┌──────┐              │
    │  │  Req ID  │→│  Logging    │→│ GZip │              │
    │  └──────────┘ └─────────────┘ └──────┘              │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────┐ ┌────────────┐ ┌───────┐ ┌─────────┐  │
    │  │  GET /   │ │ POST /add  │ │/draft │ │ /health │  │
    │  └──────────┘ └────────────┘ └───────┘ └─────────┘  │
    │                                                     │
    │  app.state:                                         │
    │    notes_api (HttpNotesAPI) ← view (NotesView)      │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Validate configuration (errors are logged, not fatal)
    3. Create the shared httpx client and Notes API client
    4. Create the view and activate it (initial fetch runs in the background)

    Shutdown:
    1. Tear the view down (late responses are discarded)
    2. Close the httpx client
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from notes_frontend import __version__
from notes_frontend.config import settings
from notes_frontend.exceptions import NotesFrontendError, ValidationError
from notes_frontend.middleware.logging import RequestLoggingMiddleware
from notes_frontend.middleware.request_id import RequestIDMiddleware, request_id_var
from notes_frontend.routes import health, view
from notes_frontend.services.api_base import NotesAPI
from notes_frontend.services.error_reporter import ErrorReporter
from notes_frontend.services.notes_api import HttpNotesAPI, build_http_client
from notes_frontend.view.notes_view import NotesView

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout (captured by the container runtime).

    The diagnostic channel for failed Notes API calls is the
    `notes_frontend.diagnostics` logger; it inherits this configuration.
    """
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifecycle: build the view on startup, tear it down on shutdown.

    If create_app() was given a NotesAPI, it is used as-is and not closed
    here; otherwise an HttpNotesAPI over a fresh httpx.AsyncClient is built
    and that client is closed on shutdown.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Notes Frontend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))
        logger.error("Fix the configuration and restart the server.")

    http_client = None
    if app.state.notes_api is None:
        http_client = build_http_client()
        app.state.notes_api = HttpNotesAPI(http_client)
        logger.info("Notes API: %s%s", settings.notes_api_url, settings.notes_endpoint)

    notes_view = NotesView(app.state.notes_api, reporter=app.state.error_reporter)
    app.state.view = notes_view
    notes_view.activate()

    logger.info("Server ready at http://%s:%d", settings.frontend_host, settings.frontend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Notes Frontend shutting down...")
    notes_view.teardown()

    if http_client is not None:
        await http_client.aclose()
        app.state.notes_api = None

    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError     → 400 Bad Request
        NotesFrontendError  → 500 Internal Server Error
        Exception           → 500 Internal Server Error (details only in the log)
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(NotesFrontendError)
    async def handle_frontend_error(request: Request, exc: NotesFrontendError):
        rid = request_id_var.get("")
        logger.error("[%s] Frontend error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    notes_api: Optional[NotesAPI] = None,
    error_reporter: Optional[ErrorReporter] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        notes_api:      Use this NotesAPI instead of building an HttpNotesAPI
                        from settings at startup.
        error_reporter: Where the view reports failed remote calls
                        (default: LoggingErrorReporter).
    """
    app = FastAPI(
        title="Notes Frontend",
        description="Lists notes from the Notes API and submits new ones.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.notes_api = notes_api
    app.state.error_reporter = error_reporter

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(view.router)
    app.include_router(health.router)

    return app


app = create_app()
