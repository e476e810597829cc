"""
Game Reviews Backend — FastAPI Application Factory
====================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn app.main:app).

Application Architecture:
    ┌───────────────────────────────────────────────────────┐
    │                     FastAPI App                       │
    │                                                       │
    │  Middleware Chain:                                    │
    │  ┌──────────┐ ┌────────────┐ ┌──────┐ ┌──────┐        │
    │  │  Req ID  │→│ Access log │→│ GZip │→│ CORS │        │
    │  └──────────┘ └────────────┘ └──────┘ └──────┘        │
    │                                                       │
    │  Routes (/api):                                       │
    │  categories │ reviews │ reviews/{id}/comments │       │
    │  comments/{id} │ users │ /health                      │
    │                                                       │
    │  Exception Handlers → {"msg": ...}:                   │
    │  RequestValidationError→400 │ ValidationError→400     │
    │  NotFoundError→404 │ unmatched path→404               │
    │  SQLAlchemyError→500 │ Exception→500                  │
    └───────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, log the bound address
    Shutdown: dispose the database engine (close all pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.config import settings
from app.database import dispose_engine
from app.exceptions import (
    BAD_REQUEST,
    INTERNAL_SERVER_ERROR,
    PATH_NOT_FOUND,
    GameReviewsError,
    NotFoundError,
    ValidationError,
)
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    request_id_var,
)
from app.routes import categories, comments, health, reviews, users

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # uvicorn's own access log duplicates game_reviews.access
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: set up logging.
    Shutdown: dispose the engine once; requests never close the pool.
    """
    setup_logging()
    logger.info("Game Reviews backend %s starting up...", __version__)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("Game Reviews backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_response(status_code: int, msg: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"msg": msg})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map every failure to `{"msg": ...}` with the right status code.

    Handler hierarchy:
        RequestValidationError   → 400 "Bad request" (malformed id or body)
        ValidationError          → 400 with its message
        NotFoundError            → 404 with its message
        GameReviewsError (base)  → its status_code with its message
        HTTPException 404/405    → 404 "Path not found"
        SQLAlchemyError          → 500 "Internal server error"
        Exception (fallback)     → 500 "Internal server error"

    Driver error text, SQL and stack traces are logged server-side only.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        """Path parameter not an integer, or a body of the wrong shape."""
        rid = request_id_var.get("")
        logger.warning("[%s] Request validation failed: %s", rid, exc.errors())
        return error_response(400, BAD_REQUEST)

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s | Context: %s", rid, exc.message, exc.context)
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(GameReviewsError)
    async def handle_app_error(request: Request, exc: GameReviewsError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """No route for this method+path. Other HTTP errors keep their detail."""
        if exc.status_code in (404, 405):
            return error_response(404, PATH_NOT_FOUND)
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(SQLAlchemyError)
    async def handle_database_error(request: Request, exc: SQLAlchemyError):
        rid = request_id_var.get("")
        logger.error(
            "[%s] Database error on %s %s: %s",
            rid,
            request.method,
            request.url.path,
            type(exc).__name__,
            exc_info=True,
        )
        return error_response(500, INTERNAL_SERVER_ERROR)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        # Sent by ServerErrorMiddleware, outside RequestIDMiddleware; the
        # ContextVar was set in a child task, request.state shares the scope
        rid = getattr(request.state, "request_id", "") or request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        response = error_response(500, INTERNAL_SERVER_ERROR)
        if rid:
            response.headers[REQUEST_ID_HEADER] = rid
        return response


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Middleware executes in REVERSE order of addition, so RequestID (added
    last) runs first and the access log already sees the request id.
    """
    app = FastAPI(
        title="Game Reviews API",
        description=(
            "Board-game review catalogue: categories, reviews, comments and users."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(categories.router)
    app.include_router(reviews.router)
    app.include_router(comments.router)
    app.include_router(users.router)
    app.include_router(health.router)

    return app


# uvicorn expects `app.main:app` to be importable
app = create_app()
