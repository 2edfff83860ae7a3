"""
NexParcel Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       bound to one explicitly constructed Database handle.
Who:   uvicorn (`uvicorn nexparcel.main:app`) and the test suite.
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                    FastAPI App                       │
    │                                                      │
    │  Middleware Chain:                                   │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐   │
    │  │  Rate Limit  │→│ Req ID   │→│  Access Log     │   │
    │  └──────────────┘ └──────────┘ └─────────────────┘   │
    │                                                      │
    │  Authorization: enforce_policy (ROUTE_POLICY table)  │
    │                                                      │
    │  Routes: users · bookings · reviews · statistics ·   │
    │          payments · /jwt · / · /health               │
    │                                                      │
    │  Exception Handlers:                                 │
    │  401 · 403 · 400 · 404 · 409 · 502 · 500             │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging → configuration check → ready
    Shutdown: dispose database engine (close pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from nexparcel import __version__
from nexparcel.config import settings
from nexparcel.database import Database
from nexparcel.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DatabaseError,
    NexParcelError,
    NotFoundError,
    PaymentProviderError,
    ValidationError,
)
from nexparcel.middleware.logging import RequestLoggingMiddleware
from nexparcel.middleware.rate_limit import RateLimitMiddleware
from nexparcel.middleware.request_id import RequestIDMiddleware, request_id_var
from nexparcel.routes import auth, bookings, health, payments, reviews, statistics, users

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

    # Third-party libraries that log every operation at INFO/DEBUG
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("stripe").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and report missing configuration.
    Shutdown: close the database pool.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("NexParcel Backend starting up...")

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving: public routes and /health still work
        logger.error("Configuration error: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("NexParcel Backend shutting down...")
    await app.state.database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(
    status_code: int,
    error: str,
    message: str,
    details: Optional[dict] = None,
) -> JSONResponse:
    content = {"error": error, "message": message, "request_id": request_id_var.get("")}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and response bodies.

    Handler hierarchy:
        AuthenticationError     → 401 Unauthorized
        AuthorizationError      → 403 Forbidden
        ValidationError         → 400 Bad Request
        NotFoundError           → 404 Not Found
        ConflictError           → 409 Conflict
        (429 is answered by RateLimitMiddleware before routing)
        PaymentProviderError    → 502 Bad Gateway
        DatabaseError           → 500 Internal Server Error
        NexParcelError (base)   → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    5xx handlers never expose context; it is logged server-side.
    """

    @app.exception_handler(AuthenticationError)
    async def handle_unauthenticated(request: Request, exc: AuthenticationError):
        return _error_response(401, "unauthorized", exc.message)

    @app.exception_handler(AuthorizationError)
    async def handle_forbidden(request: Request, exc: AuthorizationError):
        return _error_response(403, "forbidden", exc.message)

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error_response(400, "validation_error", exc.message, details=exc.context)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, "not_found", exc.message)

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        logger.warning("[%s] Conflict: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return _error_response(409, "conflict", exc.message)

    @app.exception_handler(PaymentProviderError)
    async def handle_payment_error(request: Request, exc: PaymentProviderError):
        logger.error("[%s] Payment provider error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return _error_response(502, "payment_provider_error", exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error("[%s] Database error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return _error_response(
            500,
            "server_error",
            "An internal error occurred. Please try again later.",
        )

    @app.exception_handler(NexParcelError)
    async def handle_app_error(request: Request, exc: NexParcelError):
        logger.error("[%s] Application error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return _error_response(500, "server_error", exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return _error_response(
            500,
            "internal_server_error",
            "An unexpected error occurred. Please try again or contact support.",
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        database: Store handle to serve from. Defaults to one built from
                  DATABASE_URL; tests pass an in-memory SQLite handle.

    Returns:
        Fully configured FastAPI instance.
    """
    app = FastAPI(
        title="NexParcel API",
        description=(
            "Parcel-delivery booking backend: accounts, bookings, reviews, "
            "delivery-men assignment, statistics and card payments."
        ),
        version=__version__,
        lifespan=lifespan,
    )
    app.state.database = database or Database()

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RateLimit → RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Retry-After"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(RateLimitMiddleware)

    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(bookings.router)
    app.include_router(reviews.router)
    app.include_router(statistics.router)
    app.include_router(payments.router)

    return app


# uvicorn expects `nexparcel.main:app` to be importable
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.backend_host, port=settings.backend_port)
