"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security and request logging middleware, rate limiting
- Logging configuration
- The appeal store, built once at startup and disposed on shutdown

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from appeal_tracker.core.config import settings
from appeal_tracker.infrastructure.appeals.appeal_repository import (
    SqlAlchemyAppealRepository,
)
from appeal_tracker.infrastructure.appeals.database import create_db_engine
from appeal_tracker.interfaces.appeals.router import router as appeals_router
from appeal_tracker.interfaces.health import router as health_router
from appeal_tracker.shared.errors.handlers import register_error_handlers
from appeal_tracker.shared.logging import configure_logging
from appeal_tracker.shared.request_logging import RequestLoggingMiddleware
from appeal_tracker.shared.security.headers import SecurityHeadersMiddleware
from appeal_tracker.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open the appeal store, close it on shutdown."""
    engine = create_db_engine(settings.database_url, echo=settings.database_echo)
    repository = SqlAlchemyAppealRepository(engine)
    repository.init_schema()
    app.state.appeal_repository = repository
    logger.info("%s %s started", settings.project_name, settings.version)

    yield

    logger.info("Shutting down, closing database connections")
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Middleware ---
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(appeals_router, prefix="/api/v1")

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    uvicorn.run(
        "appeal_tracker.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
