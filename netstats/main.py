"""
Application entry point.

Creates the FastAPI application and wires together:
- Document store lifecycle (opened on startup, closed on shutdown)
- Routers
- Error handlers (centralized failure-to-HTTP mapping)
- Security (headers middleware, rate limit handler)
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from netstats.core.config import settings
from netstats.infrastructure.hosts.document_store import DocumentStore
from netstats.interfaces.health import router as health_router
from netstats.interfaces.hosts.router import router as hosts_router
from netstats.shared.errors.handlers import register_error_handlers
from netstats.shared.logging import configure_logging
from netstats.shared.security.headers import SecurityHeadersMiddleware
from netstats.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open and close the document store pool."""
    store = DocumentStore.from_settings(settings)
    app.state.document_store = store
    logger.info("%s %s started", settings.project_name, settings.version)

    yield

    await store.close()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
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

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(hosts_router)

    return app


app = create_app()
