"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, posts, users)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, CORS, rate limiting)
- Logging configuration
- Database schema creation on startup

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from postboard.core.config import settings
from postboard.infrastructure.database import init_schema
from postboard.interfaces.dependencies import get_engine
from postboard.interfaces.health import router as health_router
from postboard.interfaces.posts.router import router as posts_router
from postboard.interfaces.users.router import router as users_router
from postboard.shared.errors.handlers import register_error_handlers
from postboard.shared.logging import configure_logging
from postboard.shared.security.headers import SecurityHeadersMiddleware
from postboard.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: make sure the tables exist before serving."""
    engine = app.dependency_overrides.get(get_engine, get_engine)()
    init_schema(engine)
    logger.info("Database schema ready")
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level, sql_echo=settings.sql_echo)

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
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["Authorization", "Content-Type"],
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(posts_router)
    app.include_router(users_router)

    return app


app = create_app()
