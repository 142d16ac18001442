"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (CORS, headers, rate limiting)
- Logging configuration
- Process-scoped resources (database engine, asset storage)

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.core.config import settings
from app.infrastructure.database import build_engine, ping
from app.infrastructure.showcase.imagekit_storage import ImageKitAssetStorage
from app.interfaces.admin.router import router as admin_router
from app.interfaces.health import router as health_router
from app.interfaces.showcase.categories_router import router as categories_router
from app.interfaces.showcase.portfolios_router import router as portfolios_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open the connection pool and asset storage, then close them."""
    engine = build_engine(
        settings.get_database_url(),
        pool_size=settings.db_pool_size,
        echo=settings.db_echo,
    )
    try:
        await ping(engine)
    except Exception:
        logger.exception("Database is unreachable; refusing to start")
        await engine.dispose()
        raise
    logger.info("Database connected")

    if not settings.imagekit_private_key:
        logger.warning("IMAGEKIT_PRIVATE_KEY is not set; image uploads will fail")

    app.state.engine = engine
    app.state.asset_storage = ImageKitAssetStorage(
        private_key=settings.imagekit_private_key,
        upload_url=settings.imagekit_upload_url,
        api_url=settings.imagekit_api_url,
        timeout=settings.asset_timeout_seconds,
    )

    yield

    await engine.dispose()
    logger.info("Database pool closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level, sql_echo=settings.db_echo)

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
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Authorization", "Content-Type"],
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(admin_router, prefix=settings.api_prefix)
    app.include_router(categories_router, prefix=settings.api_prefix)
    app.include_router(portfolios_router, prefix=settings.api_prefix)

    return app


app = create_app()
