"""
FastAPI application entry point.
Assembles the app with routers, middleware, lifespan handlers, and exception handlers.
"""

from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from dependency_injector import providers
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from graybay.api.router import api_router
from graybay.core.config import settings
from graybay.core.exceptions import setup_exception_handlers
from graybay.core.logging import setup_logging, get_logger
from graybay.core.rate_limit import limiter
from graybay.db.session import Database
import graybay.deps.di_container as di_module

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    Builds the database handle unless one was injected, and disposes it on shutdown.
    """
    # Startup
    setup_logging()

    container = app.state.container
    owns_database = getattr(app.state, "database", None) is None
    if owns_database:
        app.state.database = container.database()
        if settings.AUTO_CREATE_TABLES:
            await app.state.database.create_all()
    logger.info("Application started", extra={"environment": settings.ENVIRONMENT})

    yield

    # Shutdown
    if owns_database:
        await app.state.database.dispose()
        app.state.database = None
        container.database.reset()


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        database: Pre-built database handle; the app builds one from settings when omitted
    """
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Operations dashboard API for a managed IT services business",
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Initialize dependency injection container
    container = di_module.build_container()
    if database is not None:
        container.database.override(providers.Object(database))
        app.state.database = database
    app.state.container = container
    di_module._container = container

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Include API router
    app.include_router(api_router, prefix=settings.API_PREFIX)

    # Add root-level health endpoint for convenience
    from graybay.api.endpoints.health import get_health
    from graybay.db.session import get_db
    from fastapi import Depends
    from sqlalchemy.ext.asyncio import AsyncSession

    @app.get("/health", response_model=None, include_in_schema=False)
    async def root_health(request: Request, db: AsyncSession = Depends(get_db)):
        """Root-level health check endpoint."""
        return await get_health(request, db)

    # Global exception handler
    setup_exception_handlers(app)

    return app


app = create_app()
