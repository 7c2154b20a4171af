"""
Shop Catalog API - Main Application Entry Point.

Serves shop and shop item pages, outbound click tracking, and stats.
"""
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from catalog.core.config import settings
from catalog.core.database import close_db, init_db
from catalog.core.logging import configure_logging, get_logger
from catalog.middleware import ErrorHandlerMiddleware, LoggerContextMiddleware
from catalog.routers import health_router, shops_router

# Configure logging before anything else
configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logger.info(
        "Starting application",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )

    await init_db()

    if settings.sentry_dsn:
        import sentry_sdk

        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
        )
        logger.info("Sentry initialized")

    yield

    logger.info("Shutting down application")
    await close_db()


def create_app() -> FastAPI:
    """
    Application factory function.
    Creates and configures the FastAPI application.
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Shop item catalog with outbound click tracking",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # Last added = outermost: request context must be bound before errors are logged
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(LoggerContextMiddleware)

    app.include_router(health_router)
    app.include_router(shops_router)

    logger.info("Application created", routes=len(app.routes))

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
