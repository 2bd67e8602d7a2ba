"""
Main Application Entry Point

FastAPI application factory, router registration and server entry point.
"""

import logging

import uvicorn
from fastapi import FastAPI
from hostcrawl.api.routes import health, crawl, urls, worker, stats
from hostcrawl.api.routes.health import root_router as health_root_router
from hostcrawl.core.events import lifespan
from hostcrawl.core.config import settings


def create_app() -> FastAPI:
    """
    FastAPI application factory

    Creates and configures the FastAPI application with all routers.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Same-host web crawler service",
        lifespan=lifespan,
    )

    # Root-level health endpoints (Kubernetes probes)
    app.include_router(health_root_router, tags=["health"])

    # Register routers with /api/v1 prefix
    app.include_router(health.router, prefix="/api/v1", tags=["health"])
    app.include_router(crawl.router, prefix="/api/v1", tags=["crawl"])
    app.include_router(worker.router, prefix="/api/v1/worker", tags=["worker"])
    app.include_router(stats.router, prefix="/api/v1", tags=["stats"])
    # Registered last: "/{domain}/url" matches any first path segment
    app.include_router(urls.router, prefix="/api/v1", tags=["urls"])

    return app


# Application instance
app = create_app()


def run() -> None:
    """Run the service with uvicorn."""
    logging.basicConfig(level=settings.LOG_LEVEL)
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
