"""
Application Lifecycle Events

Manages FastAPI lifespan events for startup and shutdown.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
import logging

from hostcrawl.core.config import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager

    Handles startup and shutdown events:
    - Startup: Start the intake worker when CRAWL_AUTOSTART is set
    - Shutdown: Stop the intake worker
    """
    logger.info("🚀 Starting Host Crawler Service...")

    # Import here to avoid circular dependencies
    from hostcrawl.workers.manager import worker_manager

    if settings.CRAWL_AUTOSTART and not worker_manager.is_running:
        await worker_manager.start()
        logger.info("✅ Intake worker started")
    else:
        logger.info("💡 Use POST /api/v1/worker/start to begin crawling")

    yield  # Application runs here

    # Shutdown
    logger.info("🛑 Shutting down Host Crawler Service...")
    if worker_manager.is_running:
        await worker_manager.stop(graceful=True)
    logger.info("✅ Shutdown complete")
