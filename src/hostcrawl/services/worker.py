"""
Worker Service

Manages the background intake worker lifecycle and its submission queue.
"""

import asyncio
import logging
from datetime import datetime, UTC

from hostcrawl.db.url_store import HostUrlStore

logger = logging.getLogger(__name__)


class WorkerService:
    """Background intake worker management"""

    def __init__(self, url_store: HostUrlStore):
        self.url_store = url_store
        self.task: asyncio.Task | None = None
        self.queue: asyncio.Queue | None = None
        self.started_at: datetime | None = None
        self.current_url: str | None = None
        self.requests_processed: int = 0

    @property
    def is_running(self) -> bool:
        return self.task is not None and not self.task.done()

    @property
    def pending_requests(self) -> int:
        if self.queue is None:
            return 0
        return self.queue.qsize()

    async def start(self):
        """Start the intake worker"""
        if self.is_running:
            raise RuntimeError("Worker is already running")

        # Import here to avoid circular deps
        from hostcrawl.workers.tasks import intake_loop

        self.queue = asyncio.Queue()
        self.current_url = None
        self.task = asyncio.create_task(
            intake_loop(
                self.queue,
                self.url_store,
                on_start=self._on_crawl_start,
                on_done=self._on_crawl_done,
            )
        )
        self.started_at = datetime.now(UTC)
        logger.info("✅ Intake worker started")

    async def stop(self, graceful: bool = True):
        """Stop the intake worker"""
        if not self.is_running:
            logger.warning("Worker is not running")
            return

        if graceful:
            logger.info("Stopping worker gracefully (waiting for cancellation)...")
            self.task.cancel()
            try:
                await self.task
            except asyncio.CancelledError:
                pass
        else:
            logger.info("Stopping worker immediately...")
            self.task.cancel()

        self.task = None
        self.queue = None
        self.started_at = None
        self.current_url = None
        logger.info("✅ Intake worker stopped")

    def submit(self, url: str) -> None:
        """
        Enqueue a crawl request without waiting for it.

        Raises:
            RuntimeError: if the worker is not running
        """
        if not self.is_running:
            raise RuntimeError("Worker is not running")
        self.queue.put_nowait(url)

    def get_uptime(self) -> float | None:
        """Get worker uptime in seconds"""
        if not self.started_at:
            return None
        return (datetime.now(UTC) - self.started_at).total_seconds()

    def _on_crawl_start(self, url: str) -> None:
        self.current_url = url

    def _on_crawl_done(self, url: str) -> None:
        self.current_url = None
        self.requests_processed += 1
