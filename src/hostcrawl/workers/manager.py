"""
Worker Manager

Singleton instance owning the URL store and the background worker.
"""

from hostcrawl.db.url_store import HostUrlStore
from hostcrawl.services.worker import WorkerService
from hostcrawl.models.worker import WorkerStatus


class WorkerManager:
    """Singleton worker manager"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.url_store = HostUrlStore()
            cls._instance.worker = WorkerService(cls._instance.url_store)
        return cls._instance

    async def start(self):
        """Start background worker"""
        await self.worker.start()

    async def stop(self, graceful: bool = True):
        """Stop background worker"""
        await self.worker.stop(graceful=graceful)

    def submit(self, url: str) -> None:
        """Queue a crawl request"""
        self.worker.submit(url)

    @property
    def is_running(self) -> bool:
        """Check if worker is running"""
        return self.worker.is_running

    async def get_status(self) -> WorkerStatus:
        """Get current worker status"""
        return WorkerStatus(
            status="running" if self.worker.is_running else "stopped",
            started_at=self.worker.started_at,
            uptime_seconds=self.worker.get_uptime(),
            current_url=self.worker.current_url,
            pending_requests=self.worker.pending_requests,
            requests_processed=self.worker.requests_processed,
        )


# Singleton instance
worker_manager = WorkerManager()
