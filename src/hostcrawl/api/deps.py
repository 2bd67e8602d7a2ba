"""
API Dependencies

Dependency injection for FastAPI routes.
"""

from hostcrawl.db import HostUrlStore
from hostcrawl.workers.manager import WorkerManager, worker_manager


def get_url_store() -> HostUrlStore:
    """Get the process-wide URL store"""
    return worker_manager.url_store


def get_worker_manager() -> WorkerManager:
    """Get the worker manager singleton"""
    return worker_manager
