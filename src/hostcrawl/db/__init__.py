"""
Crawler Database Layer

Provides the in-memory per-host URL store.
"""

from hostcrawl.db.url_store import HostUrlStore, StorePoisonedError

__all__ = ["HostUrlStore", "StorePoisonedError"]
