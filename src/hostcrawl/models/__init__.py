"""
Models package initialization
"""

from hostcrawl.models.crawl import CrawlRequest, CrawlResponse, UrlCount, DomainCount
from hostcrawl.models.worker import WorkerStatus, WorkerStopRequest, WorkerStartResponse

__all__ = [
    "CrawlRequest",
    "CrawlResponse",
    "UrlCount",
    "DomainCount",
    "WorkerStatus",
    "WorkerStopRequest",
    "WorkerStartResponse",
]
