"""
Stats Router

Aggregated crawler statistics endpoint.
"""

from fastapi import APIRouter, Depends, HTTPException
from hostcrawl.api.deps import get_url_store
from hostcrawl.db import HostUrlStore, StorePoisonedError
from hostcrawl.workers.manager import worker_manager

router = APIRouter()


@router.get("/stats")
async def get_stats(url_store: HostUrlStore = Depends(get_url_store)):
    """Return aggregated crawler stats in a single response."""
    try:
        store_stats = url_store.get_stats()
    except StorePoisonedError:
        raise HTTPException(status_code=500, detail="URL store unavailable")

    worker_status = await worker_manager.get_status()

    return {
        "domains": store_stats["domains"],
        "total_urls": store_stats["total_urls"],
        "worker_status": worker_status.status,
        "uptime_seconds": worker_status.uptime_seconds,
        "current_url": worker_status.current_url,
        "pending_requests": worker_status.pending_requests,
        "requests_processed": worker_status.requests_processed,
    }
