"""
Crawl Router

Handles crawl request submission.
"""

from fastapi import APIRouter, Depends, HTTPException

from hostcrawl.api.deps import get_worker_manager
from hostcrawl.models.crawl import CrawlRequest, CrawlResponse
from hostcrawl.workers.manager import WorkerManager

router = APIRouter()


@router.post("/crawl", response_model=CrawlResponse, status_code=202)
async def submit_crawl(
    request: CrawlRequest,
    manager: WorkerManager = Depends(get_worker_manager),
):
    """
    Queue a URL for crawling

    The request is accepted without waiting for the crawl. Malformed URLs
    are accepted too and dropped by the worker; they never show up in
    query results.
    """
    try:
        manager.submit(request.url)
    except RuntimeError:
        raise HTTPException(status_code=503, detail="Crawler worker is not running")
    return CrawlResponse(status="accepted", url=request.url)
