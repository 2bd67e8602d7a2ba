"""
URL Query Router

Read-only endpoints listing and counting the URLs known for a domain.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from hostcrawl.api.deps import get_url_store
from hostcrawl.db import HostUrlStore, StorePoisonedError
from hostcrawl.models.crawl import DomainCount, UrlCount

router = APIRouter()


def _store_unavailable() -> HTTPException:
    return HTTPException(status_code=500, detail="URL store unavailable")


@router.get("/domains", response_model=list[DomainCount])
async def list_domains(
    limit: int = Query(100, ge=1, le=1000, description="Maximum domains to return"),
    url_store: HostUrlStore = Depends(get_url_store),
):
    """List crawled domains with their URL counts, largest first"""
    try:
        domains = url_store.get_domains(limit=limit)
    except StorePoisonedError:
        raise _store_unavailable()
    return [DomainCount(domain=domain, count=count) for domain, count in domains]


@router.get("/{domain}/url", response_model=list[str])
async def list_urls(
    domain: str,
    offset: int = Query(0, ge=0, description="Number of URLs to skip"),
    limit: int | None = Query(
        None, ge=1, le=10000, description="Maximum number of URLs to return"
    ),
    url_store: HostUrlStore = Depends(get_url_store),
):
    """
    List all URLs found for a domain

    Returns an empty list if the domain was never crawled. URLs are sorted
    so that offset/limit pages are stable.
    """
    try:
        urls = url_store.list_urls(domain)
    except StorePoisonedError:
        raise _store_unavailable()

    urls.sort()
    end = offset + limit if limit is not None else None
    return urls[offset:end]


@router.get("/{domain}/url/count", response_model=UrlCount)
async def count_urls(domain: str, url_store: HostUrlStore = Depends(get_url_store)):
    """Count URLs found for a domain (0 if never crawled)"""
    try:
        return UrlCount(count=url_store.count(domain))
    except StorePoisonedError:
        raise _store_unavailable()
