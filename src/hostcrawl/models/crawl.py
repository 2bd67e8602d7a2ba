"""
Crawl Request/Response Models

Pydantic models for crawl submission and URL query endpoints.
"""

from pydantic import BaseModel, Field


class CrawlRequest(BaseModel):
    """Request to crawl a site starting from a URL"""

    url: str = Field(
        ...,
        description="URL the crawler should start from",
        examples=["https://example.com"],
    )


class CrawlResponse(BaseModel):
    """Response after queueing a crawl request"""

    status: str = Field(default="accepted", description="Status of the request")
    url: str = Field(..., description="URL that was queued")


class UrlCount(BaseModel):
    """Number of unique URLs found for a domain"""

    count: int = Field(..., ge=0, description="Unique URLs known for the domain")


class DomainCount(BaseModel):
    """Domain with its number of known URLs"""

    domain: str
    count: int = Field(..., ge=0)
