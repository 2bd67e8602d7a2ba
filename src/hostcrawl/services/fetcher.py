"""
Page Fetcher

HTTP GET of a single page for the traversal engine.
"""

import asyncio
import logging
from typing import Optional

import aiohttp

from hostcrawl.core.config import settings

logger = logging.getLogger(__name__)


def create_session() -> aiohttp.ClientSession:
    """Create the HTTP session used by the intake worker."""
    return aiohttp.ClientSession(
        headers={"User-Agent": settings.CRAWL_USER_AGENT},
        timeout=aiohttp.ClientTimeout(total=settings.CRAWL_TIMEOUT_SEC),
    )


async def fetch_page(session: aiohttp.ClientSession, url: str) -> Optional[str]:
    """
    Fetch a page body as text.

    Returns:
        The body for a 2xx response, None on network error, timeout,
        non-success status or undecodable body
    """
    try:
        async with session.get(url, allow_redirects=True) as resp:
            if not 200 <= resp.status < 300:
                logger.warning(f"HTTP error {resp.status} for {url}")
                return None
            return await resp.text()

    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.warning(f"Network error for {url}: {e}")
        return None

    except UnicodeDecodeError as e:
        logger.warning(f"Undecodable body for {url}: {e}")
        return None
