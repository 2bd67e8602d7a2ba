"""
Background Crawler Tasks

Intake loop receiving crawl requests and the bounded same-host traversal
it runs for each of them.
"""

import asyncio
import logging
from typing import Optional

import aiohttp

from hostcrawl.db.url_store import HostUrlStore, StorePoisonedError
from hostcrawl.services.fetcher import create_session, fetch_page
from hostcrawl.utils.parser import extract_links, parse_crawl_target

logger = logging.getLogger(__name__)

# Per request, the crawler visits at most this many pages
MAX_PAGES_PER_REQUEST = 16


async def crawl_page(
    session: aiohttp.ClientSession, host: str, url: str
) -> Optional[set[str]]:
    """
    Fetch a page and extract its links on host.

    Returns:
        Same-host URLs found on the page (including url), or None if the
        page could not be fetched or parsed
    """
    html = await fetch_page(session, url)
    if html is None:
        return None

    # Parse HTML (offload to executor)
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, extract_links, url, host, html)


async def crawl_site(
    session: aiohttp.ClientSession,
    url_store: HostUrlStore,
    seed_url: str,
    host: str,
    max_pages: int = MAX_PAGES_PER_REQUEST,
) -> int:
    """
    Crawl host starting from seed_url.

    The frontier is a stack: the most recently discovered URL is visited
    next. Stops when the frontier is empty or max_pages pages were visited.

    Returns:
        Number of pages visited
    """
    frontier = [seed_url]
    visited = 0

    while frontier and visited < max_pages:
        visited += 1
        url = frontier.pop()

        crawled_urls = await crawl_page(session, host, url)
        if crawled_urls is None:
            continue

        new_urls = url_store.insert_unique(host, crawled_urls)
        frontier.extend(new_urls)
        logger.debug(f"Crawled {url}: {len(crawled_urls)} links, {len(new_urls)} new")

    logger.info(
        f"Finished crawl of {host} from {seed_url} "
        f"(visited={visited}, known={url_store.count(host)})"
    )
    return visited


async def intake_loop(
    queue: asyncio.Queue,
    url_store: HostUrlStore,
    on_start=None,
    on_done=None,
):
    """
    Main crawler worker loop.

    Waits for crawl requests on queue and crawls them one at a time, in
    the order received. Malformed URLs are dropped.

    Args:
        queue: Inbound queue of URL strings
        url_store: Store receiving discovered URLs
        on_start: Called with the URL when its crawl begins
        on_done: Called with the URL when its crawl ends
    """
    logger.info("Intake loop started")

    async with create_session() as session:
        try:
            while True:
                try:
                    message = await queue.get()
                except Exception as e:
                    logger.exception(f"Error receiving crawl request: {e}")
                    continue

                try:
                    target = parse_crawl_target(message)
                    if target is None:
                        logger.debug(f"Discarding malformed crawl request: {message!r}")
                        continue

                    url, host = target
                    logger.info(f"Processing: {url} (host={host})")
                    if on_start:
                        on_start(url)
                    try:
                        await crawl_site(session, url_store, url, host)
                    except StorePoisonedError:
                        raise
                    except Exception as e:
                        logger.error(f"Unexpected error crawling {url}: {e}", exc_info=True)
                    finally:
                        if on_done:
                            on_done(url)
                finally:
                    queue.task_done()

        except asyncio.CancelledError:
            logger.info("Intake loop cancelled")
            raise
        except StorePoisonedError:
            logger.critical("URL store is poisoned, stopping intake loop")
            raise
