"""
HTML Parser Utilities

Functions for validating crawl targets and extracting same-host links from HTML.
"""

import logging
import warnings
from typing import Optional
from urllib.parse import quote, urlsplit, urlunsplit

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
from bs4.builder import ParserRejectedMarkup

warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

logger = logging.getLogger(__name__)

# Schemes whose URLs cannot exist without a host
SPECIAL_SCHEMES = {"http", "https", "ftp", "ws", "wss"}

# Characters left unescaped when a raw href is used as a path
PATH_SAFE_CHARS = "/%:@!$&'()*+,;=[]|^"


def get_host(url: str) -> Optional[str]:
    """Extract hostname (lower-cased, without port) from URL."""
    try:
        return urlsplit(url).hostname or None
    except ValueError:
        return None


def parse_absolute(href: str) -> Optional[str]:
    """
    Return href when it parses as an absolute URL, None otherwise.

    An href without a scheme, or a special-scheme URL without a host,
    is not absolute.
    """
    try:
        parts = urlsplit(href)
    except ValueError:
        return None
    if not parts.scheme:
        return None
    if parts.scheme.lower() in SPECIAL_SCHEMES and not parts.netloc:
        return None
    return href


def parse_crawl_target(message) -> Optional[tuple[str, str]]:
    """
    Validate a submitted crawl request.

    Returns:
        (url, host) for an absolute URL with a host, None otherwise
    """
    if not isinstance(message, str):
        return None
    url = message.strip()
    if parse_absolute(url) is None:
        return None
    host = get_host(url)
    if not host:
        return None
    return url, host


def replace_path(source_url: str, href: str) -> str:
    """
    Build a URL from source_url with its path replaced by href.

    Only the path changes: scheme, host, port, query and fragment of the
    source are kept. Dot segments and query/fragment parts inside href are
    not interpreted.
    """
    parts = urlsplit(source_url)
    path = href if href.startswith("/") else "/" + href
    path = quote(path, safe=PATH_SAFE_CHARS)
    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, parts.fragment))


def extract_links(source_url: str, host: str, html: str) -> Optional[set[str]]:
    """
    Extract links pointing to host from HTML.

    Args:
        source_url: URL the page was fetched from
        host: Hostname links must belong to
        html: Raw HTML string

    Returns:
        Set of same-host URLs including source_url, or None if the markup
        could not be parsed
    """
    try:
        soup = BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as e:
        logger.warning(f"Unparsable page {source_url}: {e}")
        return None

    urls = {source_url}
    for a in soup.find_all("a", href=True):
        href = a.get("href")
        if isinstance(href, list):
            href = href[0] if href else ""
        href = href.strip()

        absolute = parse_absolute(href)
        if absolute is None:
            # Relative href, always on the source host
            urls.add(replace_path(source_url, href))
        elif get_host(absolute) == host:
            urls.add(absolute)

    return urls
