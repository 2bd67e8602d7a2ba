"""
Utilities package initialization
"""

from hostcrawl.utils.parser import extract_links, parse_crawl_target

__all__ = ["extract_links", "parse_crawl_target"]
