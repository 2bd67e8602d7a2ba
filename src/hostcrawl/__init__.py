"""
Host Crawler Service

Crawls a site from a seed URL and keeps the unique URLs found per hostname.
"""

__version__ = "0.1.0"
