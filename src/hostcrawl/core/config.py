"""
Crawler Service Configuration

Environment-driven settings for the host crawler: runtime environment,
HTTP transport behaviour and worker startup.
"""

import os
from enum import Enum


class Environment(str, Enum):
    """Application environment"""

    PRODUCTION = "production"
    DEVELOPMENT = "development"
    TEST = "test"


def _get_environment() -> Environment:
    """Get and validate ENVIRONMENT variable."""
    env_value = os.getenv("ENVIRONMENT")
    if env_value is None:
        raise RuntimeError(
            "ENVIRONMENT is required. Set to 'production', 'development', or 'test'."
        )
    try:
        return Environment(env_value.lower())
    except ValueError:
        raise RuntimeError(
            f"Invalid ENVIRONMENT value: '{env_value}'. "
            "Must be 'production', 'development', or 'test'."
        )


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class CrawlerSettings:
    """Crawler service configuration"""

    # Application
    APP_NAME: str = "Host Crawler Service"
    APP_VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Environment = _get_environment()

    # Crawler Behavior
    CRAWL_USER_AGENT: str = os.getenv(
        "CRAWL_USER_AGENT", "HostCrawler/0.1 (+https://example.local/)"
    )
    CRAWL_TIMEOUT_SEC: int = int(os.getenv("CRAWL_TIMEOUT_SEC", "10"))

    # Start the intake worker together with the application
    CRAWL_AUTOSTART: bool = _get_bool("CRAWL_AUTOSTART", True)

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Server (used by the `hostcrawl` entry point)
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))


settings = CrawlerSettings()
