"""
Environment-driven settings for the dashboard service.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


DEFAULT_API_BASE_URL = "http://localhost:8000"
DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173"
DEFAULT_NOTIFICATION_LIMIT = 20


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    """Parse API_TIMEOUT. Unset, empty or non-positive means no timeout."""
    if raw is None or raw.strip() == "":
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"API_TIMEOUT must be a number of seconds, got {raw!r}")
    return value if value > 0 else None


def _parse_limit(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw.strip() == "":
        return DEFAULT_NOTIFICATION_LIMIT
    value = int(raw)
    return value if value > 0 else None


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the dashboard."""

    api_base_url: str = DEFAULT_API_BASE_URL
    api_timeout: Optional[float] = None
    cors_origins: List[str] = field(default_factory=lambda: DEFAULT_CORS_ORIGINS.split(","))
    notification_limit: Optional[int] = DEFAULT_NOTIFICATION_LIMIT
    log_level: str = "INFO"


def get_settings() -> Settings:
    """
    Build settings from environment variables.

    Variables:
        API_BASE_URL: Base URL of the simulation backend
        API_TIMEOUT: Request timeout in seconds (unset = wait indefinitely)
        CORS_ORIGINS: Comma-separated list of allowed browser origins
        NOTIFICATION_LIMIT: Max notifications kept on the bus (0 = unbounded)
        LOG_LEVEL: Logging level name
    """
    origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return Settings(
        api_base_url=os.getenv("API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/"),
        api_timeout=_parse_timeout(os.getenv("API_TIMEOUT")),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        notification_limit=_parse_limit(os.getenv("NOTIFICATION_LIMIT")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
