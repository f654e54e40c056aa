"""
Runtime settings read from environment variables.

- CORS_ALLOW_ORIGINS: comma-separated origins allowed to call the API from a browser
- LOG_LEVEL: logging level name (default: INFO)
- API_HOST / API_PORT: bind address used by `main.run()`
"""

from __future__ import annotations

import logging
import os

DEFAULT_CORS_ALLOW_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def cors_allow_origins() -> list[str]:
    raw = os.environ.get("CORS_ALLOW_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ALLOW_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def log_level() -> int:
    name = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    level = logging.getLevelName(name)
    # getLevelName returns a "Level X" string for unknown names.
    return level if isinstance(level, int) else logging.INFO


def api_host() -> str:
    return os.environ.get("API_HOST", "0.0.0.0").strip() or "0.0.0.0"


def api_port() -> int:
    return _env_int("API_PORT", 8000)
