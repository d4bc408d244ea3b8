# src/services/http.py
"""
Shared outbound HTTP helpers for the upstream clients.
"""

from datetime import datetime, timezone
import requests

from src.config import settings


def iso_now() -> str:
    """UTC timestamp in ISO-8601 with millisecond precision, e.g. 2026-01-01T00:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _get(url: str, params: dict | None = None, headers: dict | None = None, timeout: int | None = None):
    """GET with the configured timeout. Returns the raw response; callers decide what non-2xx means."""
    return requests.get(
        url,
        params=params or {},
        headers=headers or {},
        timeout=timeout or settings.HTTP_TIMEOUT_SECS,
    )
