# src/services/openrouter.py
"""
OpenRouter chat-completions client used by the paid analysis endpoint.
"""

import logging
import requests

from src.config import settings
from src.services.errors import UpstreamError

logger = logging.getLogger(__name__)

APP_REFERER = "https://chain-data-agent.local"  # OpenRouter requires a referer
APP_TITLE = "Chain Data Agent"


def chat(prompt: str, system_prompt: str, temperature: float = 0.7, max_tokens: int = 1500) -> str:
    """Send one system + user exchange and return the assistant text ("" if none)."""
    if not settings.OPENROUTER_API_KEY:
        raise UpstreamError("OPENROUTER_API_KEY not configured")

    headers = {
        "Authorization": f"Bearer {settings.OPENROUTER_API_KEY}",
        "Content-Type": "application/json",
        "HTTP-Referer": APP_REFERER,
        "X-Title": APP_TITLE,
    }
    payload = {
        "model": settings.OPENROUTER_MODEL,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": prompt},
        ],
        "temperature": temperature,
        "max_tokens": max_tokens,
    }
    res = requests.post(
        f"{settings.OPENROUTER_API_BASE}/chat/completions",
        headers=headers,
        json=payload,
        timeout=max(settings.HTTP_TIMEOUT_SECS, 60),
    )
    if not res.ok:
        logger.error("OpenRouter failed: status=%s body=%s", res.status_code, res.text[:200])
        raise UpstreamError(f"OpenRouter API error: {res.status_code} - {res.text}", res.status_code)

    choices = res.json().get("choices") or []
    if not choices:
        return ""
    return (choices[0].get("message") or {}).get("content") or ""
