# src/services/coingecko.py
"""
CoinGecko price service.
Simple spot prices with 24h change and market cap for any list of coin IDs.
"""

import logging

from src.config import settings
from src.services.errors import UpstreamError
from src.services.http import _get

logger = logging.getLogger(__name__)


def _headers() -> dict:
    if settings.COINGECKO_API_KEY:
        return {"x-cg-demo-api-key": settings.COINGECKO_API_KEY}
    return {}


def get_simple_prices(coins: list[str], currencies: list[str]) -> dict:
    """
    Fetch prices for `coins` quoted in each of `currencies`.
    Returns CoinGecko's map unchanged, e.g. {"bitcoin": {"usd": 1.0, "usd_24h_change": ...}}.
    """
    params = {
        "ids": ",".join(coins),
        "vs_currencies": ",".join(currencies),
        "include_24hr_change": "true",
        "include_market_cap": "true",
    }
    res = _get(f"{settings.COINGECKO_API_BASE}/simple/price", params=params, headers=_headers())
    if not res.ok:
        logger.error("CoinGecko simple/price failed: status=%s", res.status_code)
        raise UpstreamError(f"CoinGecko API error: {res.status_code}", res.status_code)
    return res.json()
