# src/services/defillama.py
"""
DeFiLlama TVL service.
Chain-level and protocol-level Total Value Locked, ranked by TVL.
"""

import logging

from src.config import settings
from src.services.errors import UpstreamError
from src.services.http import _get

logger = logging.getLogger(__name__)


def _fetch(path: str) -> list[dict]:
    res = _get(f"{settings.DEFILLAMA_API_BASE}{path}")
    if not res.ok:
        logger.error("DeFiLlama %s failed: status=%s", path, res.status_code)
        raise UpstreamError(f"DeFiLlama API error: {res.status_code}", res.status_code)
    return res.json()


def get_chains() -> list[dict]:
    return _fetch("/v2/chains")


def get_protocols() -> list[dict]:
    return _fetch("/protocols")


def _ranked(items: list[dict], limit: int, min_tvl: float = 0) -> list[dict]:
    kept = [i for i in items or [] if (i.get("tvl") or 0) > min_tvl]
    return sorted(kept, key=lambda i: i["tvl"], reverse=True)[:limit]


def top_chains(chains: list[dict], limit: int, min_tvl: float = 0) -> list[dict]:
    """Chains with TVL above `min_tvl`, largest first, reshaped to the public fields."""
    return [
        {
            "name": c.get("name"),
            "tvl": c.get("tvl"),
            "tokenSymbol": c.get("tokenSymbol"),
            "chainId": c.get("chainId"),
        }
        for c in _ranked(chains, limit, min_tvl)
    ]


def top_protocols(protocols: list[dict], limit: int = 10) -> list[dict]:
    return [
        {
            "name": p.get("name"),
            "tvl": p.get("tvl"),
            "category": p.get("category"),
            "chains": (p.get("chains") or [])[:5],
        }
        for p in _ranked(protocols, limit)
    ]
