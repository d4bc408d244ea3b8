# src/services/owlracle.py
"""
Owlracle gas service.
Multi-chain EVM gas prices with speed tiers (slow, standard, fast, instant).
Chains are probed in parallel; a failing chain is reported inline and
never fails its siblings.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from src.config import settings
from src.services.http import _get

logger = logging.getLogger(__name__)

# Friendly chain names -> Owlracle network keys
CHAIN_MAP = {
    "ethereum": "eth",
    "eth": "eth",
    "base": "base",
    "polygon": "poly",
    "poly": "poly",
    "arbitrum": "arb",
    "optimism": "opt",
    "avalanche": "avax",
    "bsc": "bsc",
    "fantom": "ftm",
}

SPEED_TIERS = ("slow", "standard", "fast", "instant")


def chain_key(chain: str) -> str:
    c = chain.lower()
    return CHAIN_MAP.get(c, c)


def fetch_gas_raw(chain: str):
    """Raw Owlracle response for one chain."""
    params = {"apikey": settings.OWLRACLE_API_KEY} if settings.OWLRACLE_API_KEY else None
    return _get(f"{settings.OWLRACLE_API_BASE}/{chain_key(chain)}/gas", params=params)


def _shape(data: dict) -> dict:
    speeds = data.get("speeds") or []
    return {
        "timestamp": data.get("timestamp"),
        "baseFee": data.get("baseFee"),
        "avgBlockTime": data.get("avgTime"),
        "speeds": {
            tier: speeds[i] if i < len(speeds) else None
            for i, tier in enumerate(SPEED_TIERS)
        },
    }


def get_gas(chain: str) -> dict:
    """Gas snapshot for one chain, or {"error": ...} if it could not be fetched."""
    try:
        res = fetch_gas_raw(chain)
        if not res.ok:
            logger.warning("Owlracle %s failed: status=%s", chain, res.status_code)
            return {"error": f"Failed to fetch: {res.status_code}"}
        return _shape(res.json())
    except Exception as e:
        logger.warning("Owlracle %s error: %s", chain, e)
        return {"error": str(e)}


def get_gas_many(chains: list[str]) -> dict:
    """Fan out get_gas over `chains`, keyed by the chain name as requested."""
    if not chains:
        return {}
    with ThreadPoolExecutor(max_workers=min(settings.MAX_WORKERS, len(chains))) as ex:
        results = list(ex.map(get_gas, chains))
    return dict(zip(chains, results))
