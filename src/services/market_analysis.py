# src/services/market_analysis.py
"""
AI market analysis (paid endpoint).
------------------------------------
1) Pull prices, gas and chain TVL in parallel (each source best effort)
2) Condense into a compact structured snapshot
3) Ask the LLM for summary / insights / recommendations / riskLevel
Falls back to a data-only report when OpenRouter is missing or fails.
"""

from __future__ import annotations
import json
import logging
from concurrent.futures import ThreadPoolExecutor

from src.config import settings
from src.services import coingecko, defillama, openrouter, owlracle
from src.services.http import iso_now

logger = logging.getLogger(__name__)

MIN_CHAIN_TVL = 100_000_000
MAX_TVL_CHAINS = 15

SYSTEM_PROMPT = """You are a professional crypto market analyst AI. Provide concise, actionable insights based on real-time market data. Be direct and specific. Format your response as JSON with these fields:
- summary: 1-2 sentence market overview
- insights: array of objects with {type, detail, signal} - max 5 insights
- recommendations: array of 3-5 actionable recommendations
- riskLevel: "low", "medium", or "high\""""

FOCUS_PROMPTS = {
    "overview": "Analyze this crypto market data and provide a comprehensive overview. Focus on major price movements, gas conditions, and TVL trends.",
    "defi": "Analyze this data from a DeFi perspective. Focus on TVL trends, gas costs for DeFi operations, and which chains offer the best opportunities.",
    "trading": "Analyze this data for trading opportunities. Focus on price momentum, 24h changes, market cap shifts, and entry/exit signals.",
    "gas-optimization": "Analyze gas prices across chains. Recommend the most cost-effective chains for transactions and optimal timing strategies.",
}


# -----------------------
# Data collection
# -----------------------
def _prices_or_none(coins: list[str]):
    try:
        return coingecko.get_simple_prices(coins, ["usd"])
    except Exception as e:
        logger.warning("[Analysis] prices unavailable: %s", e)
        return None


def _gas_or_none(chain: str):
    try:
        res = owlracle.fetch_gas_raw(chain)
        if not res.ok:
            return None
        return res.json()
    except Exception as e:
        logger.warning("[Analysis] gas unavailable for %s: %s", chain, e)
        return None


def _chains_or_empty() -> list[dict]:
    try:
        return defillama.get_chains()
    except Exception as e:
        logger.warning("[Analysis] TVL unavailable: %s", e)
        return []


def collect_market_data(chains: list[str], coins: list[str]) -> dict:
    """Fetch every source concurrently and condense into the snapshot handed to the LLM."""
    with ThreadPoolExecutor(max_workers=settings.MAX_WORKERS) as ex:
        prices_fut = ex.submit(_prices_or_none, coins)
        tvl_fut = ex.submit(_chains_or_empty)
        gas_futs = [(chain, ex.submit(_gas_or_none, chain)) for chain in chains]

        prices = prices_fut.result()
        tvl = tvl_fut.result()
        gas = {}
        for chain, fut in gas_futs:
            data = fut.result()
            if data:
                gas[chain] = {"baseFee": data.get("baseFee"), "speeds": data.get("speeds")}

    return {
        "prices": prices,
        "gas": gas,
        "tvl": [
            {"name": c["name"], "tvl": c["tvl"], "chainId": c["chainId"]}
            for c in defillama.top_chains(tvl, MAX_TVL_CHAINS, min_tvl=MIN_CHAIN_TVL)
        ],
    }


# -----------------------
# LLM
# -----------------------
def build_user_prompt(focus: str, data: dict) -> str:
    focus_prompt = FOCUS_PROMPTS.get(focus, FOCUS_PROMPTS["overview"])
    return f"{focus_prompt}\n\nCurrent Market Data:\n{json.dumps(data, indent=2)}"


def _strip_code_fence(text: str) -> str:
    t = text.strip()
    if t.startswith("```"):
        t = t.split("\n", 1)[1] if "\n" in t else ""
        if t.rstrip().endswith("```"):
            t = t.rstrip()[:-3]
    return t.strip()


def apply_ai_response(analysis: dict, ai_text: str) -> None:
    """Fill summary/insights/recommendations from the model's reply (JSON preferred, raw text otherwise)."""
    try:
        parsed = json.loads(_strip_code_fence(ai_text))
    except ValueError:
        parsed = None

    if isinstance(parsed, dict):
        analysis["summary"] = parsed.get("summary") or ai_text
        analysis["insights"] = parsed.get("insights") or []
        analysis["recommendations"] = parsed.get("recommendations") or []
        analysis["riskLevel"] = parsed.get("riskLevel") or "medium"
    else:
        analysis["summary"] = ai_text
        analysis["insights"] = []
        analysis["recommendations"] = []
        # any other JSON value still counts as a parsed reply
        if parsed is not None:
            analysis["riskLevel"] = "medium"


def perform_analysis(focus: str, chains: list[str], coins: list[str]) -> dict:
    data = collect_market_data(chains, coins)

    analysis = {
        "timestamp": iso_now(),
        "focus": focus,
        "model": settings.OPENROUTER_MODEL,
        "data": data,
    }

    if not settings.OPENROUTER_API_KEY:
        analysis["summary"] = (
            f"Market data aggregated for {focus} analysis. "
            "Configure OPENROUTER_API_KEY for AI-powered insights."
        )
        analysis["insights"] = []
        analysis["recommendations"] = ["Configure OPENROUTER_API_KEY to enable AI-powered analysis"]
        analysis["aiPowered"] = False
        return analysis

    try:
        ai_text = openrouter.chat(build_user_prompt(focus, data), SYSTEM_PROMPT)
        apply_ai_response(analysis, ai_text)
        analysis["aiPowered"] = True
    except Exception as e:
        logger.error("[Analysis] OpenRouter call failed: %s", e)
        analysis["summary"] = f"AI analysis failed: {e}. Raw data provided."
        analysis["insights"] = []
        analysis["recommendations"] = ["Check OPENROUTER_API_KEY configuration"]
        analysis["aiPowered"] = False
        analysis["error"] = str(e)

    return analysis
