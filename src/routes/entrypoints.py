# src/routes/entrypoints.py
"""
Free entrypoints
----------------
POST /entrypoints/prices/invoke  - crypto prices (CoinGecko)
POST /entrypoints/gas/invoke     - multi-chain gas prices (Owlracle)
POST /entrypoints/tvl/invoke     - chain TVL (DeFiLlama)
"""

import logging
from flask import Blueprint
from pydantic import ValidationError

from src.models import GasInput, PricesInput, TvlInput
from src.routes.envelope import describe_validation_error, failed, read_input, succeeded
from src.services import coingecko, defillama, owlracle
from src.services.http import iso_now

logger = logging.getLogger(__name__)

entrypoints_bp = Blueprint("entrypoints", __name__)

# key -> (description, input model); also feeds /entrypoints and the agent manifest
ENTRYPOINTS = {
    "prices": (
        "Get real-time cryptocurrency prices from CoinGecko. Supports any coin ID (bitcoin, ethereum, solana, etc.)",
        PricesInput,
    ),
    "gas": (
        "Get real-time gas prices for multiple EVM chains. Returns speed tiers (slow, standard, fast, instant) with estimated fees.",
        GasInput,
    ),
    "tvl": (
        "Get Total Value Locked (TVL) data for blockchain networks from DeFiLlama.",
        TvlInput,
    ),
}


def prices_handler(inp: PricesInput) -> dict:
    return {
        "timestamp": iso_now(),
        "source": "coingecko",
        "prices": coingecko.get_simple_prices(inp.coins, inp.currencies),
    }


def gas_handler(inp: GasInput) -> dict:
    return {
        "timestamp": iso_now(),
        "source": "owlracle",
        "gas": owlracle.get_gas_many(inp.chains),
    }


def tvl_handler(inp: TvlInput) -> dict:
    chains = defillama.top_chains(defillama.get_chains(), inp.limit)

    output = {
        "timestamp": iso_now(),
        "source": "defillama",
        "totalTvl": sum(c["tvl"] for c in chains),
        "chains": chains,
    }

    if inp.includeProtocols:
        try:
            output["topProtocols"] = defillama.top_protocols(defillama.get_protocols())
        except Exception as e:
            logger.warning("DeFiLlama protocols unavailable: %s", e)
            output["topProtocols"] = []

    return output


HANDLERS = {
    "prices": prices_handler,
    "gas": gas_handler,
    "tvl": tvl_handler,
}


@entrypoints_bp.route("/entrypoints/<key>/invoke", methods=["POST"])
def invoke(key: str):
    if key not in HANDLERS:
        return failed(f"Unknown entrypoint: {key}", 404)

    _, model = ENTRYPOINTS[key]
    try:
        inp = read_input(model)
    except ValidationError as e:
        return failed(describe_validation_error(e), 400)

    try:
        return succeeded(HANDLERS[key](inp))
    except Exception as e:
        logger.error("Entrypoint %s failed: %s", key, e)
        return failed(str(e), 500)
