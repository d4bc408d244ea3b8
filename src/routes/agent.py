# src/routes/agent.py
"""
Discovery routes: the entrypoint catalogue and the agent manifest.
"""

from flask import Blueprint, jsonify

from src.config import settings
from src.routes import analysis, entrypoints
from src.services.payments import format_usdc

agent_bp = Blueprint("agent_bp", __name__)

AGENT_NAME = "chain-data-agent"
AGENT_VERSION = "1.0.0"
AGENT_DESCRIPTION = "Multi-Chain Data Aggregator - Real-time crypto prices, gas fees, and TVL data for AI agents"


def list_entrypoints() -> list[dict]:
    out = [
        {
            "key": key,
            "description": description,
            "path": f"/entrypoints/{key}/invoke",
            "input": model.model_json_schema(),
        }
        for key, (description, model) in entrypoints.ENTRYPOINTS.items()
    ]
    if settings.PAY_TO:
        out.append({
            "key": "analysis",
            "description": analysis.DESCRIPTION,
            "path": "/analysis",
            "price": {
                "amount": settings.ANALYSIS_PRICE,
                "display": f"{format_usdc(settings.ANALYSIS_PRICE)} USDC",
                "network": settings.NETWORK,
            },
        })
    return out


@agent_bp.route("/entrypoints", methods=["GET"])
def entrypoint_catalogue():
    return jsonify({"entrypoints": list_entrypoints()})


@agent_bp.route("/.well-known/agent.json", methods=["GET"])
def agent_manifest():
    manifest = {
        "name": AGENT_NAME,
        "version": AGENT_VERSION,
        "description": AGENT_DESCRIPTION,
        "entrypoints": list_entrypoints(),
    }
    if settings.PAY_TO:
        manifest["payments"] = {
            "protocol": "x402",
            "network": settings.NETWORK,
            "payTo": settings.PAY_TO,
            "facilitatorUrl": settings.FACILITATOR_URL,
        }
    return jsonify(manifest)
