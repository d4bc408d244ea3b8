# src/routes/health.py
from flask import Blueprint, jsonify

from src.config import settings
from src.services.http import iso_now

health_bp = Blueprint("health_bp", __name__)


@health_bp.route("/health", methods=["GET"])
def health():
    return jsonify({"ok": True, "timestamp": iso_now()})


@health_bp.route("/test-env", methods=["GET"])
def test_env():
    """Check which optional settings are configured without exposing their values."""
    return jsonify({
        "coingecko_key": bool(settings.COINGECKO_API_KEY),
        "owlracle_key": bool(settings.OWLRACLE_API_KEY),
        "openrouter": bool(settings.OPENROUTER_API_KEY),
        "payments": bool(settings.PAY_TO),
        "network": settings.NETWORK,
    })
