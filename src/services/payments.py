# src/services/payments.py
"""
x402 payment gate for paid endpoints.

Only checks that a payment header is present. Proof verification and
settlement belong to the facilitator (settings.FACILITATOR_URL) and are
not performed here: any non-empty header is accepted.
"""

import base64
import json
from flask import jsonify

from src.config import Settings

X402_VERSION = 2
USDC_DECIMALS = 6

# Checked in order; first non-empty wins
PAYMENT_HEADERS = ("X-PAYMENT", "Payment", "Payment-Signature")


def payment_header(request) -> str | None:
    for name in PAYMENT_HEADERS:
        value = request.headers.get(name)
        if value:
            return value
    return None


def format_usdc(amount: str) -> str:
    """Atomic USDC units -> human figure, e.g. "10000" -> "0.01"."""
    value = int(amount) / 10 ** USDC_DECIMALS
    return f"{value:.6f}".rstrip("0").rstrip(".")


def payment_requirements(config: Settings) -> dict:
    return {
        "x402Version": X402_VERSION,
        "accepts": [{
            "scheme": "exact",
            "network": config.NETWORK,
            "amount": config.ANALYSIS_PRICE,
            "asset": config.PAYMENT_ASSET,
            "payTo": config.PAY_TO,
            "maxTimeoutSeconds": config.PAYMENT_TIMEOUT_SECS,
            "extra": {
                "name": "USD Coin",
                "version": "2",
            },
        }],
        "error": "Payment required",
        "description": f"Premium AI-powered market analysis - {format_usdc(config.ANALYSIS_PRICE)} USDC",
    }


def encode_challenge(requirements: dict) -> str:
    raw = json.dumps(requirements, separators=(",", ":")).encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


def challenge_response(config: Settings):
    """402 Payment Required carrying the terms in the body and, base64-encoded, in headers."""
    requirements = payment_requirements(config)
    encoded = encode_challenge(requirements)
    resp = jsonify(requirements)
    resp.status_code = 402
    resp.headers["X-PAYMENT-REQUIRED"] = encoded
    resp.headers["Payment-Required"] = encoded
    return resp
