# src/routes/analysis.py
"""
Paid entrypoint: POST /analysis (x402).
Mounted by the app only when a payee address is configured.
"""

import logging
from flask import Blueprint, request
from pydantic import ValidationError

from src.config import settings
from src.models import AnalysisInput
from src.routes.envelope import describe_validation_error, failed, read_input, succeeded
from src.services.market_analysis import perform_analysis
from src.services.payments import challenge_response, payment_header

logger = logging.getLogger(__name__)

analysis_bp = Blueprint("analysis", __name__)

DESCRIPTION = "AI-powered market analysis combining prices, gas and TVL"


@analysis_bp.route("/analysis", methods=["POST"])
def analysis():
    if not payment_header(request):
        logger.info("[x402] /analysis without payment header -> 402")
        return challenge_response(settings)

    # Header presence only; the facilitator is responsible for verifying it.
    try:
        inp = read_input(AnalysisInput)
    except ValidationError as e:
        return failed(describe_validation_error(e), 400)

    try:
        result = perform_analysis(inp.focus, inp.chains, inp.coins)
        return succeeded(result)
    except Exception as e:
        logger.error("[x402] /analysis failed: %s", e)
        return failed(str(e), 500)
