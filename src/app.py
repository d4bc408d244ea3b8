# src/app.py
from flask import Flask
from flask_cors import CORS
import logging

# ---- Core Config ----
from src.config import settings
from src.routes.agent import agent_bp
from src.routes.analysis import analysis_bp
from src.routes.entrypoints import entrypoints_bp
from src.routes.health import health_bp
from src.routes.health_card import health_card_bp

logger = logging.getLogger(__name__)

ENDPOINTS_BANNER = """
Endpoints:
  FREE:
    POST /entrypoints/prices/invoke  - Crypto prices (CoinGecko)
    POST /entrypoints/gas/invoke     - Multi-chain gas prices (Owlracle)
    POST /entrypoints/tvl/invoke     - Chain TVL data (DeFiLlama)
"""


def configure_logging():
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app() -> Flask:
    configure_logging()

    # ---- Initialize Flask ----
    app = Flask(__name__)
    CORS(app)

    # ---- Blueprints ----
    app.register_blueprint(health_bp)
    app.register_blueprint(health_card_bp)
    app.register_blueprint(agent_bp)
    app.register_blueprint(entrypoints_bp)

    # ---- Paid Blueprint (x402) ----
    if settings.PAY_TO:
        app.register_blueprint(analysis_bp)
        logger.info("Paid endpoint enabled: POST /analysis (%s units on %s)", settings.ANALYSIS_PRICE, settings.NETWORK)
    else:
        logger.warning("PAYMENTS_RECEIVABLE_ADDRESS not set - paid endpoint disabled")

    logger.info(ENDPOINTS_BANNER)
    return app


app = create_app()

# ---- Run Server ----
if __name__ == "__main__":
    logger.info("Chain Data Agent running on port %s", settings.PORT)
    app.run(host="0.0.0.0", port=settings.PORT)
