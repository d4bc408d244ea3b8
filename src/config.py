# src/config.py
import os
from dataclasses import dataclass

@dataclass
class Settings:
    # Core
    PORT: int = int(os.getenv("PORT", "3000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Market Data APIs
    COINGECKO_API_BASE: str = os.getenv("COINGECKO_API_BASE", "https://api.coingecko.com/api/v3")
    COINGECKO_API_KEY: str = os.getenv("COINGECKO_API_KEY", "")
    OWLRACLE_API_BASE: str = os.getenv("OWLRACLE_API_BASE", "https://api.owlracle.info/v2")
    OWLRACLE_API_KEY: str = os.getenv("OWLRACLE_API_KEY", "")
    DEFILLAMA_API_BASE: str = os.getenv("DEFILLAMA_API_BASE", "https://api.llama.fi")

    # Outbound HTTP
    HTTP_TIMEOUT_SECS: int = int(os.getenv("HTTP_TIMEOUT_SECS", "10"))
    MAX_WORKERS: int = int(os.getenv("MAX_WORKERS", "8"))

    # x402 Payments
    NETWORK: str = os.getenv("NETWORK", "eip155:84532")
    PAY_TO: str = os.getenv("PAYMENTS_RECEIVABLE_ADDRESS", "")
    FACILITATOR_URL: str = os.getenv("FACILITATOR_URL", "https://x402.org/facilitator")
    ANALYSIS_PRICE: str = os.getenv("ANALYSIS_PRICE", "10000")  # 0.01 USDC (6 decimals)
    PAYMENT_ASSET: str = os.getenv("PAYMENT_ASSET", "0x036CbD53842c5426634e7929541eC2318f3dCF7e")  # USDC on Base Sepolia
    PAYMENT_TIMEOUT_SECS: int = int(os.getenv("PAYMENT_TIMEOUT_SECS", "300"))

    # OpenRouter
    OPENROUTER_API_BASE: str = os.getenv("OPENROUTER_API_BASE", "https://openrouter.ai/api/v1")
    OPENROUTER_API_KEY: str = os.getenv("OPENROUTER_API_KEY", "")
    OPENROUTER_MODEL: str = os.getenv("OPENROUTER_MODEL", "anthropic/claude-3.5-sonnet")

settings = Settings()
