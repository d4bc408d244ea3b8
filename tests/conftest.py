"""
Shared fixtures: a fake `requests` layer and Flask clients with and without
the paid endpoint mounted.
"""
from unittest.mock import patch

import pytest

from src.app import create_app
from src.config import settings
from tests.fakes import FakeUpstream


@pytest.fixture
def upstream():
    fake = FakeUpstream()
    with patch("src.services.http.requests.get", side_effect=fake):
        yield fake


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(settings, "PAY_TO", "")
    return create_app().test_client()


@pytest.fixture
def paid_client(monkeypatch):
    monkeypatch.setattr(settings, "PAY_TO", "0x1111111111111111111111111111111111111111")
    monkeypatch.setattr(settings, "OPENROUTER_API_KEY", "")
    return create_app().test_client()


@pytest.fixture
def gas_payload():
    return {
        "timestamp": "2026-01-01T00:00:00.000Z",
        "baseFee": 12.5,
        "avgTime": 12.1,
        "speeds": [
            {"acceptance": 0.35, "maxFeePerGas": 13.0, "estimatedFee": 0.5},
            {"acceptance": 0.6, "maxFeePerGas": 14.0, "estimatedFee": 0.6},
            {"acceptance": 0.9, "maxFeePerGas": 15.0, "estimatedFee": 0.7},
            {"acceptance": 1.0, "maxFeePerGas": 18.0, "estimatedFee": 0.9},
        ],
    }


@pytest.fixture
def chains_payload():
    return [
        {"name": "Ethereum", "tvl": 60_000_000_000, "tokenSymbol": "ETH", "chainId": 1},
        {"name": "Solana", "tvl": 9_000_000_000, "tokenSymbol": "SOL", "chainId": None},
        {"name": "Tiny", "tvl": 50_000_000, "tokenSymbol": "TNY", "chainId": 999},
        {"name": "Dead", "tvl": 0, "tokenSymbol": "DED", "chainId": 1000},
        {"name": "Base", "tvl": 3_000_000_000, "tokenSymbol": None, "chainId": 8453},
    ]
