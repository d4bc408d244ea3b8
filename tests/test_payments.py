"""
Tests for the x402 payment gate on POST /analysis.
"""
import base64
import json

import pytest

from src.config import Settings, settings
from src.services import payments
from tests.fakes import make_response


class TestPaymentRequirements:

    def test_terms(self):
        config = Settings(PAY_TO="0xabc", NETWORK="eip155:8453", ANALYSIS_PRICE="10000")
        req = payments.payment_requirements(config)

        assert req["x402Version"] == 2
        assert req["error"] == "Payment required"
        assert req["description"] == "Premium AI-powered market analysis - 0.01 USDC"
        assert req["accepts"] == [{
            "scheme": "exact",
            "network": "eip155:8453",
            "amount": "10000",
            "asset": config.PAYMENT_ASSET,
            "payTo": "0xabc",
            "maxTimeoutSeconds": config.PAYMENT_TIMEOUT_SECS,
            "extra": {"name": "USD Coin", "version": "2"},
        }]

    @pytest.mark.parametrize("amount,expected", [("10000", "0.01"), ("1000000", "1"), ("1", "0.000001")])
    def test_format_usdc(self, amount, expected):
        assert payments.format_usdc(amount) == expected

    def test_encode_challenge_decodes_back(self):
        req = payments.payment_requirements(Settings(PAY_TO="0xabc"))
        decoded = json.loads(base64.b64decode(payments.encode_challenge(req)))
        assert decoded == req


class TestAnalysisGate:

    def test_missing_header_returns_402_challenge(self, paid_client, upstream):
        res = paid_client.post("/analysis", json={"focus": "overview"})
        body = res.get_json()

        assert res.status_code == 402
        assert body["accepts"][0]["payTo"] == "0x1111111111111111111111111111111111111111"
        assert body["accepts"][0]["network"] == settings.NETWORK
        header = json.loads(base64.b64decode(res.headers["X-PAYMENT-REQUIRED"]))
        assert header == body
        assert res.headers["Payment-Required"] == res.headers["X-PAYMENT-REQUIRED"]
        assert upstream.calls == []

    def test_empty_header_is_not_payment(self, paid_client, upstream):
        res = paid_client.post("/analysis", json={}, headers={"X-PAYMENT": ""})
        assert res.status_code == 402

    @pytest.mark.parametrize("header", ["X-PAYMENT", "Payment", "Payment-Signature"])
    def test_any_payment_header_is_accepted(self, paid_client, upstream, header):
        upstream.add("simple/price", make_response(200, {"bitcoin": {"usd": 1}}))
        upstream.add("llama.fi/v2/chains", make_response(200, []))

        res = paid_client.post("/analysis", json={"chains": []}, headers={header: "opaque-proof"})

        assert res.status_code == 200
        assert res.get_json()["status"] == "succeeded"

    def test_not_mounted_without_payee(self, client):
        res = client.post("/analysis", json={}, headers={"X-PAYMENT": "proof"})
        assert res.status_code == 404
