"""
Tests for discovery and health routes.
"""
from unittest.mock import Mock, patch

from tests.fakes import make_response


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.get_json()["ok"] is True


def test_cors_enabled(client):
    origin = "https://example.org"
    res = client.get("/health", headers={"Origin": origin})
    # older flask-cors answers "*", newer releases echo the caller's origin
    assert res.headers.get("Access-Control-Allow-Origin") in ("*", origin)


def test_entrypoint_catalogue_free_only(client):
    entries = client.get("/entrypoints").get_json()["entrypoints"]

    assert [e["key"] for e in entries] == ["prices", "gas", "tvl"]
    assert entries[0]["path"] == "/entrypoints/prices/invoke"
    assert "coins" in entries[0]["input"]["properties"]


def test_entrypoint_catalogue_with_paid(paid_client):
    entries = paid_client.get("/entrypoints").get_json()["entrypoints"]
    paid = entries[-1]

    assert paid["key"] == "analysis"
    assert paid["path"] == "/analysis"
    assert paid["price"]["display"].endswith("USDC")


def test_manifest_free(client):
    free = client.get("/.well-known/agent.json").get_json()
    assert free["name"] == "chain-data-agent"
    assert "payments" not in free


def test_manifest_paid(paid_client):
    paid = paid_client.get("/.well-known/agent.json").get_json()
    assert paid["payments"]["protocol"] == "x402"
    assert paid["payments"]["payTo"] == "0x1111111111111111111111111111111111111111"


def test_test_env_hides_values(paid_client):
    body = paid_client.get("/test-env").get_json()
    assert body["payments"] is True
    assert body["openrouter"] is False


def test_health_card_degraded(client, upstream):
    upstream.add("/ping", make_response(200, {"gecko_says": "(V3) To the Moon!"}))
    upstream.add("/eth/gas", make_response(200, {}))
    upstream.add("llama.fi/v2/chains", make_response(503))

    body = client.get("/health-card").get_json()
    statuses = {c["name"]: c["status"] for c in body["system_status"]}

    assert statuses == {"CoinGecko": "OK", "Owlracle": "OK", "DeFiLlama": "FAIL"}
    assert body["status"] == "degraded"
    assert body["process"]["pid"] > 0
    assert body["process"]["rss_mb"] > 0


def test_health_card_reports_own_process_memory(client, upstream):
    proc = Mock(pid=4321)
    proc.memory_info.return_value = Mock(rss=64 * 1024**2)
    proc.memory_percent.return_value = 1.234
    proc.num_threads.return_value = 7

    with patch("src.routes.health_card.psutil.Process", return_value=proc):
        body = client.get("/health-card").get_json()

    assert body["process"] == {"pid": 4321, "rss_mb": 64.0, "memory_percent": 1.23, "threads": 7}
    assert "memory" not in body
