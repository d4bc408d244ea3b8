# src/routes/health_card.py
from flask import Blueprint, jsonify
import time, requests, psutil

from src.config import settings

health_card_bp = Blueprint("health_card_bp", __name__)

start_time = time.time()

def check_upstream(name, url):
    """Probe one upstream API; DOWN means no HTTP answer at all."""
    try:
        t0 = time.perf_counter()
        res = requests.get(url, timeout=min(settings.HTTP_TIMEOUT_SECS, 6))
        return {
            "name": name,
            "status": "OK" if res.status_code == 200 else "FAIL",
            "http_status": res.status_code,
            "latency_ms": round((time.perf_counter() - t0) * 1000, 2),
        }
    except requests.exceptions.RequestException as e:
        return {"name": name, "status": "DOWN", "error": str(e), "latency_ms": None}

@health_card_bp.route("/health-card", methods=["GET"])
def health_card():
    proc = psutil.Process()
    rss = proc.memory_info().rss

    checks = [
        check_upstream("CoinGecko", f"{settings.COINGECKO_API_BASE}/ping"),
        check_upstream("Owlracle", f"{settings.OWLRACLE_API_BASE}/eth/gas"),
        check_upstream("DeFiLlama", f"{settings.DEFILLAMA_API_BASE}/v2/chains"),
    ]

    return jsonify({
        "uptime_sec": round(time.time() - start_time, 2),
        "process": {
            "pid": proc.pid,
            "rss_mb": round(rss / (1024**2), 2),
            "memory_percent": round(proc.memory_percent(), 2),
            "threads": proc.num_threads(),
        },
        "system_status": checks,
        "environment": {
            "port": settings.PORT,
            "openrouter_enabled": bool(settings.OPENROUTER_API_KEY),
            "payments_enabled": bool(settings.PAY_TO),
        },
        "status": "healthy" if all(c["status"] == "OK" for c in checks) else "degraded"
    })
