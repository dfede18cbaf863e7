"""
Prometheus Metrics Endpoint for the Package Search Bot.

PURPOSE:
    Expose /metrics endpoint for a Prometheus scraper to collect metrics.

DATA FLOW:
    observability/metrics.py         This file                    Observability Stack
    ────────────────────────         ─────────                    ───────────────────
    Define & record metrics ──────►  /metrics endpoint ──────────► Prometheus ──► Grafana

    Test with: curl http://localhost:3978/metrics
"""

from fastapi import APIRouter, Response
from package_search_bot.observability.metrics import get_metrics_content


router = APIRouter(prefix="/metrics", tags=["observability"])


@router.get("")
async def metrics():
    """
    Prometheus metrics endpoint.

    Returns metrics in Prometheus text format.
    """
    content, content_type = get_metrics_content()
    return Response(content=content, media_type=content_type)
