"""
Prometheus Metrics for the Package Search Bot.

DATA FLOW:
    This file                  presentation/api/metrics.py         Prometheus
    ─────────                  ────────────────────────────         ──────────
    Define metrics ──────────► /metrics endpoint ──────────────►   scraper

METRIC TYPES:
    - Counter: Value only goes up (total count, e.g., total searches)
    - Histogram: Distribution (for percentiles like P95, e.g., latency)
"""

from prometheus_client import (
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
PACKAGE_SEARCH_LATENCY = Histogram(
    "package_search_latency_seconds",
    "Latency of package registry searches in seconds",
    buckets=[0.1, 0.25, 0.5, 1, 2, 5, 10],
)

PACKAGE_SEARCH_TOTAL = Counter(
    "package_search_total",
    "Total number of package registry searches by outcome",
    ["outcome"],
)

BOT_ACTIVITIES_TOTAL = Counter(
    "bot_activities_total",
    "Total number of inbound bot activities by type",
    ["activity_type"],
)


# =============================================================================
# LABEL CONSTANTS
# =============================================================================
class SearchOutcome:
    """Outcome labels for package_search_total metric."""

    SUCCESS = "success"
    FAILURE = "failure"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def observe_search_latency(duration: float):
    """Call to record registry search latency. Integration point: search_packages.py"""
    PACKAGE_SEARCH_LATENCY.observe(duration)


def increment_search(outcome: str):
    """Call once per registry search. Integration point: search_packages.py"""
    PACKAGE_SEARCH_TOTAL.labels(outcome=outcome).inc()


def increment_activity(activity_type: str):
    """Call once per inbound activity. Integration point: adapters/teams/teams_routes.py"""
    BOT_ACTIVITIES_TOTAL.labels(activity_type=activity_type or "unknown").inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Called by: presentation/api/metrics.py

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


# =============================================================================
# EXPORTS
# =============================================================================
__all__ = [
    "observe_search_latency",
    "increment_search",
    "increment_activity",
    "get_metrics_content",
    "SearchOutcome",
]
