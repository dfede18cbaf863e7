"""Observability package for the Package Search Bot."""

from package_search_bot.observability.metrics import (
    observe_search_latency,
    increment_search,
    increment_activity,
    get_metrics_content,
    SearchOutcome,
)

__all__ = [
    "observe_search_latency",
    "increment_search",
    "increment_activity",
    "get_metrics_content",
    "SearchOutcome",
]
