"""
API Routers - FastAPI endpoint definitions.
"""

from package_search_bot.presentation.api.metrics import router as metrics_router

__all__ = [
    "metrics_router",
]
