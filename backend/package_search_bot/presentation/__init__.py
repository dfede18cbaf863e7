"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers for operational endpoints (metrics)

The Teams webhook lives with its adapter in adapters/teams/teams_routes.py.
"""
