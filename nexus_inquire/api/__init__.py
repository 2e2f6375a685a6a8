"""FastAPI endpoints for the Nexus Inquire completion proxy.

Endpoints:
    - GET /health: Service health status
    - POST /api/completion: One chat turn answered by the upstream model
"""

from nexus_inquire.api.app import app, create_app

__all__ = ["app", "create_app"]
