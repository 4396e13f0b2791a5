"""API Package - FastAPI routes, middleware, and dependencies.

Note: Import routers directly from chat_gateway.api.routes to avoid circular imports.
"""

__all__ = ["routes", "middleware", "deps"]
