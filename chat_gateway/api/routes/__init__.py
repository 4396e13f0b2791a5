"""Routes Package - API endpoint definitions.

Example: from chat_gateway.api.routes.chat import router as chat_router
"""

__all__ = ["chat", "health"]
