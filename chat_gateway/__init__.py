"""Chat Gateway - multi-provider chat completion gateway.

Note: Import `app` directly from `chat_gateway.main` to avoid circular imports.
"""

__all__ = ["main", "api", "core", "models"]
