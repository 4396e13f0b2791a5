"""
Core configuration module for the Chat Gateway.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the CHAT_GATEWAY_ prefix.

Provider API keys are deliberately absent: every request carries its own key
and the gateway never stores one.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All fields use the CHAT_GATEWAY_ prefix for environment variables.
    Example: CHAT_GATEWAY_LOG_LEVEL=DEBUG
    """

    # =========================================================================
    # Service Configuration
    # =========================================================================
    service_name: str = Field(
        default="chat-gateway",
        description="Name of the service for logging and identification",
    )
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment environment",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    cors_origins: str = Field(
        default="",
        description="Comma-separated allowed origins outside development",
    )

    # =========================================================================
    # Upstream Endpoints
    # =========================================================================
    openai_base_url: str = Field(
        default="https://api.openai.com/v1",
        description="Base URL of the OpenAI-compatible chat completions API",
    )
    openai_model: str = Field(default="gpt-3.5-turbo")
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Base URL of the Gemini generateContent API",
    )
    gemini_model: str = Field(default="gemini-pro")
    perplexity_base_url: str = Field(
        default="https://api.perplexity.ai",
        description="Base URL of the Perplexity chat completions API",
    )
    perplexity_model: str = Field(default="sonar-pro")
    favicon_url_template: str = Field(
        default="https://www.google.com/s2/favicons?domain={hostname}&sz=64",
        description="Favicon image URL template, formatted with {hostname}",
    )

    # =========================================================================
    # HTTP Client Configuration
    # =========================================================================
    upstream_timeout_seconds: float = Field(
        default=120.0,
        ge=1.0,
        le=600.0,
        description="Timeout in seconds for upstream provider calls",
    )
    max_connections: int = Field(
        default=100,
        ge=1,
        description="Maximum pooled connections for upstream calls",
    )

    model_config = {
        "env_prefix": "CHAT_GATEWAY_",
        "case_sensitive": False,
        "extra": "ignore",
    }

    # =========================================================================
    # Field Validators
    # =========================================================================
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("favicon_url_template")
    @classmethod
    def validate_favicon_template(cls, v: str) -> str:
        """Favicon template must reference the hostname placeholder."""
        if "{hostname}" not in v:
            raise ValueError("favicon_url_template must contain '{hostname}'")
        return v

    def get_cors_origins(self) -> list[str]:
        """
        Get CORS allowed origins based on environment.

        - Development: Allow all origins (["*"])
        - Staging/Production: Parse cors_origins (comma-separated)
        - If not configured outside development: empty list
        """
        if self.environment == "development":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# =============================================================================
# Settings Singleton
# =============================================================================


@lru_cache
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Uses functools.lru_cache to ensure only one Settings instance is created.

    Returns:
        Settings: The application settings instance.
    """
    return Settings()
