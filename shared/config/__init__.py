"""Shared configuration base classes.

Logging and service identity settings live here so the service settings only
declare what is specific to the service.
"""

from pydantic_settings import BaseSettings


class BaseLoggingConfig(BaseSettings):
    """Common logging configuration."""

    app_log_level: str = "INFO"
    app_log_redaction_patterns: list[str] = [
        "password",
        "token",
        "secret",
        "key",
        "authorization",
        "cookie",
    ]
    app_environment: str = "production"


class BaseServiceConfig(BaseLoggingConfig):
    """Base configuration for an HTTP service.

    The otel_service_name should be overridden by the service.
    """

    otel_service_name: str = "unknown"
    host: str = "0.0.0.0"
    port: int = 8000


__all__ = ["BaseLoggingConfig", "BaseServiceConfig"]
