"""Shared utilities and components for the service."""

from .config import BaseLoggingConfig, BaseServiceConfig
from .constants import Environment

__all__ = [
    "Environment",
    "BaseServiceConfig",
    "BaseLoggingConfig",
]
