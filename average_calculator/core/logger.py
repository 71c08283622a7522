from __future__ import annotations

import logging

from shared.logging.json import configure_logging as _shared_configure_logging
from shared.logging.logger import get_logger as _shared_get_logger

from .config import settings

_configured = False


def configure_logging(force: bool = False):
    """Install the JSON handler on the root logger once per process."""
    global _configured
    if _configured and not force:
        return
    _shared_configure_logging(
        service=settings.otel_service_name,
        level=settings.app_log_level,
        environment=settings.app_environment,
        redaction_patterns=settings.app_log_redaction_patterns,
    )
    _configured = True


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return _shared_get_logger(name)
