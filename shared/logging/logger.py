"""Named logger access shared by every module of the service."""

from __future__ import annotations

import logging

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a propagating logger, falling back to basicConfig if the JSON
    handler has not been installed yet."""
    global _configured

    if not _configured:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        _configured = True

    logger = logging.getLogger(name)
    logger.propagate = True
    return logger


def mark_configured():
    """Called by shared.logging.json.configure_logging."""
    global _configured
    _configured = True
