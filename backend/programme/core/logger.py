"""
Shared application logger.
"""

import logging

from programme.core.config import get_settings

LOGGER_NAME = "programme"


def _configure_logger() -> logging.Logger:
    settings = get_settings()
    configured = logging.getLogger(LOGGER_NAME)
    if not configured.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
        configured.addHandler(handler)
    configured.setLevel(settings.LOG_LEVEL)
    return configured


logger = _configure_logger()
