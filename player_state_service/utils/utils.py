"""Utility helpers for the player state service.

This module centralizes behaviors shared across the API and processor layers:
application info for the `/api/info` endpoint and logging setup.
"""

import logging
import sys

from player_state_service.processor.binder import Mode
from player_state_service.settings import settings


def get_app_info() -> dict:
    """Return general information about the application.

    Used by the `/api/info` endpoint.

    Returns:
        dict: Application information (name, version, binder modes, sword level bound).
    """
    return {"service_app_name": "player-state-service",
            "service_version": settings.PLAYER_STATE_SERVICE_VERSION,
            "binder_modes": [mode.value for mode in Mode],
            "max_sword_level": settings.MAX_SWORD_LEVEL}


def setup_logging(component_name: str = "config_logger", log_level: int = 20) -> logging.Logger:
    """Configure a logger that writes to stdout with a consistent format.

    Args:
        component_name: Logger name to configure.
        log_level: Logging level to set on the logger and handler.

    Returns:
        logging.Logger: Configured logger instance.
    """
    root_logger = logging.getLogger(component_name)
    log_format = '[%(asctime)s] [%(levelname)s] %(name)s: %(message)s'
    log_handler = logging.StreamHandler(sys.stdout)
    log_handler.setFormatter(logging.Formatter(fmt=log_format))
    log_handler.setLevel(level=log_level)
    root_logger.setLevel(level=log_level)
    root_logger.propagate = False

    # only add the handler if a previous one does not exists
    handler_exists = False
    for h in root_logger.handlers:
        if isinstance(h, logging.StreamHandler) and h.level == log_handler.level:
            handler_exists = True
            break

    if not handler_exists:
        root_logger.addHandler(log_handler)

    return root_logger
