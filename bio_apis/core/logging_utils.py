from __future__ import annotations

import logging

from bio_apis.config import load_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Logger for CLI entry points. Configures the root handler once, at BIO_APIS_LOG_LEVEL."""
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        level = logging.getLevelName(load_settings().log_level.upper())
        logging.basicConfig(
            level=level if isinstance(level, int) else logging.INFO,
            format=LOG_FORMAT,
        )
    return logger
