from __future__ import annotations

import logging
from typing import Optional

# Top-level package logger, whichever path the package was imported under
PACKAGE_LOGGER = __name__.rsplit(".common", 1)[0]
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(level: Optional[str] = None, *, logger_name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Attach a stream handler to the package logger once.

    Calling it again only updates the level.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
