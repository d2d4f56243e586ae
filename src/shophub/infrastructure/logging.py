"""
Centralized logging configuration for ShopHub.

Usage:
    from shophub.infrastructure.logging import get_logger
    logger = get_logger(__name__)

    logger.info("Catalog refreshed")
    logger.warning("Ignoring unreadable cart snapshot", exc_info=True)
"""

import logging
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Point ShopHub's stderr handler at the current stderr and set the level.

    Safe to call repeatedly; the previous ShopHub handler is replaced so
    a redirected stderr (CLI test runners) is picked up.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for old in [h for h in root.handlers if getattr(h, "_shophub", False)]:
        root.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._shophub = True  # type: ignore[attr-defined]
    root.addHandler(handler)

    # Request lines from httpx are noise at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


@cache
def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
