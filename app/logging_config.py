"""Logging configuration."""

import logging
import sys
from typing import Optional

from . import config

_configured = False


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once.

    Args:
        level: Log level name, defaults to LOG_LEVEL from the environment.
    """
    global _configured
    if _configured:
        return

    log_level = (level or config.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    _configured = True
    logging.getLogger(__name__).info(f"Logging configured - Level: {log_level}")
