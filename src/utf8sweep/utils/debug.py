"""Universal debug/logging utility for utf8sweep.

Provides setup_logger() and debug() for consistent logging.
Debug output is controlled by the UTF8SWEEP_DEBUG environment variable.
Logs to stderr so per-file failures never mix with regular command output.
"""

import logging
import os
from typing import Optional
import sys

DEBUG_ON = os.getenv("UTF8SWEEP_DEBUG", "0") == "1"

_logger: Optional[logging.Logger] = None


def setup_logger(level: Optional[int] = None) -> logging.Logger:
    """Configure the ``utf8sweep`` logger once and return it.

    Args:
        level: Explicit level; defaults to DEBUG when UTF8SWEEP_DEBUG=1 and
            WARNING otherwise.
    """
    global _logger
    logger = logging.getLogger("utf8sweep")
    if level is None:
        level = logging.DEBUG if DEBUG_ON else logging.WARNING
    if _logger is None and not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter("[%(levelname)s] %(asctime)s %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    _logger = logger
    return logger


def debug(msg: str) -> None:
    """Log a debug message if debugging is enabled."""
    if DEBUG_ON:
        setup_logger().debug(msg)

