"""Centralized logging configuration.

Modules obtain loggers with ``logging.getLogger(__name__)``; the application
calls ``setup_logging`` once at startup to attach a stdout handler.
"""

import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def setup_logging(level: str | int = "INFO") -> None:
    """Configure the root logger once.

    Later calls only update the level, so the lifespan can run more than
    once (e.g. across test clients) without stacking handlers.

    Args:
        level: Logging level name or number
    """
    global _initialized
    root = logging.getLogger()
    root.setLevel(level)
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root.addHandler(handler)
    _initialized = True
