"""
Shared logger for the audit pipeline.

Every module calls `get_logger()` and logs through the same "tapaudit" logger.
Level comes from TAPAUDIT_LOG_LEVEL (default INFO).
"""

import logging
import os

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str = "tapaudit") -> logging.Logger:
    logger = logging.getLogger(name)
    root = logging.getLogger("tapaudit")
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
        root.setLevel(os.getenv("TAPAUDIT_LOG_LEVEL", "INFO").upper())
    return logger
