"""
Logger factory for the Futures Leverage Dashboard.
"""

import logging

from . import config

_configured = False


def _configure_root() -> None:
    global _configured
    if _configured:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATEFMT))
    package_logger = logging.getLogger("leverage_dashboard")
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))
    _configured = True


def get_logger(name: str) -> logging.Logger:
    _configure_root()
    return logging.getLogger(name)
