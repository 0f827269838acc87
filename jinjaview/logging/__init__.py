"""
Logging Package

Module loggers are plain stdlib loggers; LoggingServiceProvider attaches
handlers to the names listed in app.ALLOWED_LOGGING_HANDLERS.
"""
import logging
from typing import Optional

from jinjaview.logging.logger_config import LoggerConfig, JSONFormatter

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'getLogger',
]


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    logging.getLogger with a name allowlist

    Dotted module names, sanic.* names and the names configured in
    ALLOWED_LOGGING_HANDLERS pass through; any other bare name maps to the
    root logger.

    Example:
        logger = getLogger(__name__)
        logger.debug("Template %s resolved", path)
    """
    if name is None or '.' in name:
        return logging.getLogger(name)

    from jinjaview.support import Config

    handlers = Config.get('app.ALLOWED_LOGGING_HANDLERS', {}) or {}
    if name not in {handler.get('name') for handler in handlers.values()}:
        name = None
    return logging.getLogger(name)
