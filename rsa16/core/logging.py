"""Logging helpers for rsa16 modules."""

import logging
from typing import Optional

PACKAGE_LOGGER = 'rsa16'


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return a module logger that propagates to the root logger.
    
    Until the application configures logging (no root handlers yet),
    module loggers default to WARNING so that debug traces of key
    generation and chaining stay quiet.
    
    Args:
        name: Logger name (typically __name__)
        level: Explicit level; overrides the default
        
    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    
    if level is not None:
        logger.setLevel(level)
    elif not logging.getLogger().handlers:
        logger.setLevel(logging.WARNING)
    
    return logger


def setup_logging(level: int = logging.INFO) -> None:
    """
    Set ``level`` on the package logger and every rsa16 module logger
    created so far.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if name.startswith(PACKAGE_LOGGER + '.') and isinstance(logger, logging.Logger):
            logger.setLevel(level)
            logger.propagate = True
