"""Logging utilities for quist modules."""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger that inherits its configuration from the root logger.

    Loggers returned here work with ``basicConfig()`` or
    ``quist.setup_logging()`` without any per-module setup. The logger will:
    - Propagate to the root logger
    - Only set a default level when it has none and the root logger has no
      handlers

    Args:
        name: Logger name (``quist.api``, ``quist.lifecycle``...)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True

    root_logger = logging.getLogger()
    if not root_logger.handlers and logger.level == logging.NOTSET:
        logger.setLevel(logging.WARNING)  # Default to WARNING if no basicConfig

    return logger
