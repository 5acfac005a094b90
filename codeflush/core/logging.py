"""Logging utilities for codeflush modules."""

import logging

ROOT_LOGGER_NAME = 'codeflush'


def get_logger(name: str) -> logging.Logger:
    """Get a propagating codeflush logger, quiet until the application configures logging."""
    logger = logging.getLogger(name)
    logger.propagate = True

    if not logging.getLogger().handlers:
        logger.setLevel(logging.WARNING)

    return logger


def setup_logging(level=logging.INFO):
    """
    Configure logging for codeflush modules.

    Sets the level on the package logger and every codeflush logger
    created so far, keeping propagation enabled.

    Args:
        level: Logging level (default: logging.INFO)
    """
    names = [ROOT_LOGGER_NAME] + [
        name for name in logging.Logger.manager.loggerDict
        if name.startswith(ROOT_LOGGER_NAME + '.')
    ]

    for logger_name in names:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True
