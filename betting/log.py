import logging
from typing import Optional, Union

from betting.config import LOG_DATE_FORMAT, LOG_FORMAT, LOG_LEVEL


def setup_logging(name: Optional[str] = None, level: Union[int, str, None] = None) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (usually "betting" or __name__ from the caller)
        level: Logging level, defaults to BETTING_LOG_LEVEL

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(level if level is not None else LOG_LEVEL)
    return logger
