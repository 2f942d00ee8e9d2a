"""
Centralized logging configuration for SpliceView

The logging level can be controlled via the SPLICEVIEW_LOG_LEVEL environment
variable.

Environment Variables:
    SPLICEVIEW_LOG_LEVEL: Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
                          Default: WARNING

Examples:
    >>> from spliceview.logging_config import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering 12 glyph columns")
"""

import logging
import os


def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with the specified name

    Args:
        name: Logger name (typically __name__ from the calling module)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure once so repeated calls do not stack handlers
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        level_name = os.getenv("SPLICEVIEW_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_name, None)
        if isinstance(level, int):
            logger.setLevel(level)
        else:
            logger.setLevel(logging.WARNING)
            logger.warning(
                f"Invalid SPLICEVIEW_LOG_LEVEL '{level_name}'. Using WARNING instead. "
                f"Valid levels: DEBUG, INFO, WARNING, ERROR, CRITICAL"
            )

    return logger
