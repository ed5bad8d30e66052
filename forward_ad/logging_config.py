"""
Logging Configuration

Centralized logging setup for forward_ad. Library modules only create module
loggers and emit DEBUG records; handlers are installed by the application
(or by the ``python -m forward_ad`` command line) via `configure_logging`.

Usage:
    from forward_ad.logging_config import configure_logging, get_logger

    configure_logging(logging.DEBUG)
    logger = get_logger(__name__)
    logger.debug("tgamma tangent from finite difference")
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library default: silent unless the application configures handlers.
logging.getLogger("forward_ad").addHandler(logging.NullHandler())


def configure_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Configure logging for an application using forward_ad.

    Parameters
    ----------
    level : int
        Logging level (e.g., logging.DEBUG, logging.INFO)
    log_file : str, optional
        Path to log file. If None, logs only to stderr.
    """
    handlers = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Parameters
    ----------
    name : str
        Logger name, typically ``__name__`` of the calling module.
    """
    return logging.getLogger(name)
