"""
Logging configuration for timeline export.
Provides structured logging with different levels and optional file output.
"""
import logging
import os
from functools import wraps
from time import time
from typing import Optional

from exceptions import InvalidTimelineError

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    console_output: bool = True,
    logger_name: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for the exporter.

    Not called on import: applications that embed the exporter decide
    how logging is set up.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path to log file. If None, no file logging.
        console_output: Whether to output logs to console
        logger_name: Logger to configure, e.g. "exporters". None means root.

    Returns:
        The configured logger
    """
    target = logging.getLogger(logger_name)
    for handler in list(target.handlers):
        target.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if console_output:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        target.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # File always gets DEBUG level
        file_handler.setFormatter(formatter)
        target.addHandler(file_handler)

    # A file handler needs DEBUG records to reach it
    target.setLevel(logging.DEBUG if log_file else level)
    return target


def get_logger(name: str) -> logging.Logger:
    """Logger for a module (typically ``__name__``)."""
    return logging.getLogger(name)


def log_performance(func):
    """
    Decorator to log function execution time.

    Rejected input (InvalidTimelineError) is an expected outcome and is
    logged at DEBUG; any other failure is logged at ERROR. Both re-raise.

    Usage:
        @log_performance
        def render(...):
            ...
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        start_time = time()
        try:
            result = func(*args, **kwargs)
        except InvalidTimelineError as e:
            logger.debug(f"{func.__name__} rejected input after {time() - start_time:.3f}s: {e}")
            raise
        except Exception as e:
            logger.error(f"{func.__name__} failed after {time() - start_time:.3f}s: {e}")
            raise
        logger.debug(f"{func.__name__} completed in {time() - start_time:.3f}s")
        return result
    return wrapper
