import logging
import sys
from typing import Optional
from docker_wrapper.utils.config import get_setting, is_debug_enabled
from docker_wrapper.utils.constants import (
    DEFAULT_LOG_LEVEL, ENV_LOG_FILE, ENV_LOG_LEVEL, LOG_DATE_FORMAT, LOG_FILE, LOG_FORMAT, LOGGER_NAME
)

def _resolve_level(level: Optional[int], debug: bool) -> int:
    if level is not None:
        return level
    if debug:
        return logging.DEBUG
    level_name = (get_setting(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    resolved = getattr(logging, level_name, None)
    if not isinstance(resolved, int):
        return logging.INFO
    return resolved

def setup_logger(name: str = LOGGER_NAME, level: Optional[int] = None,
                 log_file: Optional[str] = None, debug: Optional[bool] = None) -> logging.Logger:
    """
    Set up the wrapper logger.

    In debug mode everything goes to stderr. Otherwise log lines are appended
    to the log file; when that file cannot be opened the logger falls back to
    stderr, since a missing log must never stop docker from running.

    Args:
        name: Name of the logger
        level: Optional logging level. Defaults to DEBUG in debug mode, else
            DOCKER_WRAPPER_LOG_LEVEL or INFO.
        log_file: Optional log file path. Defaults to DOCKER_WRAPPER_LOG or
            /var/log/docker-wrapper.log.
        debug: Force debug mode on or off. Defaults to is_debug_enabled().

    Returns:
        logging.Logger: Configured logger instance
    """
    if debug is None:
        debug = is_debug_enabled()

    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(level, debug))
    logger.propagate = False

    # Clear existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    fallback_error = None
    handler = None
    if not debug:
        log_file = log_file or get_setting(ENV_LOG_FILE) or LOG_FILE
        try:
            handler = logging.FileHandler(log_file, mode='a')
        except OSError as e:
            fallback_error = e

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if fallback_error is not None:
        logger.warning("Error opening logfile, fallback to STDERR: %s", fallback_error)

    return logger

def flush_logger(name: str = LOGGER_NAME) -> None:
    """Flush all handlers; called right before the process image is replaced."""
    for handler in logging.getLogger(name).handlers:
        handler.flush()

# Shared logger object; setup_logger() only swaps its handlers
logger = logging.getLogger(LOGGER_NAME)
