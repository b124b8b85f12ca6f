"""
Logging Configuration
Sets up the 'attitudegauge' logger for the desktop app and the CLI renderer.
The library modules only create module loggers; they never add handlers.
"""
import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "attitudegauge"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level '{level}'")
        return resolved
    return level


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach console (and optionally file) handlers to the package logger.

    Calling it again replaces the handlers, so the CLI can be invoked
    repeatedly in one process without duplicated output.

    Args:
        level: Logging level, as a number (logging.DEBUG) or a name ("debug").
        log_file: Optional path of a log file, truncated on each call.

    Returns:
        The configured package logger.
    """
    level = _resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
