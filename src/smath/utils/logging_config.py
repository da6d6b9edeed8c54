import logging
import os
import sys
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - [%(levelname)s] - %(message)s'
LOG_LEVEL_ENV = 'SMATH_LOG_LEVEL'


def resolve_level(level: Optional[Union[int, str]] = None) -> int:
    """
    Turns a level name or number into a logging level.

    When no level is given the SMATH_LOG_LEVEL environment variable is
    consulted, falling back to INFO.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, 'INFO')
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_logging(level: Optional[Union[int, str]] = None):
    """
    Configures basic logging for smath consumers.

    Args:
        level: The logging level (e.g., logging.INFO, "DEBUG"). Defaults to
            the SMATH_LOG_LEVEL environment variable.
    """
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        stream=sys.stdout
    )


def get_logger(name: str):
    """
    Retrieves a logger instance with a specific name.

    Args:
        name (str): The name for the logger, typically __name__.

    Returns:
        A logging.Logger instance.
    """
    return logging.getLogger(name)
