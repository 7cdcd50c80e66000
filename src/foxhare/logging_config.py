"""
Logging Configuration
Sets up the 'foxhare' logger. Records go to stderr so they never interleave
with the menu and charts printed on stdout.
"""
import logging
import sys
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def resolve_level(level: Union[int, str]) -> int:
    """Turn a level name such as 'info' into its numeric value."""
    if isinstance(level, int):
        return level
    name = level.upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level '{level}', expected one of {', '.join(LOG_LEVELS)}.")
    return getattr(logging, name)


def setup_logging(level: Union[int, str] = "WARNING", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'foxhare' logger and returns it.

    Args:
        level: Level name as given to --log-level, or a logging constant.
        log_file: Optional path to also write the session log to.
    """
    numeric_level = resolve_level(level)
    logger = logging.getLogger("foxhare")
    logger.setLevel(numeric_level)

    # Replace handlers from an earlier setup instead of stacking them
    for old in logger.handlers:
        old.close()
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized at {logging.getLevelName(numeric_level)}.")
    return logger
