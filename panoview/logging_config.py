"""
Logging Configuration
Sets up the package logger for the viewer.
"""
import logging
import sys
from typing import Optional, Union


def parse_level(level: Union[int, str, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else default


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'panoview' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, "info")
        log_file: Optional path to save logs to a file.
    """
    level = parse_level(level)
    logger = logging.getLogger("panoview")
    logger.setLevel(level)

    # Avoid duplicate handlers when called twice (tests, re-launch)
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning("Could not open log file %s: %s", log_file, e)

    logger.debug("Logging initialized.")
