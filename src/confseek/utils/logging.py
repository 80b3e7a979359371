"""
Logging configuration for confseek.

The library only emits records; nothing is printed until the application
configures logging, either through its own handlers or with setup_logging().
"""

import logging
import sys
from pathlib import Path

from rich.logging import RichHandler

LOGGER_NAME = "confseek"


class FileFormatter(logging.Formatter):
    """Formatter for file logs - clean and parseable."""

    def __init__(self) -> None:
        super().__init__(fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S")


# Map string level names to logging constants
LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _parse_level(level: str | int) -> int:
    """
    Parse logging level from string or int.

    Args:
        level: Logging level as string (DEBUG, INFO, etc.) or int

    Returns:
        Logging level constant
    """
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level_upper = level.upper()
        if level_upper in LEVEL_MAP:
            return LEVEL_MAP[level_upper]
    # Default to WARNING if invalid
    return logging.WARNING


def setup_logging(
    level: str | int = logging.WARNING,
    log_file: str | Path | None = None,
    format_string: str | None = None,
    file_mode: str = "a",
    console_enabled: bool = True,
    use_rich: bool = True,
) -> logging.Logger:
    """
    Setup logging for confseek diagnostics.

    Args:
        level: Logging level as string (DEBUG, INFO, etc.) or int (default: WARNING)
        log_file: Optional file path to write logs to (default: None, console only)
        format_string: Optional format string for the plain console handler
        file_mode: File mode for file handler - 'a' for append, 'w' for overwrite (default: 'a')
        console_enabled: Whether to enable console logging (default: True)
        use_rich: Whether to render console output with rich (default: True)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)

    # Keep the library's NullHandler, replace anything installed by a previous call
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()

    level_int = _parse_level(level)
    logger.setLevel(level_int)

    if console_enabled:
        console_handler: logging.Handler
        if use_rich:
            console_handler = RichHandler(
                level=level_int,
                show_time=True,
                show_path=False,
                markup=False,
                rich_tracebacks=True,
                log_time_format="[%X]",
            )
        else:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level_int)
            console_handler.setFormatter(
                logging.Formatter(format_string or "%(levelname)s: %(name)s - %(message)s")
            )
        logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        # Create parent directory if it doesn't exist
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode=file_mode, encoding="utf-8")
        # File captures everything the logger lets through
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(FileFormatter())
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (default: "confseek")

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    # Child loggers (e.g. "confseek.resolver") reach the package handlers
    logger.propagate = True
    return logger
