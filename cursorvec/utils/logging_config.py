"""
Centralized logging configuration for cursorvec.

All loggers live under the "cursorvec" namespace. Nothing is configured on
import; applications call setup_logging() once if they want output.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Union


# Log format with timestamp, level, module, and message
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "cursorvec"

# Default log directory name, resolved against the current working directory
DEFAULT_LOG_DIRNAME = "logs"


def resolve_level(level: Union[int, str]) -> int:
    """
    Convert a level name such as "DEBUG" to its numeric value.

    Args:
        level: Numeric level or case-insensitive level name

    Returns:
        Numeric logging level
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    log_dir: Optional[Path] = None,
    console: bool = True,
    file: bool = False,
    max_bytes: int = 10 * 1024 * 1024,  # 10 MB
    backup_count: int = 7,
) -> logging.Logger:
    """
    Configure logging for the cursorvec namespace.

    Args:
        level: Logging level (default WARNING)
        log_dir: Directory for log files (default: ./logs in the working directory)
        console: Enable console output
        file: Enable file output with rotation
        max_bytes: Max size per log file before rotation
        backup_count: Number of backup files to keep

    Returns:
        Root logger for the cursorvec namespace
    """
    level = resolve_level(level)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if file:
        log_dir = Path(log_dir) if log_dir else Path.cwd() / DEFAULT_LOG_DIRNAME
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "cursorvec.log",
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (e.g., "container", "config")

    Returns:
        Logger instance under the cursorvec namespace

    Example:
        >>> logger = get_logger("container")
        >>> logger.debug("Cursor clamped to %d", 4)
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
