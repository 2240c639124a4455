"""
Utils package for cursorvec.

Contains shared utilities:
- logging_config: Centralized logging configuration
- exceptions: Custom exception classes
"""

from cursorvec.utils.logging_config import get_logger, setup_logging
from cursorvec.utils.exceptions import (
    CursorVecError,
    InvalidIndexError,
    InvalidAmountError,
    StrictModeError,
    EmptyContainerError,
    CursorOutOfRangeError,
    CursorBoundaryError,
    ConfigError,
)

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Exceptions
    "CursorVecError",
    "InvalidIndexError",
    "InvalidAmountError",
    "StrictModeError",
    "EmptyContainerError",
    "CursorOutOfRangeError",
    "CursorBoundaryError",
    "ConfigError",
]
