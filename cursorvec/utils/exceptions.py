"""
Custom exceptions for cursorvec.

The default container contract never raises for cursor misuse; results are
reported through CursorResult, Optional values and booleans. These
exceptions cover argument validation, configuration loading and the opt-in
strict mode, where raw movement fails loudly instead of returning False.
"""

from typing import Optional, Dict, Any


class CursorVecError(Exception):
    """Base exception for all cursorvec errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Argument Errors
# =============================================================================

class InvalidIndexError(CursorVecError, ValueError):
    """Raised when a cursor index is negative."""

    def __init__(self, index: int, **kwargs):
        message = f"Cursor index must be non-negative: {index}"
        super().__init__(message, {"index": index, **kwargs})
        self.index = index


class InvalidAmountError(CursorVecError, ValueError):
    """Raised when a movement step count is negative."""

    def __init__(self, amount: int, **kwargs):
        message = f"Step amount must be non-negative: {amount}"
        super().__init__(message, {"amount": amount, **kwargs})
        self.amount = amount


# =============================================================================
# Strict Mode Errors
# =============================================================================

class StrictModeError(CursorVecError):
    """Base exception for failures reported by strict-mode movement."""
    pass


class EmptyContainerError(StrictModeError):
    """Raised when moving the cursor of an empty container."""

    def __init__(self, message: str = "empty container", **kwargs):
        super().__init__(message, kwargs)


class CursorOutOfRangeError(StrictModeError):
    """Raised when moving a cursor that no longer indexes an element."""

    def __init__(self, cursor: int, length: int, **kwargs):
        message = f"Cursor {cursor} is out of range for length {length}"
        super().__init__(message, {"cursor": cursor, "length": length, **kwargs})
        self.cursor = cursor
        self.length = length


class CursorBoundaryError(StrictModeError):
    """
    Raised when a non-rotatable move runs past either end.

    The cursor has already been clamped to the boundary when this is raised.
    """

    def __init__(self, direction: str, cursor: int, **kwargs):
        message = f"Cursor hit the {'end' if direction == 'next' else 'start'} of the container"
        super().__init__(message, {"direction": direction, "cursor": cursor, **kwargs})
        self.direction = direction
        self.cursor = cursor


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigError(CursorVecError):
    """Raised when configuration data cannot be applied."""

    def __init__(self, message: str, section: Optional[str] = None, **kwargs):
        super().__init__(message, {"section": section, **kwargs})
        self.section = section
