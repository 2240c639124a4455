"""
Cursors module - cursor index state machine and result types.

Exports:
    - Cursor: Index with boundary clamping or wraparound
    - StepOutcome: How a movement request was resolved
    - CursorState: The four outcomes of a cursor read
    - CursorResult: Tagged result carrying the element for valid reads
"""

from cursorvec.cursors.cursor import Cursor, StepOutcome
from cursorvec.cursors.state import CursorState, CursorResult

__all__ = [
    "Cursor",
    "StepOutcome",
    "CursorState",
    "CursorResult",
]
