"""
Cursor index state machine.

The cursor does not own the sequence it points into. Every operation takes
the current length, so a sequence that shrank behind the cursor's back is
detected as a desync instead of being silently clamped.
"""

from enum import Enum

from cursorvec.utils.exceptions import InvalidAmountError, InvalidIndexError


class StepOutcome(Enum):
    """How a movement request was resolved."""
    MOVED = "moved"          # Full displacement applied (wrapped if rotatable)
    CLAMPED = "clamped"      # Stopped at a boundary, extra steps discarded
    EMPTY = "empty"          # Nothing to move over
    DESYNCED = "desynced"    # Cursor was already out of range, not moved


class Cursor:
    """
    Index into a sequence with optional wraparound.

    Usage:
        cursor = Cursor(rotation=False)
        cursor.advance(3, length=5)   # StepOutcome.MOVED, index 3
        cursor.advance(3, length=5)   # StepOutcome.CLAMPED, index 4
    """

    def __init__(self, index: int = 0, rotation: bool = False):
        self._index = 0
        self.set_index(index)
        self.rotation = rotation

    @property
    def index(self) -> int:
        return self._index

    def set_index(self, index: int) -> None:
        """Set the raw index. No bounds check against any sequence."""
        if index < 0:
            raise InvalidIndexError(index)
        self._index = index

    def is_valid(self, length: int) -> bool:
        return self._index < length

    def clamp(self, length: int) -> bool:
        """
        Bring the index back inside ``[0, length - 1]``.

        An empty sequence resets the index to 0; callers report that state
        as unset.

        Returns:
            True if the index changed
        """
        if length == 0:
            target = 0
        elif self._index >= length:
            target = length - 1
        else:
            return False

        changed = target != self._index
        self._index = target
        return changed

    def advance(self, amount: int, length: int) -> StepOutcome:
        """Move forward by ``amount`` steps."""
        return self._step(amount, length, forward=True)

    def retreat(self, amount: int, length: int) -> StepOutcome:
        """Move backward by ``amount`` steps."""
        return self._step(amount, length, forward=False)

    def _step(self, amount: int, length: int, forward: bool) -> StepOutcome:
        if amount < 0:
            raise InvalidAmountError(amount)
        if length == 0:
            return StepOutcome.EMPTY
        if not self.is_valid(length):
            return StepOutcome.DESYNCED

        target = self._index + amount if forward else self._index - amount

        if self.rotation:
            self._index = target % length
            return StepOutcome.MOVED

        if target >= length:
            self._index = length - 1
            return StepOutcome.CLAMPED
        if target < 0:
            self._index = 0
            return StepOutcome.CLAMPED

        self._index = target
        return StepOutcome.MOVED

    def __repr__(self) -> str:
        return f"Cursor(index={self._index}, rotation={self.rotation})"
