"""
Cursor result types.

Every read-style cursor operation returns a CursorResult instead of a bare
optional, so callers can tell why there is no value:

    VALUE        - cursor is valid, ``item`` holds the element
    MAX_OUT      - a non-rotatable move ran past the end
    MIN_OUT      - a non-rotatable move ran before the start
    OUT_OF_RANGE - the cursor does not index any element (desync or empty)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar


T = TypeVar("T")


class CursorState(Enum):
    """Outcome of a cursor read."""
    VALUE = "value"
    MAX_OUT = "max_out"
    MIN_OUT = "min_out"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class CursorResult(Generic[T]):
    """Tagged cursor result. Only VALUE results carry an item."""
    state: CursorState
    item: Optional[T] = None

    @classmethod
    def valid(cls, item: T) -> "CursorResult[T]":
        return cls(CursorState.VALUE, item)

    @classmethod
    def max_out(cls) -> "CursorResult[T]":
        return cls(CursorState.MAX_OUT)

    @classmethod
    def min_out(cls) -> "CursorResult[T]":
        return cls(CursorState.MIN_OUT)

    @classmethod
    def out_of_range(cls) -> "CursorResult[T]":
        return cls(CursorState.OUT_OF_RANGE)

    @property
    def is_valid(self) -> bool:
        return self.state is CursorState.VALUE

    def value(self) -> Optional[T]:
        """
        Convert to a plain optional.

        Returns:
            The element for VALUE results, None for every other state
        """
        if self.state is CursorState.VALUE:
            return self.item
        return None

    def __repr__(self) -> str:
        if self.state is CursorState.VALUE:
            return f"CursorResult.valid({self.item!r})"
        return f"CursorResult.{self.state.value}()"
