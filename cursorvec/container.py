"""
List container with a built-in cursor.

The cursor survives edits to the underlying list. Edits made directly (via
``elements``, ``append``, ``drain``, ``retain`` ...) never touch the cursor,
so it may end up past the end of a shrunken list; reads then report
OUT_OF_RANGE until ``update_cursor()`` is called. ``modify()`` runs an edit
and resyncs in one step.
"""

from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from cursorvec.config import Config, get_config
from cursorvec.cursors import Cursor, CursorResult, StepOutcome
from cursorvec.utils.exceptions import (
    CursorBoundaryError,
    CursorOutOfRangeError,
    EmptyContainerError,
)
from cursorvec.utils.logging_config import get_logger


logger = get_logger("container")

T = TypeVar("T")
R = TypeVar("R")

NEXT = "next"
PREV = "prev"


class CursorVec(Generic[T]):
    """
    A list paired with a single cursor.

    Cursor reads return a CursorResult (VALUE / MAX_OUT / MIN_OUT /
    OUT_OF_RANGE). The ``*_always`` variants return the element or None.
    The raw ``move_*`` operations return a bool, or raise in strict mode.

    Usage:
        vec = CursorVec().with_container(["first", "second", "third"])

        vec.get_current().value()        # "first"
        vec.move_next_and_get().value()  # "second"
        vec.move_next_nth_and_get(5)     # CursorResult.max_out(), cursor at 2

        vec.elements.pop()               # direct edit, cursor now desynced
        vec.get_current()                # CursorResult.out_of_range()
        vec.update_cursor()
        vec.get_current().value()        # "second"
    """

    def __init__(
        self,
        elements: Optional[Iterable[T]] = None,
        rotatable: bool = False,
        strict: bool = False,
    ):
        """
        Args:
            elements: Initial contents. A list is adopted as-is, any other
                iterable is copied into a new list.
            rotatable: Wrap around at either end instead of clamping
            strict: Raise from raw move operations instead of returning False
        """
        self._elements: List[T] = _as_list(elements)
        self._cursor = Cursor(rotation=rotatable)
        self._strict = strict

    @classmethod
    def from_config(
        cls,
        elements: Optional[Iterable[T]] = None,
        config: Optional[Config] = None,
    ) -> "CursorVec[T]":
        """Build a container using the defaults of a Config (global config if None)."""
        config = config or get_config()
        return cls(
            elements,
            rotatable=config.container.rotatable,
            strict=config.container.strict,
        )

    # -------------------------------------------------------------------------
    # Builder / configuration
    # -------------------------------------------------------------------------

    def with_container(self, elements: Iterable[T]) -> "CursorVec[T]":
        """Install a new backing list and return self. The cursor is left as is."""
        self.set_container(elements)
        return self

    def set_container(self, elements: Iterable[T]) -> None:
        """Install a new backing list. The cursor is left as is and may desync."""
        self._elements = _as_list(elements)
        logger.debug(
            "Container replaced (length=%d, cursor=%d)",
            len(self._elements),
            self._cursor.index,
        )

    def rotatable(self, rotatable: bool) -> "CursorVec[T]":
        """Set wraparound and return self."""
        self.set_rotatable(rotatable)
        return self

    def set_rotatable(self, rotatable: bool) -> None:
        self._cursor.rotation = rotatable

    @property
    def is_rotatable(self) -> bool:
        return self._cursor.rotation

    def strict(self, strict: bool) -> "CursorVec[T]":
        """Set strict mode and return self."""
        self.set_strict(strict)
        return self

    def set_strict(self, strict: bool) -> None:
        self._strict = strict

    @property
    def is_strict(self) -> bool:
        return self._strict

    # -------------------------------------------------------------------------
    # Backing list access
    # -------------------------------------------------------------------------

    @property
    def elements(self) -> List[T]:
        """The backing list itself. Edits through it do not resync the cursor."""
        return self._elements

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index):
        return self._elements[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def is_empty(self) -> bool:
        return not self._elements

    def append(self, item: T) -> None:
        self._elements.append(item)

    def extend(self, items: Iterable[T]) -> None:
        self._elements.extend(items)

    def drain(self, start: int = 0, stop: Optional[int] = None) -> List[T]:
        """
        Remove ``elements[start:stop]`` and return the removed items.

        The cursor is not updated.
        """
        removed = self._elements[start:stop]
        del self._elements[start:stop]
        return removed

    def retain(self, predicate: Callable[[T], Any]) -> None:
        """Keep only the elements matching predicate, in place. The cursor is not updated."""
        self._elements[:] = [item for item in self._elements if predicate(item)]

    # -------------------------------------------------------------------------
    # Resync
    # -------------------------------------------------------------------------

    def modify(self, f: Callable[[List[T]], R]) -> R:
        """
        Apply an in-place edit to the backing list, then resync the cursor.

        Args:
            f: Callable receiving the backing list

        Returns:
            Whatever ``f`` returns

        Example:
            >>> vec = CursorVec([1, 2, 3])
            >>> vec.set_cursor(2)
            >>> vec.modify(lambda items: items.pop())
            3
            >>> vec.get_cursor()
            1
        """
        result = f(self._elements)
        self.update_cursor()
        return result

    def update_cursor(self) -> None:
        """
        Clamp a desynced cursor to the last element.

        On an empty list the cursor becomes unset. A synced cursor is left
        untouched.
        """
        previous = self._cursor.index
        if self._cursor.clamp(len(self._elements)):
            logger.debug(
                "Cursor resynced %d -> %s (length=%d)",
                previous,
                self.get_cursor(),
                len(self._elements),
            )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_cursor(self) -> Optional[int]:
        """
        Raw cursor index, even if it is out of range.

        Returns:
            The index, or None if the list is empty
        """
        if not self._elements:
            return None
        return self._cursor.index

    def set_cursor(self, index: int) -> None:
        """
        Set the cursor to any non-negative index. No bounds checking.

        Raises:
            InvalidIndexError: If index is negative
        """
        self._cursor.set_index(index)

    def is_synced(self) -> bool:
        return self._cursor.is_valid(len(self._elements))

    def get_current(self) -> CursorResult[T]:
        """Tagged result for the current position."""
        if not self.is_synced():
            return CursorResult.out_of_range()
        return CursorResult.valid(self._elements[self._cursor.index])

    # -------------------------------------------------------------------------
    # Raw movement
    # -------------------------------------------------------------------------

    def move_next(self) -> bool:
        """Move the cursor to the next element."""
        return self.move_next_nth(1)

    def move_prev(self) -> bool:
        """Move the cursor to the previous element."""
        return self.move_prev_nth(1)

    def move_next_nth(self, amount: int) -> bool:
        """
        Move the cursor forward by ``amount`` elements.

        Returns:
            True if the full move was applied, False if it was blocked by an
            empty list, a desynced cursor or the end of the list (the cursor
            is clamped to the end in that case)

        Raises:
            EmptyContainerError, CursorOutOfRangeError, CursorBoundaryError:
                Instead of returning False, in strict mode
        """
        return self._check(self._cursor.advance(amount, len(self._elements)), NEXT)

    def move_prev_nth(self, amount: int) -> bool:
        """Move the cursor backward by ``amount`` elements. See move_next_nth."""
        return self._check(self._cursor.retreat(amount, len(self._elements)), PREV)

    # -------------------------------------------------------------------------
    # Tagged-result movement
    # -------------------------------------------------------------------------

    def move_next_and_get(self) -> CursorResult[T]:
        """Move to the next element and read it."""
        return self.move_next_nth_and_get(1)

    def move_prev_and_get(self) -> CursorResult[T]:
        """Move to the previous element and read it."""
        return self.move_prev_nth_and_get(1)

    def move_next_nth_and_get(self, amount: int) -> CursorResult[T]:
        """
        Move forward by ``amount`` elements and read the new position.

        Returns MAX_OUT with the cursor on the last element if the move runs
        past the end of a non-rotatable container.
        """
        return self._read(self._cursor.advance(amount, len(self._elements)), NEXT)

    def move_prev_nth_and_get(self, amount: int) -> CursorResult[T]:
        """
        Move backward by ``amount`` elements and read the new position.

        Returns MIN_OUT with the cursor on the first element if the move runs
        before the start of a non-rotatable container.
        """
        return self._read(self._cursor.retreat(amount, len(self._elements)), PREV)

    # -------------------------------------------------------------------------
    # Always movement
    # -------------------------------------------------------------------------

    def move_next_and_get_always(self) -> Optional[T]:
        """Move to the next element, returning the boundary element if there is none."""
        return self.move_next_nth_and_get_always(1)

    def move_prev_and_get_always(self) -> Optional[T]:
        """Move to the previous element, returning the boundary element if there is none."""
        return self.move_prev_nth_and_get_always(1)

    def move_next_nth_and_get_always(self, amount: int) -> Optional[T]:
        """Like move_next_nth_and_get, but returns the element or None (empty or desynced)."""
        return self._always(self._cursor.advance(amount, len(self._elements)))

    def move_prev_nth_and_get_always(self, amount: int) -> Optional[T]:
        """Like move_prev_nth_and_get, but returns the element or None (empty or desynced)."""
        return self._always(self._cursor.retreat(amount, len(self._elements)))

    # -------------------------------------------------------------------------
    # Outcome translation
    # -------------------------------------------------------------------------

    def _read(self, outcome: StepOutcome, direction: str) -> CursorResult[T]:
        if outcome is StepOutcome.CLAMPED:
            return CursorResult.max_out() if direction == NEXT else CursorResult.min_out()
        if outcome is StepOutcome.DESYNCED:
            self._log_desync()
        return self.get_current()

    def _always(self, outcome: StepOutcome) -> Optional[T]:
        if outcome is StepOutcome.DESYNCED:
            self._log_desync()
        return self.get_current().value()

    def _check(self, outcome: StepOutcome, direction: str) -> bool:
        if outcome is StepOutcome.MOVED:
            return True
        if outcome is StepOutcome.DESYNCED:
            self._log_desync()
        if not self._strict:
            return False

        if outcome is StepOutcome.EMPTY:
            error = EmptyContainerError()
        elif outcome is StepOutcome.DESYNCED:
            error = CursorOutOfRangeError(self._cursor.index, len(self._elements))
        else:
            error = CursorBoundaryError(direction, self._cursor.index)
        logger.debug("Strict move failed: %s", error)
        raise error

    def _log_desync(self) -> None:
        logger.debug(
            "Cursor %d is out of range for length %d; call update_cursor()",
            self._cursor.index,
            len(self._elements),
        )

    def __repr__(self) -> str:
        return (
            f"CursorVec({self._elements!r}, cursor={self.get_cursor()}, "
            f"rotatable={self.is_rotatable}, strict={self._strict})"
        )


def _as_list(elements: Optional[Iterable[T]]) -> List[T]:
    if elements is None:
        return []
    if isinstance(elements, list):
        return elements
    return list(elements)
