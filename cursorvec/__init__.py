"""
cursorvec - list container with a built-in cursor

The cursor tracks a "current element" across edits to the list. Movement
either clamps at the ends or wraps around (rotatable mode). Edits made
directly to the list leave the cursor alone; call update_cursor() afterwards,
or wrap the edit in modify() to resync automatically.

Package Structure:
    cursorvec/
    ├── __init__.py          # This file - package entry point
    ├── config.py            # Configuration management
    ├── container.py         # CursorVec
    ├── cursors/             # Cursor state machine
    │   ├── __init__.py
    │   ├── cursor.py        # Cursor and StepOutcome
    │   └── state.py         # CursorState and CursorResult
    └── utils/               # Shared utilities
        ├── __init__.py
        ├── logging_config.py
        └── exceptions.py

Usage:
    from cursorvec import CursorVec, CursorState

    vec = CursorVec().with_container(["first", "second", "third", "fourth", "fifth"])

    vec.move_next_and_get().value()          # "second"
    vec.move_next_nth_and_get(3).value()     # "fifth"
    vec.move_next_and_get().state            # CursorState.MAX_OUT

    vec.set_cursor(0)
    vec.move_next_nth_and_get_always(10000)  # "fifth"

    vec = CursorVec().rotatable(True).with_container([1, 2, 3, 4, 5, 6, 7, 8])
    vec.move_next_nth_and_get(10).value()    # 3

    vec.drain(1)                             # cursor 2, length 1
    vec.get_current().state                  # CursorState.OUT_OF_RANGE
    vec.update_cursor()
    vec.get_current().value()                # 1
"""

from cursorvec.config import (
    Config,
    ContainerConfig,
    LoggingConfig,
    load_config,
    get_config,
    set_config,
    save_config,
)
from cursorvec.container import CursorVec
from cursorvec.cursors import Cursor, StepOutcome, CursorState, CursorResult
from cursorvec.utils import (
    get_logger,
    setup_logging,
    CursorVecError,
    InvalidIndexError,
    InvalidAmountError,
    StrictModeError,
    EmptyContainerError,
    CursorOutOfRangeError,
    CursorBoundaryError,
    ConfigError,
)

__version__ = "0.1.0"

__all__ = [
    # Container
    "CursorVec",

    # Cursors
    "Cursor",
    "StepOutcome",
    "CursorState",
    "CursorResult",

    # Configuration
    "Config",
    "ContainerConfig",
    "LoggingConfig",
    "load_config",
    "get_config",
    "set_config",
    "save_config",

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
