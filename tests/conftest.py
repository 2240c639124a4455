"""
Shared pytest fixtures for cursorvec tests.

Provides sample containers in both cursor modes and resets global
configuration between tests.
"""

import logging

import pytest
from typing import List

from cursorvec import Config, CursorVec, set_config


# =============================================================================
# Data Fixtures
# =============================================================================

@pytest.fixture
def words() -> List[str]:
    """Five-element word list used by the walkthrough scenarios."""
    return ["first", "second", "third", "fourth", "fifth"]


@pytest.fixture
def numbers() -> List[int]:
    """Eight-element integer list used by the rotation scenarios."""
    return [1, 2, 3, 4, 5, 6, 7, 8]


# =============================================================================
# Container Fixtures
# =============================================================================

@pytest.fixture
def word_vec(words) -> CursorVec:
    """Non-rotatable container over the word list, cursor at 0."""
    return CursorVec().with_container(words)


@pytest.fixture
def rotating_vec(numbers) -> CursorVec:
    """Rotatable container over the integer list, cursor at 0."""
    return CursorVec().rotatable(True).with_container(numbers)


@pytest.fixture
def empty_vec() -> CursorVec:
    """Container with no elements."""
    return CursorVec()


@pytest.fixture
def strict_vec(words) -> CursorVec:
    """Non-rotatable strict-mode container over the word list."""
    return CursorVec(words, strict=True)


# =============================================================================
# Cleanup Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def cleanup_global_state():
    """Reset global configuration and logger handlers after each test."""
    set_config(Config())
    yield
    set_config(None)
    logging.getLogger("cursorvec").handlers.clear()
