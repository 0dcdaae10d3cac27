"""Pytest configuration and shared fixtures for async-result tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from async_result import Err, Ok
from async_result._config import reset
from async_result._logging import clear_log_hooks


@pytest.fixture(autouse=True)
def clean_state() -> Generator[None]:
    """Drop any configuration and log hooks installed by a test."""
    reset()
    clear_log_hooks()
    yield
    reset()
    clear_log_hooks()


@pytest.fixture
def sample_ok() -> Ok[int]:
    """Sample Ok value for testing."""
    return Ok(42)


@pytest.fixture
def sample_err() -> Err[ValueError]:
    """Sample Err value for testing."""
    return Err(ValueError('test error'))
