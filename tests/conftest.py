"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from raymath.config import MathConfig


@pytest.fixture
def low_precision_config() -> MathConfig:
    """Config whose configured precision is narrower than a uint256 product."""
    return MathConfig(precision=40)


@pytest.fixture
def captured_logs() -> Iterator[list[dict]]:
    """Capture structlog events emitted during the test."""
    with capture_logs() as logs:
        yield logs


@pytest.fixture
def clean_logging() -> Iterator[None]:
    """Restore structlog defaults after a test reconfigures it."""
    yield
    structlog.reset_defaults()
