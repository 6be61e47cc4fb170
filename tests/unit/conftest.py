"""Shared fixtures for unit tests."""
from __future__ import annotations

import pytest
import structlog

from tx_executor.testing.fakes import RecordingDatabase


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Keep structlog configuration from leaking between tests."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def database() -> RecordingDatabase:
    return RecordingDatabase()
