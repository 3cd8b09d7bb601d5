"""Pytest configuration and fixtures."""

from __future__ import annotations

import logging

import pytest

from fallible import Failure, Success
from tests.helpers import Recorder


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records from the ``fallible`` logger hierarchy."""
    caplog.set_level(logging.DEBUG, logger="fallible")
    return caplog


@pytest.fixture
def recorder() -> Recorder:
    """A callback that records calls and returns None."""
    return Recorder()


@pytest.fixture
def success() -> Success[int]:
    return Success(2)


@pytest.fixture
def failure() -> Failure[int]:
    return Failure(OSError("disk on fire"))
