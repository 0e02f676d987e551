# tests/conftest.py
"""Global PyTest fixtures for the test-suite."""

from __future__ import annotations

from typing import Generator

import pytest

from rxlog import Logger, Subscription
from tests.helpers import RecordingObserver, Unformattable


@pytest.fixture
def logger() -> Generator[Logger, None, None]:
    """Logger closed after the test."""
    instance = Logger()
    yield instance
    instance.close()


@pytest.fixture
def recorder() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def subscription(logger: Logger, recorder: RecordingObserver) -> Subscription:
    """``recorder`` subscribed to ``logger``."""
    return logger.on_record().subscribe(recorder.as_observer())


@pytest.fixture
def unformattable() -> Unformattable:
    return Unformattable()
