# tests/helpers/__init__.py
"""Shared test utilities for the rxlog test suite.

Usage:
    >>> from tests.helpers import RecordingObserver, expect_success
    >>>
    >>> recorder = RecordingObserver()
    >>> logger.on_record().subscribe(recorder.as_observer())
"""

from __future__ import annotations

from tests.helpers.recorder import RecordingObserver
from tests.helpers.result_utils import expect_failure, expect_success
from tests.helpers.values import CountingValue, Unformattable

__all__ = [
    "CountingValue",
    "RecordingObserver",
    "Unformattable",
    "expect_failure",
    "expect_success",
]
