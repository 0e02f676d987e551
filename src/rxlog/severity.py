"""Severity levels carried by every log record."""

from __future__ import annotations

import logging
from enum import IntEnum


# No stdlib equivalent exists below DEBUG.
TRACE_LOGGING_LEVEL = 5


class Severity(IntEnum):
    """Closed set of severities, ordered by increasing criticality."""

    trace = 0
    debug = 1
    info = 2
    warning = 3
    error = 4
    fatal = 5

    @property
    def logging_level(self) -> int:
        """Equivalent level of the standard :mod:`logging` module."""
        return _LOGGING_LEVELS[self]


_LOGGING_LEVELS: dict[Severity, int] = {
    Severity.trace: TRACE_LOGGING_LEVEL,
    Severity.debug: logging.DEBUG,
    Severity.info: logging.INFO,
    Severity.warning: logging.WARNING,
    Severity.error: logging.ERROR,
    Severity.fatal: logging.CRITICAL,
}
