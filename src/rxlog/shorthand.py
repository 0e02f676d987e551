"""
Call-site shorthand for starting a statement at a given severity.

Example:
    >>> logger.commit(error() << "cannot open " << path)
"""

from __future__ import annotations

from rxlog.expr.markers import SinkPlaceholder
from rxlog.expr.nodes import BinaryAppend, Terminal
from rxlog.severity import Severity


SINK: Terminal[SinkPlaceholder] = Terminal(SinkPlaceholder())


def log(severity: Severity) -> BinaryAppend:
    """Start a statement writing into the sink at ``severity``."""
    return SINK << severity


def trace() -> BinaryAppend:
    return log(Severity.trace)


def debug() -> BinaryAppend:
    return log(Severity.debug)


def info() -> BinaryAppend:
    return log(Severity.info)


def warning() -> BinaryAppend:
    return log(Severity.warning)


def error() -> BinaryAppend:
    return log(Severity.error)


def fatal() -> BinaryAppend:
    return log(Severity.fatal)


__all__ = ["SINK", "debug", "error", "fatal", "info", "log", "trace", "warning"]
