"""Immutable output of one successful commit."""

from __future__ import annotations

from dataclasses import dataclass

from rxlog.severity import Severity


@dataclass(frozen=True)
class Record:
    """Severity plus fully rendered message.

    Records compare structurally: two records are equal when both severity
    and message are equal.
    """

    severity: Severity
    message: str


def make_record(severity: Severity, message: str) -> Record:
    return Record(severity=severity, message=message)


__all__ = ["Record", "make_record"]
