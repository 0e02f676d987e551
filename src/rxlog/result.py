"""
Result type for explicit error handling at the commit boundary.

Evaluating a log expression either renders a record or fails while formatting
one of its values. Both outcomes are returned as values so the logger can route
them to the matching notification channel without raising to its caller.

Type Safety:
    - Functions returning Result spell out both success and error types
    - Pattern matching ensures exhaustive handling of both cases

Usage:
    >>> match evaluate_record(expression):
    ...     case Success(record):
    ...         subject.publish(record)
    ...     case Failure(fault):
    ...         subject.fail(fault)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar


T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Represents a successful result containing a value of type T."""

    value: T


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Represents a failed result containing an error of type E."""

    error: E


# Type alias for the union of Success and Failure
Result = Success[T] | Failure[E]
