"""
Error types for rxlog.

Faults raised while rendering a statement are captured as frozen dataclasses
and delivered through the record stream's error channel. Misuse of a completed
stream is a programming error and raises.

Type Safety:
    - Error ADTs are frozen dataclasses (immutable)
    - Literal discriminators enable exhaustive pattern matching
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class FormattingFault:
    """Evaluation of a log expression raised.

    Attributes:
        message: Human-readable error description.
        exception: The exception raised during evaluation.
        kind: Discriminator for pattern matching. Always "FormattingFault".
    """

    message: str
    exception: Exception
    kind: Literal["FormattingFault"] = "FormattingFault"

    @classmethod
    def from_exception(cls, exc: Exception) -> FormattingFault:
        return cls(message=f"{type(exc).__name__}: {exc}", exception=exc)


class ProtocolMisuse(RuntimeError):
    """A notification was sent on a stream that has already completed."""


__all__ = [
    "FormattingFault",
    "ProtocolMisuse",
]
