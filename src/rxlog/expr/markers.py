"""
Marker payloads with a meaning only inside a logger's evaluation context.

Type Safety:
    - Markers are frozen, field-less dataclasses; all instances compare equal
    - Literal discriminators keep them pattern-matchable alongside other ADTs
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class SinkPlaceholder:
    """Stands for the message buffer of whichever context evaluates it.

    Attributes:
        kind: Discriminator for pattern matching. Always "SinkPlaceholder".
    """

    kind: Literal["SinkPlaceholder"] = "SinkPlaceholder"


@dataclass(frozen=True)
class Ignore:
    """Evaluated value that writes nothing when appended to a sink.

    Attributes:
        kind: Discriminator for pattern matching. Always "Ignore".
    """

    kind: Literal["Ignore"] = "Ignore"


IGNORE = Ignore()


__all__ = [
    "IGNORE",
    "Ignore",
    "SinkPlaceholder",
]
