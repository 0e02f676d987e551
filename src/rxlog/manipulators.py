"""
Stream manipulators appended inline with log values.

A manipulator changes how the sink renders the values that follow it instead
of being rendered itself::

    info() << setfill("0") << hexadecimal << setw(5) << 54321   # "0d431"

Base, case, sign, float field, adjustment, fill and precision persist for the
rest of the statement; width applies to the next written value only.

Type Safety:
    - All manipulators are frozen dataclasses (immutable)
    - Literal discriminators enable exhaustive pattern matching
    - __post_init__ validation prevents illegal state construction
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class SetBase:
    """Select the radix used for integers.

    Attributes:
        base: 8, 10 or 16.
        kind: Discriminator for pattern matching. Always "SetBase".
    """

    base: Literal[8, 10, 16] = 10
    kind: Literal["SetBase"] = "SetBase"


@dataclass(frozen=True)
class SetUppercase:
    """Render hex digits and exponent markers in upper case."""

    enabled: bool = True
    kind: Literal["SetUppercase"] = "SetUppercase"


@dataclass(frozen=True)
class SetShowPos:
    """Prefix non-negative numbers with ``+``."""

    enabled: bool = True
    kind: Literal["SetShowPos"] = "SetShowPos"


@dataclass(frozen=True)
class SetFloatField:
    """Select fixed, scientific or shortest-repr notation for floats."""

    notation: Literal["default", "fixed", "scientific"] = "default"
    kind: Literal["SetFloatField"] = "SetFloatField"


@dataclass(frozen=True)
class SetAdjust:
    """Side on which padding is added when a width is in effect."""

    side: Literal["left", "right"] = "right"
    kind: Literal["SetAdjust"] = "SetAdjust"


@dataclass(frozen=True)
class SetWidth:
    """Minimum field width of the next written value.

    Attributes:
        width: Minimum number of characters; 0 disables padding.
        kind: Discriminator for pattern matching. Always "SetWidth".
    """

    width: int = 0
    kind: Literal["SetWidth"] = "SetWidth"

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"width must be non-negative, got {self.width}")


@dataclass(frozen=True)
class SetFill:
    """Padding character used when a width is in effect."""

    fill: str = " "
    kind: Literal["SetFill"] = "SetFill"

    def __post_init__(self) -> None:
        if len(self.fill) != 1:
            raise ValueError(f"fill must be a single character, got {self.fill!r}")


@dataclass(frozen=True)
class SetPrecision:
    """Digits after the point (fixed/scientific) or significant digits."""

    precision: int = 6
    kind: Literal["SetPrecision"] = "SetPrecision"

    def __post_init__(self) -> None:
        if self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")


Manipulator = (
    SetBase
    | SetUppercase
    | SetShowPos
    | SetFloatField
    | SetAdjust
    | SetWidth
    | SetFill
    | SetPrecision
)


# ───────────────────────────── named manipulators ───────────────────────────

octal = SetBase(base=8)
decimal = SetBase(base=10)
hexadecimal = SetBase(base=16)
uppercase = SetUppercase(enabled=True)
nouppercase = SetUppercase(enabled=False)
showpos = SetShowPos(enabled=True)
noshowpos = SetShowPos(enabled=False)
fixed = SetFloatField(notation="fixed")
scientific = SetFloatField(notation="scientific")
defaultfloat = SetFloatField(notation="default")
left = SetAdjust(side="left")
right = SetAdjust(side="right")


def setw(width: int) -> SetWidth:
    return SetWidth(width=width)


def setfill(fill: str) -> SetFill:
    return SetFill(fill=fill)


def setprecision(precision: int) -> SetPrecision:
    return SetPrecision(precision=precision)


__all__ = [
    "Manipulator",
    "SetAdjust",
    "SetBase",
    "SetFill",
    "SetFloatField",
    "SetPrecision",
    "SetShowPos",
    "SetUppercase",
    "SetWidth",
    "decimal",
    "defaultfloat",
    "fixed",
    "hexadecimal",
    "left",
    "noshowpos",
    "nouppercase",
    "octal",
    "right",
    "scientific",
    "setfill",
    "setprecision",
    "setw",
    "showpos",
    "uppercase",
]
