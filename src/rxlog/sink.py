"""
Growable character buffer that log values are rendered into.

The sink is created by a logger context at the start of one commit and read
back once evaluation finishes. Values are rendered with :func:`format` using
the options accumulated from manipulators earlier in the same statement.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, replace
from typing import Literal, Never

from rxlog.expr.markers import Ignore
from rxlog.manipulators import (
    Manipulator,
    SetAdjust,
    SetBase,
    SetFill,
    SetFloatField,
    SetPrecision,
    SetShowPos,
    SetUppercase,
    SetWidth,
)


_INT_CODES: dict[int, str] = {8: "o", 10: "d", 16: "x"}
_FLOAT_CODES: dict[str, str] = {"fixed": "f", "scientific": "e", "default": "g"}


def assert_never(value: Never) -> Never:
    """Type-safe exhaustiveness check for pattern matching.

    Use this in the default case of match statements to ensure
    all variants are handled. If a new variant is added but not
    handled, mypy will report an error.
    """
    raise AssertionError(f"Unhandled case: {value!r}")


@dataclass(frozen=True)
class FormatState:
    """Rendering options in effect for the next written value.

    Attributes:
        base: Radix for integers.
        uppercase: Upper-case hex digits and exponent markers.
        showpos: Prefix non-negative numbers with ``+``.
        notation: Float notation.
        adjust: Padding side when ``width`` is set.
        width: Minimum field width, reset after each written value.
        fill: Padding character.
        precision: Float precision; ``None`` keeps Python's shortest repr.
    """

    base: Literal[8, 10, 16] = 10
    uppercase: bool = False
    showpos: bool = False
    notation: Literal["default", "fixed", "scientific"] = "default"
    adjust: Literal["left", "right"] = "right"
    width: int = 0
    fill: str = " "
    precision: int | None = None


def apply_manipulator(state: FormatState, manipulator: Manipulator) -> FormatState:
    """Return ``state`` updated by ``manipulator``."""
    match manipulator:
        case SetBase(base=base):
            return replace(state, base=base)
        case SetUppercase(enabled=enabled):
            return replace(state, uppercase=enabled)
        case SetShowPos(enabled=enabled):
            return replace(state, showpos=enabled)
        case SetFloatField(notation=notation):
            return replace(state, notation=notation)
        case SetAdjust(side=side):
            return replace(state, adjust=side)
        case SetWidth(width=width):
            return replace(state, width=width)
        case SetFill(fill=fill):
            return replace(state, fill=fill)
        case SetPrecision(precision=precision):
            return replace(state, precision=precision)
        case _:
            assert_never(manipulator)


def _case(code: str, state: FormatState) -> str:
    return code.upper() if state.uppercase else code


def render_value(value: object, state: FormatState) -> str:
    """Render ``value`` without padding.

    The base applies to integers only; floats always render in decimal.

    Raises:
        ValueError: Raised by a value's own ``__format__``.
    """
    sign = "+" if state.showpos else ""
    match value:
        case str():
            return value
        case bool():
            return str(value)
        case int():
            return format(value, sign + _case(_INT_CODES[state.base], state))
        case float():
            if state.notation == "default" and state.precision is None:
                rendered = format(value, sign)
                return rendered.upper() if state.uppercase else rendered
            precision = "" if state.precision is None else f".{state.precision}"
            return format(value, sign + precision + _case(_FLOAT_CODES[state.notation], state))
        case _:
            return format(value)


def pad(text: str, state: FormatState) -> str:
    match state.adjust:
        case "left":
            return text.ljust(state.width, state.fill)
        case "right":
            return text.rjust(state.width, state.fill)
        case _ as unreachable:
            assert_never(unreachable)


class MessageSink:
    """Character buffer with iostream-like formatting state.

    Example:
        >>> sink = MessageSink()
        >>> sink.write("pid=").write(setw(6)).write(4242).getvalue()
        'pid=  4242'
    """

    def __init__(self) -> None:
        self._buffer = io.StringIO()
        self._state = FormatState()

    @property
    def state(self) -> FormatState:
        return self._state

    def write(self, value: object) -> MessageSink:
        """Render ``value`` into the buffer, or apply it if it is a manipulator.

        Returns:
            This sink, so writes can be chained.
        """
        match value:
            case Ignore():
                pass
            case (
                SetBase()
                | SetUppercase()
                | SetShowPos()
                | SetFloatField()
                | SetAdjust()
                | SetWidth()
                | SetFill()
                | SetPrecision()
            ):
                self._state = apply_manipulator(self._state, value)
            case _:
                self._buffer.write(pad(render_value(value, self._state), self._state))
                self._state = replace(self._state, width=0)
        return self

    def getvalue(self) -> str:
        """Everything written so far."""
        return self._buffer.getvalue()


__all__ = [
    "FormatState",
    "MessageSink",
    "apply_manipulator",
    "assert_never",
    "pad",
    "render_value",
]
