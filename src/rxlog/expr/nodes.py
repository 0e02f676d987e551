"""
Expression nodes for lazily composed log statements.

A log statement is built as an immutable tree of append operations. Building
the tree costs one small allocation per operand; nothing is formatted until an
evaluation context walks it.

Type Safety:
    - All node types are frozen dataclasses (immutable)
    - Literal discriminators enable exhaustive pattern matching
    - ``Expression`` is the closed union of node variants

Example:
    >>> expr = make_terminal(SinkPlaceholder()) << Severity.info << "answer=" << 42
    >>> isinstance(expr, BinaryAppend)
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Literal, TypeVar

if TYPE_CHECKING:
    from rxlog.expr.context import EvaluationContext


T = TypeVar("T")


class _Composable:
    """Mixin giving nodes the ``<<`` append operator."""

    def __lshift__(self, other: object) -> BinaryAppend:
        return append(self, other)

    def __rlshift__(self, other: object) -> BinaryAppend:
        return append(other, self)


@dataclass(frozen=True)
class Terminal(_Composable, Generic[T]):
    """Leaf node owning one payload.

    Attributes:
        payload: Value to append, or a marker interpreted by the context.
        kind: Discriminator for pattern matching. Always "Terminal".
    """

    payload: T
    kind: Literal["Terminal"] = "Terminal"

    def evaluate(self, context: EvaluationContext) -> object:
        """Hand the payload to the context and return its interpretation."""
        return context.handle_terminal(self.payload)


@dataclass(frozen=True)
class BinaryAppend(_Composable):
    """Append of ``right`` onto ``left``.

    Attributes:
        left: Expression evaluated first.
        right: Expression evaluated second.
        kind: Discriminator for pattern matching. Always "BinaryAppend".
    """

    left: Expression
    right: Expression
    kind: Literal["BinaryAppend"] = "BinaryAppend"

    def evaluate(self, context: EvaluationContext) -> object:
        """Evaluate both operands left to right, then combine them.

        Left-nested chains grow one level per operand, so the left spine is
        walked iteratively; the order of context calls is the same as a
        recursive walk.
        """
        spine: list[BinaryAppend] = []
        node: Expression = self
        while isinstance(node, BinaryAppend):
            spine.append(node)
            node = node.left
        result = node.evaluate(context)
        for parent in reversed(spine):
            result = context.handle_append(result, parent.right.evaluate(context))
        return result


Expression = Terminal[object] | BinaryAppend


def make_terminal(value: T) -> Terminal[T]:
    """Wrap ``value`` in a terminal node, even when it is itself a node."""
    return Terminal(value)


def as_expression(value: object) -> Expression:
    """Return ``value`` unchanged if it is a node, else wrap it in a terminal."""
    match value:
        case Terminal() | BinaryAppend():
            return value
        case _:
            return Terminal(value)


def evaluate(expression: Expression, context: EvaluationContext) -> object:
    """Evaluate ``expression`` once in ``context`` and return the result."""
    return expression.evaluate(context)


def append(left: object, right: object) -> BinaryAppend:
    """Combine two operands into a ``BinaryAppend``, auto-wrapping raw values.

    Args:
        left: Expression or raw value evaluated first.
        right: Expression or raw value evaluated second.

    Returns:
        New append node; neither operand is modified.
    """
    return BinaryAppend(left=as_expression(left), right=as_expression(right))


__all__ = [
    "BinaryAppend",
    "Expression",
    "Terminal",
    "append",
    "as_expression",
    "evaluate",
    "make_terminal",
]
