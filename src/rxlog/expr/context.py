"""
Evaluation context protocol and its default implementation.

Nodes carry no semantics of their own: every terminal and every append is
handed to the context walking the tree. Specialised contexts override the
cases they care about and defer to :class:`DefaultContext` for the rest.

See Also:
    - rxlog.logger.LoggerContext - context rendering a record into a sink
"""

from __future__ import annotations

from typing import Protocol

from rxlog.expr.nodes import append


class EvaluationContext(Protocol):
    """Interpretation of the two node kinds."""

    def handle_terminal(self, value: object) -> object:
        """Interpret the payload of a terminal node."""
        ...

    def handle_append(self, left: object, right: object) -> object:
        """Combine the evaluated operands of an append node."""
        ...


class DefaultContext:
    """Identity interpretation.

    Terminals evaluate to their payload and appends evaluate to a fresh,
    still unevaluated append of their operand results, so an expression walked
    by this context yields an equivalent deferred expression.
    """

    def handle_terminal(self, value: object) -> object:
        return value

    def handle_append(self, left: object, right: object) -> object:
        return append(left, right)


__all__ = [
    "DefaultContext",
    "EvaluationContext",
]
