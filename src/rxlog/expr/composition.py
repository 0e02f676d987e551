"""
Composition helpers for building expressions without the ``<<`` operator.

Composition is purely structural: nothing here evaluates or formats a value.
"""

from __future__ import annotations

from functools import reduce

from rxlog.expr.nodes import Expression, append, as_expression


def chain(first: object, *rest: object) -> Expression:
    """Left fold ``first, *rest`` into one append chain.

    ``chain(a, b, c)`` builds the same tree as ``as_expression(a) << b << c``.

    Example:
        >>> chain(SINK, Severity.error, "disk full: ", path)
    """
    return reduce(append, rest, as_expression(first))


__all__ = ["chain"]
