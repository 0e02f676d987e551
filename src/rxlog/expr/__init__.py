"""
Lazy expression trees for log statements.

Core Principle: call sites describe WHAT to append; a context decides HOW
(and whether) it gets rendered.

Example:
    >>> from rxlog.expr import DefaultContext, SinkPlaceholder, make_terminal
    >>>
    >>> expr = make_terminal(SinkPlaceholder()) << "x=" << 1
    >>> expr.evaluate(DefaultContext()) == expr
    True
"""

from __future__ import annotations

from rxlog.expr.composition import chain
from rxlog.expr.context import DefaultContext, EvaluationContext
from rxlog.expr.markers import IGNORE, Ignore, SinkPlaceholder
from rxlog.expr.nodes import (
    BinaryAppend,
    Expression,
    Terminal,
    append,
    as_expression,
    evaluate,
    make_terminal,
)


__all__ = [
    # Nodes
    "Expression",
    "Terminal",
    "BinaryAppend",
    "make_terminal",
    "as_expression",
    "append",
    "chain",
    "evaluate",
    # Markers
    "SinkPlaceholder",
    "Ignore",
    "IGNORE",
    # Contexts
    "EvaluationContext",
    "DefaultContext",
]
