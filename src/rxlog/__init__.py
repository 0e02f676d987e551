"""
rxlog - lazily evaluated log statements published to reactive subscribers.

A statement is composed as an immutable expression tree and committed to a
:class:`Logger`. The tree is rendered only if the logger has subscribers;
the resulting :class:`Record` is then multicast to all of them.

Example:
    >>> from rxlog import Logger, Severity, info
    >>>
    >>> logger = Logger()
    >>> records = []
    >>> subscription = logger.on_record().subscribe(records.append)
    >>> logger.commit(info() << "answer=" << 42)
    >>> records
    [Record(severity=<Severity.info: 2>, message='answer=42')]
"""

from __future__ import annotations

from rxlog.bridge import LoggingForwarder, forward_to_logging
from rxlog.config import LoggerConfig, build_logger_config
from rxlog.errors import FormattingFault, ProtocolMisuse
from rxlog.expr import (
    BinaryAppend,
    DefaultContext,
    EvaluationContext,
    Expression,
    SinkPlaceholder,
    Terminal,
    append,
    chain,
    make_terminal,
)
from rxlog.logger import Logger, LoggerContext, evaluate_record
from rxlog.record import Record, make_record
from rxlog.result import Failure, Result, Success
from rxlog.severity import Severity
from rxlog.shorthand import SINK, debug, error, fatal, info, log, trace, warning
from rxlog.subject import Observable, Observer, Subject, Subscription


__all__ = [
    # Records
    "Severity",
    "Record",
    "make_record",
    # Expressions
    "Expression",
    "Terminal",
    "BinaryAppend",
    "SinkPlaceholder",
    "make_terminal",
    "append",
    "chain",
    "EvaluationContext",
    "DefaultContext",
    # Logger
    "Logger",
    "LoggerContext",
    "LoggerConfig",
    "build_logger_config",
    "evaluate_record",
    # Shorthand
    "SINK",
    "log",
    "trace",
    "debug",
    "info",
    "warning",
    "error",
    "fatal",
    # Subject
    "Subject",
    "Observable",
    "Observer",
    "Subscription",
    # Bridge
    "LoggingForwarder",
    "forward_to_logging",
    # Errors and results
    "FormattingFault",
    "ProtocolMisuse",
    "Result",
    "Success",
    "Failure",
]
