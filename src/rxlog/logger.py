"""
Logger: evaluates committed expressions and publishes the resulting records.

A commit with nobody listening returns before the expression is touched, so a
disabled statement costs only the construction of its (unevaluated) tree.

Example:
    >>> logger = Logger()
    >>> logger.on_record().subscribe(print)
    >>> logger.commit(SINK << Severity.warning << "disk at " << 93 << "%")
    Record(severity=<Severity.warning: 3>, message='disk at 93%')
"""

from __future__ import annotations

import logging
import weakref
from types import TracebackType

from rxlog.config import LoggerConfig
from rxlog.errors import FormattingFault
from rxlog.expr.context import DefaultContext
from rxlog.expr.markers import IGNORE, SinkPlaceholder
from rxlog.expr.nodes import Expression, evaluate
from rxlog.record import Record, make_record
from rxlog.result import Failure, Result, Success
from rxlog.severity import Severity
from rxlog.sink import MessageSink
from rxlog.subject import Observable, Subject


_logger = logging.getLogger(__name__)


class LoggerContext(DefaultContext):
    """Context rendering one statement into a private sink.

    The sink marker resolves to the sink, severity terminals set the record's
    severity (last one wins) and everything appended to the sink is written
    into it.
    """

    def __init__(self, default_severity: Severity = Severity.info) -> None:
        self.sink = MessageSink()
        self.severity = default_severity

    def handle_terminal(self, value: object) -> object:
        match value:
            case SinkPlaceholder():
                return self.sink
            case Severity():
                self.severity = value
                return IGNORE
            case _:
                return super().handle_terminal(value)

    def handle_append(self, left: object, right: object) -> object:
        match left:
            case MessageSink() if left is self.sink:
                return left.write(right)
            case _:
                return super().handle_append(left, right)


def evaluate_record(
    expression: Expression,
    default_severity: Severity = Severity.info,
) -> Result[Record, FormattingFault]:
    """Evaluate ``expression`` once in a fresh :class:`LoggerContext`.

    Returns:
        Success(record) with the captured severity and rendered message, or
        Failure(FormattingFault) if any part of the evaluation raised.
    """
    context = LoggerContext(default_severity)
    try:
        evaluate(expression, context)
    except Exception as exc:
        return Failure(FormattingFault.from_exception(exc))
    return Success(make_record(context.severity, context.sink.getvalue()))


def _complete_subject(subject: Subject[Record]) -> None:
    if not subject.is_completed:
        subject.complete()


class Logger:
    """Owner of one record stream.

    The stream completes when the logger is closed, leaves a ``with`` block, or
    is garbage collected, whichever happens first.
    """

    def __init__(self, config: LoggerConfig | None = None) -> None:
        self._config = config or LoggerConfig()
        self._subject: Subject[Record] = Subject()
        # Holds the subject only, so the logger itself stays collectable.
        self._finalizer = weakref.finalize(self, _complete_subject, self._subject)

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def closed(self) -> bool:
        return self._subject.is_completed

    def on_record(self) -> Observable[Record]:
        """Stream of records committed from now on."""
        return self._subject.as_observable()

    def commit(self, expression: Expression) -> None:
        """Evaluate ``expression`` and publish its record, if anyone listens.

        Never raises for faults inside the expression or inside a subscriber's
        ``on_next``: those are delivered to subscribers' error handlers and end
        the stream.
        """
        if not self._subject.has_observers:
            _logger.debug("logger %r: no subscribers, statement skipped", self.name)
            return

        match evaluate_record(expression, self._config.default_severity):
            case Success(record):
                try:
                    self._subject.publish(record)
                except Exception as exc:
                    fault = FormattingFault.from_exception(exc)
                    self._redirect("subscriber failed on record", fault)
            case Failure(fault):
                self._redirect("statement failed to render", fault)

    def _redirect(self, reason: str, fault: FormattingFault) -> None:
        _logger.warning("logger %r: %s: %s", self.name, reason, fault.message)
        # A subscriber may have closed the logger before raising.
        if not self._subject.is_completed:
            self._subject.fail(fault)

    def close(self) -> None:
        """Complete the record stream. Safe to call more than once."""
        self._finalizer()

    def __enter__(self) -> Logger:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Logger(name={self.name!r}, state={self._subject.state!r})"


__all__ = ["Logger", "LoggerContext", "evaluate_record"]
