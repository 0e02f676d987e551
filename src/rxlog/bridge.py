"""
Subscriber forwarding records to the standard :mod:`logging` module.

Lets rxlog statements reach whatever handlers the application already
configured for stdlib logging.
"""

from __future__ import annotations

import logging

from rxlog.errors import FormattingFault
from rxlog.logger import Logger
from rxlog.record import Record
from rxlog.subject import Observer, Subscription


class LoggingForwarder:
    """Re-emit records on a stdlib logger at the equivalent level."""

    def __init__(self, logger_name: str) -> None:
        """Initialize forwarder.

        Args:
            logger_name: Name passed to :func:`logging.getLogger`.
        """
        self._logger = logging.getLogger(logger_name)

    @property
    def logger_name(self) -> str:
        return self._logger.name

    def on_next(self, record: Record) -> None:
        self._logger.log(record.severity.logging_level, record.message)

    def on_error(self, fault: FormattingFault) -> None:
        self._logger.error("log statement failed: %s", fault.message, exc_info=fault.exception)

    def on_completed(self) -> None:
        self._logger.debug("record stream completed")

    def as_observer(self) -> Observer[Record]:
        return Observer(
            on_next=self.on_next,
            on_error=self.on_error,
            on_completed=self.on_completed,
        )


def forward_to_logging(logger: Logger, logger_name: str | None = None) -> Subscription:
    """Subscribe a :class:`LoggingForwarder` to ``logger``.

    Args:
        logger: Source of records.
        logger_name: Target stdlib logger; defaults to the logger's configured name.

    Returns:
        Subscription that stops the forwarding.
    """
    forwarder = LoggingForwarder(logger_name or logger.name)
    return logger.on_record().subscribe(forwarder.as_observer())


__all__ = ["LoggingForwarder", "forward_to_logging"]
