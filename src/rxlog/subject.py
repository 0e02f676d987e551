"""
Multicast subject distributing records to subscribers.

Delivery is synchronous: every notification runs inline on the caller's stack,
in subscription order. A subject starts ``active`` and becomes ``completed``
after :meth:`Subject.complete` or :meth:`Subject.fail`; a completed subject
accepts no further notifications.

Example:
    >>> subject: Subject[Record] = Subject()
    >>> subscription = subject.subscribe(print)
    >>> subject.publish(Record(Severity.info, "hello"))
    Record(severity=<Severity.info: 2>, message='hello')
    >>> subscription.unsubscribe()
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Literal, TypeVar

from rxlog.errors import FormattingFault, ProtocolMisuse


_logger = logging.getLogger(__name__)

T = TypeVar("T")

SubjectState = Literal["active", "completed"]


def _ignore_value(value: object) -> None:
    return None


def _ignore_completion() -> None:
    return None


@dataclass(frozen=True)
class Observer(Generic[T]):
    """Callbacks of one subscriber.

    Attributes:
        on_next: Called with each published value.
        on_error: Called once if the stream fails.
        on_completed: Called once if the stream completes.
    """

    on_next: Callable[[T], None] = _ignore_value
    on_error: Callable[[FormattingFault], None] = _ignore_value
    on_completed: Callable[[], None] = _ignore_completion


class Subscription:
    """Handle detaching one observer from its subject."""

    def __init__(self, subject: Subject[Any] | None, token: int) -> None:
        self._subject = subject
        self._token = token

    @property
    def is_subscribed(self) -> bool:
        return self._subject is not None and self._subject._has_token(self._token)

    def unsubscribe(self) -> None:
        """Stop future notifications. Safe to call more than once."""
        if self._subject is not None:
            self._subject._remove(self._token)
            self._subject = None


class Subject(Generic[T]):
    """Hot multicast channel with a single terminal notification."""

    def __init__(self) -> None:
        self._observers: dict[int, Observer[T]] = {}
        self._tokens = itertools.count()
        self._state: SubjectState = "active"

    @property
    def state(self) -> SubjectState:
        return self._state

    @property
    def is_completed(self) -> bool:
        return self._state == "completed"

    @property
    def has_observers(self) -> bool:
        return bool(self._observers)

    def subscribe(
        self,
        on_next: Observer[T] | Callable[[T], None] | None = None,
        on_error: Callable[[FormattingFault], None] | None = None,
        on_completed: Callable[[], None] | None = None,
    ) -> Subscription:
        """Register an observer, given whole or as separate callbacks.

        A subscriber arriving after completion is told so immediately and is
        not registered.

        Raises:
            TypeError: An ``Observer`` was given together with ``on_error`` or
                ``on_completed``.

        Returns:
            Subscription detaching the observer.
        """
        observer = _as_observer(on_next, on_error, on_completed)
        token = next(self._tokens)
        match self._state:
            case "completed":
                observer.on_completed()
                return Subscription(None, token)
            case "active":
                self._observers[token] = observer
                _logger.debug("observer %d subscribed (%d active)", token, len(self._observers))
                return Subscription(self, token)

    def publish(self, value: T) -> None:
        """Deliver ``value`` to every current observer, in subscription order."""
        self._ensure_active("publish")
        for observer in tuple(self._observers.values()):
            observer.on_next(value)

    def fail(self, fault: FormattingFault) -> None:
        """Deliver ``fault`` to every observer and complete the stream."""
        for observer in self._terminate("fail"):
            observer.on_error(fault)

    def complete(self) -> None:
        """Signal completion to every observer and complete the stream."""
        for observer in self._terminate("complete"):
            observer.on_completed()

    def as_observable(self) -> Observable[T]:
        return Observable(self)

    def _terminate(self, operation: str) -> tuple[Observer[T], ...]:
        self._ensure_active(operation)
        # Completed before any callback runs, so re-entrant notifications raise.
        observers = tuple(self._observers.values())
        self._observers.clear()
        self._state = "completed"
        _logger.debug("subject completed via %s (%d observers)", operation, len(observers))
        return observers

    def _ensure_active(self, operation: str) -> None:
        if self._state == "completed":
            raise ProtocolMisuse(f"{operation}() called on a completed subject")

    def _has_token(self, token: int) -> bool:
        return token in self._observers

    def _remove(self, token: int) -> None:
        if self._observers.pop(token, None) is not None:
            _logger.debug("observer %d unsubscribed (%d active)", token, len(self._observers))


class Observable(Generic[T]):
    """Subscribe-only view of a subject."""

    def __init__(self, subject: Subject[T]) -> None:
        self._subject = subject

    def subscribe(
        self,
        on_next: Observer[T] | Callable[[T], None] | None = None,
        on_error: Callable[[FormattingFault], None] | None = None,
        on_completed: Callable[[], None] | None = None,
    ) -> Subscription:
        return self._subject.subscribe(on_next, on_error, on_completed)


def _as_observer(
    on_next: Observer[T] | Callable[[T], None] | None,
    on_error: Callable[[FormattingFault], None] | None,
    on_completed: Callable[[], None] | None,
) -> Observer[T]:
    match on_next:
        case Observer() if on_error is not None or on_completed is not None:
            raise TypeError("pass either an Observer or separate callbacks, not both")
        case Observer():
            return on_next
        case _:
            return Observer(
                on_next=on_next or _ignore_value,
                on_error=on_error or _ignore_value,
                on_completed=on_completed or _ignore_completion,
            )


__all__ = [
    "Observable",
    "Observer",
    "Subject",
    "SubjectState",
    "Subscription",
]
