"""
Tests for Subject multicast semantics.

Verifies delivery order, unsubscription, terminal notifications and the
protocol checks on a completed subject.
"""

from __future__ import annotations

import pytest

from rxlog import (
    FormattingFault,
    Observer,
    ProtocolMisuse,
    Record,
    Severity,
    Subject,
    Subscription,
)
from tests.helpers import RecordingObserver


def _record(message: str) -> Record:
    return Record(severity=Severity.info, message=message)


def _fault() -> FormattingFault:
    return FormattingFault.from_exception(ValueError("bad format"))


class TestPublish:
    """Tests for value delivery."""

    def test_delivers_in_subscription_order(self) -> None:
        """Observers are notified in the order they subscribed."""
        subject: Subject[Record] = Subject()
        calls: list[str] = []
        subject.subscribe(lambda record: calls.append(f"first:{record.message}"))
        subject.subscribe(lambda record: calls.append(f"second:{record.message}"))

        subject.publish(_record("a"))
        subject.publish(_record("b"))

        assert calls == ["first:a", "second:a", "first:b", "second:b"]

    def test_publish_without_observers_is_noop(self) -> None:
        subject: Subject[Record] = Subject()
        subject.publish(_record("a"))
        assert subject.state == "active"

    def test_accepts_observer_instance(self) -> None:
        subject: Subject[Record] = Subject()
        recorder = RecordingObserver()
        subject.subscribe(recorder.as_observer())

        subject.publish(_record("a"))

        assert recorder.messages == ["a"]

    def test_observer_defaults_ignore_notifications(self) -> None:
        subject: Subject[Record] = Subject()
        subject.subscribe(Observer())

        subject.publish(_record("a"))
        subject.complete()

        assert subject.is_completed

    def test_observer_with_extra_callbacks_rejected(self) -> None:
        subject: Subject[Record] = Subject()
        recorder = RecordingObserver()

        with pytest.raises(TypeError, match="not both"):
            subject.subscribe(recorder.as_observer(), on_completed=print)

        assert not subject.has_observers


class TestUnsubscribe:
    """Tests for Subscription handles."""

    def test_unsubscribed_observer_receives_nothing(self) -> None:
        subject: Subject[Record] = Subject()
        recorder = RecordingObserver()
        subscription = subject.subscribe(recorder.as_observer())

        subscription.unsubscribe()
        subject.publish(_record("a"))
        subject.complete()

        assert recorder.events == []
        assert not subscription.is_subscribed
        assert not subject.has_observers

    def test_unsubscribe_leaves_others(self) -> None:
        subject: Subject[Record] = Subject()
        kept, dropped = RecordingObserver(), RecordingObserver()
        subject.subscribe(kept.as_observer())
        subject.subscribe(dropped.as_observer()).unsubscribe()

        subject.publish(_record("a"))

        assert kept.messages == ["a"]
        assert dropped.messages == []

    def test_unsubscribe_twice_is_safe(self) -> None:
        subject: Subject[Record] = Subject()
        subscription = subject.subscribe(print)

        subscription.unsubscribe()
        subscription.unsubscribe()

        assert not subscription.is_subscribed

    def test_removal_during_delivery_applies_to_next_notification(self) -> None:
        """An observer removed inside a callback still gets the value in flight."""
        subject: Subject[Record] = Subject()
        victim = RecordingObserver()
        handles: list[Subscription] = []

        def remove_victim(record: Record) -> None:
            handles[0].unsubscribe()

        subject.subscribe(remove_victim)
        handles.append(subject.subscribe(victim.as_observer()))

        subject.publish(_record("a"))
        subject.publish(_record("b"))

        assert victim.messages == ["a"]

    def test_self_unsubscribe_inside_callback(self) -> None:
        subject: Subject[Record] = Subject()
        seen: list[str] = []
        handles: list[Subscription] = []

        def once(record: Record) -> None:
            seen.append(record.message)
            handles[0].unsubscribe()

        handles.append(subject.subscribe(once))
        subject.publish(_record("a"))
        subject.publish(_record("b"))

        assert seen == ["a"]


class TestTermination:
    """Tests for complete() and fail()."""

    def test_complete_notifies_each_observer_once(self) -> None:
        subject: Subject[Record] = Subject()
        first, second = RecordingObserver(), RecordingObserver()
        subject.subscribe(first.as_observer())
        subject.subscribe(second.as_observer())

        subject.complete()

        assert first.completions == 1
        assert second.completions == 1
        assert subject.state == "completed"
        assert not subject.has_observers

    def test_fail_delivers_fault_to_all(self) -> None:
        subject: Subject[Record] = Subject()
        first, second = RecordingObserver(), RecordingObserver()
        subject.subscribe(first.as_observer())
        subject.subscribe(second.as_observer())
        fault = _fault()

        subject.fail(fault)

        assert first.errors == [fault]
        assert second.errors == [fault]
        assert first.completions == 0
        assert subject.is_completed

    def test_late_subscriber_told_of_completion(self) -> None:
        """Subscribing to a completed subject completes immediately."""
        subject: Subject[Record] = Subject()
        subject.complete()
        recorder = RecordingObserver()

        subscription = subject.subscribe(recorder.as_observer())

        assert recorder.events == ["completed"]
        assert not subscription.is_subscribed
        assert not subject.has_observers

    def test_late_subscriber_after_failure_gets_completion(self) -> None:
        subject: Subject[Record] = Subject()
        subject.fail(_fault())
        recorder = RecordingObserver()

        subject.subscribe(recorder.as_observer())

        assert recorder.events == ["completed"]


class TestProtocolMisuse:
    """Tests for notifications on a completed subject."""

    @pytest.mark.parametrize("terminate", ["complete", "fail"])
    def test_publish_after_termination_raises(self, terminate: str) -> None:
        subject: Subject[Record] = Subject()
        if terminate == "complete":
            subject.complete()
        else:
            subject.fail(_fault())

        with pytest.raises(ProtocolMisuse, match="publish"):
            subject.publish(_record("a"))

    def test_complete_twice_raises(self) -> None:
        subject: Subject[Record] = Subject()
        subject.complete()
        with pytest.raises(ProtocolMisuse, match="complete"):
            subject.complete()

    def test_fail_after_complete_raises(self) -> None:
        subject: Subject[Record] = Subject()
        subject.complete()
        with pytest.raises(ProtocolMisuse, match="fail"):
            subject.fail(_fault())

    def test_reentrant_complete_raises(self) -> None:
        """A completion callback cannot complete the stream a second time."""
        subject: Subject[Record] = Subject()
        subject.subscribe(on_completed=subject.complete)

        with pytest.raises(ProtocolMisuse):
            subject.complete()

    def test_protocol_misuse_is_runtime_error(self) -> None:
        assert issubclass(ProtocolMisuse, RuntimeError)


class TestObservable:
    """Tests for the subscribe-only view."""

    def test_observable_forwards_subscription(self) -> None:
        subject: Subject[Record] = Subject()
        recorder = RecordingObserver()

        subject.as_observable().subscribe(recorder.on_next, recorder.on_error, recorder.on_completed)
        subject.publish(_record("a"))
        subject.complete()

        assert recorder.events == ["next", "completed"]

    def test_observable_has_no_publish(self) -> None:
        assert not hasattr(Subject[Record]().as_observable(), "publish")
