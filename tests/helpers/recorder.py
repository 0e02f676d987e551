# tests/helpers/recorder.py
"""Observer that records every notification it receives."""

from __future__ import annotations

from rxlog import FormattingFault, Observer, Record


class RecordingObserver:
    """Collects records, errors and completions in arrival order.

    Attributes:
        records: Values received through ``on_next``.
        errors: Faults received through ``on_error``.
        completions: Number of ``on_completed`` calls.
        events: Interleaved log of ("next" | "error" | "completed") tags.
    """

    def __init__(self) -> None:
        self.records: list[Record] = []
        self.errors: list[FormattingFault] = []
        self.completions = 0
        self.events: list[str] = []

    def on_next(self, record: Record) -> None:
        self.records.append(record)
        self.events.append("next")

    def on_error(self, fault: FormattingFault) -> None:
        self.errors.append(fault)
        self.events.append("error")

    def on_completed(self) -> None:
        self.completions += 1
        self.events.append("completed")

    def as_observer(self) -> Observer[Record]:
        return Observer(
            on_next=self.on_next,
            on_error=self.on_error,
            on_completed=self.on_completed,
        )

    @property
    def messages(self) -> list[str]:
        return [record.message for record in self.records]
