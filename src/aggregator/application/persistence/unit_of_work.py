"""UnitOfWork — collects the events raised during one command execution."""

from __future__ import annotations

import dataclasses
from typing import Any

from aggregator.kernel.ddd.aggregate import AggregateRoot


@dataclasses.dataclass(frozen=True)
class AggregateChanges:
    """Pending events of one aggregate plus the version they were raised on."""

    identifier: Any
    events: tuple[Any, ...]
    expected_version: int


class UnitOfWork:
    """Tracks the aggregates touched by one ``process`` call.

    The expected version is captured at :meth:`attach` time, before the
    command runs. :meth:`get_changes` yields changes in attach order, each
    with its events in the order they were raised.
    """

    def __init__(self) -> None:
        self._entries: dict[Any, tuple[AggregateRoot, int]] = {}

    def attach(self, aggregate: AggregateRoot) -> None:
        self._entries.setdefault(aggregate.id, (aggregate, aggregate.version))

    def get_changes(self) -> list[AggregateChanges]:
        """Pull pending events from every attached aggregate that has any."""
        changes: list[AggregateChanges] = []
        for identifier, (aggregate, version) in self._entries.items():
            events = aggregate.pull_events()
            if events:
                changes.append(AggregateChanges(identifier, tuple(events), version))
        return changes

    def mark_persisted(self, changes: AggregateChanges) -> None:
        """Advance the attached aggregate past the events *changes* stored."""
        aggregate, _ = self._entries[changes.identifier]
        aggregate.mark_persisted(len(changes.events))


__all__ = ["AggregateChanges", "UnitOfWork"]
