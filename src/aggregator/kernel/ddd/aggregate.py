"""AggregateRoot — executes commands and records the events they produce."""

from __future__ import annotations

import abc
from typing import Any, Generic, Iterable, TypeVar

TId = TypeVar("TId")


class AggregateRoot(abc.ABC, Generic[TId]):
    """Event-sourced aggregate root.

    State changes go through :meth:`_raise_event`, which applies the event
    and records it as pending. :meth:`replay` rebuilds state from already
    persisted events without recording them.

    ``TId`` must support equality; it is used to route and look up
    aggregates by identity.

    Example::

        class Order(AggregateRoot[str]):
            def __init__(self, id: str) -> None:
                super().__init__(id)
                self.placed = False

            def place(self) -> None:
                self._raise_event(OrderPlaced(order_id=self.id))

            def apply(self, event: object) -> None:
                if isinstance(event, OrderPlaced):
                    self.placed = True
    """

    def __init__(self, id: TId) -> None:  # noqa: A002
        self._id = id
        self._version = 0
        self._events: list[Any] = []

    @property
    def id(self) -> TId:
        return self._id

    @property
    def version(self) -> int:
        """Number of persisted events this instance was rebuilt from."""
        return self._version

    @property
    def is_new(self) -> bool:
        return self._version == 0

    @property
    def has_changes(self) -> bool:
        return bool(self._events)

    @abc.abstractmethod
    def apply(self, event: Any) -> None:
        """Mutate state for a single event. Must not raise new events."""

    def _raise_event(self, event: Any) -> None:
        self.apply(event)
        self._events.append(event)

    def replay(self, events: Iterable[Any]) -> None:
        """Rebuild state from persisted *events*, bumping the version for each."""
        for event in events:
            self.apply(event)
            self._version += 1

    def mark_persisted(self, event_count: int) -> None:
        """Advance the version once *event_count* pulled events were stored."""
        self._version += event_count

    def pull_events(self) -> list[Any]:
        """Return and clear pending events, in the order they were raised."""
        events = list(self._events)
        self._events.clear()
        return events

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}(id={self._id!r}, version={self._version})"


__all__ = ["AggregateRoot"]
