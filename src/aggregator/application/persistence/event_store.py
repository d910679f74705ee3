"""EventStore port — durable, append-only, per-aggregate event streams."""

from __future__ import annotations

import abc
from typing import Any, Generic, Sequence, TypeVar

from aggregator.kernel.cancellation import CancellationToken

TId = TypeVar("TId")
TEvent = TypeVar("TEvent")


class EventStore(abc.ABC, Generic[TId, TEvent]):
    """Port — durable append-only event store.

    ``expected_version`` is the number of events the caller saw when it
    loaded the aggregate. Implementations raise
    :class:`~aggregator.kernel.errors.ConcurrencyError` when the stream has
    moved on.
    """

    @abc.abstractmethod
    async def append(
        self,
        identifier: TId,
        events: Sequence[TEvent],
        expected_version: int,
        cancellation: CancellationToken,
    ) -> None:
        """Append *events* to the stream of *identifier*, in order."""

    @abc.abstractmethod
    async def read(self, identifier: TId, cancellation: CancellationToken) -> list[Any]:
        """Return every stored event of *identifier*, oldest first."""


__all__ = ["EventStore"]
