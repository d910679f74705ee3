"""Repository port — loads aggregates for command execution."""

from __future__ import annotations

import abc
from typing import Generic, TypeVar

from aggregator.kernel.cancellation import CancellationToken
from aggregator.kernel.ddd.aggregate import AggregateRoot

TId = TypeVar("TId")
TAggregate = TypeVar("TAggregate", bound=AggregateRoot)


class Repository(abc.ABC, Generic[TId, TAggregate]):
    """Port: aggregate repository.

    ``load`` returns the aggregate for *identifier*, a new one (version 0)
    when nothing has been stored yet. Concurrency control is the
    implementation's concern; the processor only reports the loaded version
    as the expected version when appending.
    """

    @abc.abstractmethod
    async def load(self, identifier: TId, cancellation: CancellationToken) -> TAggregate: ...

    @abc.abstractmethod
    async def save(self, aggregate: TAggregate, cancellation: CancellationToken) -> None: ...


__all__ = ["Repository"]
