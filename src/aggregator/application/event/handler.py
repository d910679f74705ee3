"""Application event – EventHandler port."""

from __future__ import annotations

import abc
from typing import Any, Generic, TypeVar

from aggregator.kernel.cancellation import CancellationToken

E = TypeVar("E")


class EventHandler(abc.ABC, Generic[E]):
    """Handle a single concrete event type.

    A class may implement several event types by registering one instance
    per type; several handlers may target the same type.
    """

    @abc.abstractmethod
    async def handle(self, event: E, cancellation: CancellationToken) -> None: ...


def handler_collection_type(event_type: type) -> Any:
    """Resolution token for every handler registered for exactly *event_type*."""
    return list[EventHandler[event_type]]  # type: ignore[valid-type]


__all__ = ["EventHandler", "handler_collection_type"]
