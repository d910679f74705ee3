"""Domain events."""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4


@dataclasses.dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Optional base class for domain events.

    The pipeline accepts any object as an event; this base only adds an id,
    a timestamp and a metadata mapping that enrichment hooks can extend.
    Base fields are keyword-only, so subclasses may declare positional
    payload fields.

    Example::

        @dataclasses.dataclass(frozen=True)
        class OrderPlaced(DomainEvent):
            order_id: str
    """

    event_id: str = dataclasses.field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))
    metadata: dict[str, Any] = dataclasses.field(default_factory=dict, hash=False)

    @property
    def event_type(self) -> str:
        return type(self).__name__

    def with_metadata(self, **values: Any) -> "DomainEvent":
        """Return a copy of this event with *values* merged into ``metadata``."""
        return dataclasses.replace(self, metadata={**self.metadata, **values})


__all__ = ["DomainEvent"]
