"""Testing utilities – in-memory fakes for the pipeline's ports."""
from aggregator.testing.fakes import (
    EventSourcedInMemoryRepository,
    InMemoryEventStore,
    InMemoryServiceScope,
    InMemoryServiceScopeFactory,
    RecordingEventHandler,
)

__all__ = [
    "EventSourcedInMemoryRepository",
    "InMemoryEventStore",
    "InMemoryServiceScope",
    "InMemoryServiceScopeFactory",
    "RecordingEventHandler",
]
