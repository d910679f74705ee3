"""Testing fakes – in-memory doubles for the pipeline's external ports."""
from aggregator.testing.fakes.container import InMemoryServiceScope, InMemoryServiceScopeFactory
from aggregator.testing.fakes.event_store import InMemoryEventStore
from aggregator.testing.fakes.handlers import RecordingEventHandler
from aggregator.testing.fakes.repository import EventSourcedInMemoryRepository

__all__ = [
    "EventSourcedInMemoryRepository",
    "InMemoryEventStore",
    "InMemoryServiceScope",
    "InMemoryServiceScopeFactory",
    "RecordingEventHandler",
]
