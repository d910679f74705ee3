"""Application persistence – ports consumed by the command processor."""
from aggregator.application.persistence.event_store import EventStore
from aggregator.application.persistence.repository import Repository
from aggregator.application.persistence.unit_of_work import AggregateChanges, UnitOfWork

__all__ = ["AggregateChanges", "EventStore", "Repository", "UnitOfWork"]
