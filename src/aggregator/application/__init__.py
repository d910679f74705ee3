"""Application – command pipeline, event dispatch and persistence ports."""

from aggregator.application.command import (
    CORRELATION_ID,
    Command,
    CommandHandler,
    CommandHandlingContext,
    CommandProcessor,
    CommandProcessorNotificationHandlers,
    ContextKey,
)
from aggregator.application.event import EventDispatcher, EventHandler
from aggregator.application.persistence import AggregateChanges, EventStore, Repository, UnitOfWork

__all__ = [
    "AggregateChanges",
    "CORRELATION_ID",
    "Command",
    "CommandHandler",
    "CommandHandlingContext",
    "CommandProcessor",
    "CommandProcessorNotificationHandlers",
    "ContextKey",
    "EventDispatcher",
    "EventHandler",
    "EventStore",
    "Repository",
    "UnitOfWork",
]
