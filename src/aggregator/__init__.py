"""
aggregator – CQRS command-processing pipeline and event dispatch.

Import path convention::

    from aggregator.kernel.errors import MissingDependencyError
    from aggregator.kernel.ddd import AggregateRoot, DomainEvent
    from aggregator.application.command import CommandProcessor, CommandHandler
    from aggregator.application.event import EventDispatcher, EventHandler
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
