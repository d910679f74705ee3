"""Application command – CommandProcessor: command in, durable dispatched events out."""
from __future__ import annotations

import contextlib
import operator
from typing import Any, Callable, Generic, TypeVar

import structlog

from aggregator.application.command.context import CORRELATION_ID, CommandHandlingContext
from aggregator.application.command.handler import command_handler_type
from aggregator.application.command.notification import CommandProcessorNotificationHandlers
from aggregator.application.event.dispatcher import EventDispatcher
from aggregator.application.persistence.event_store import EventStore
from aggregator.application.persistence.repository import Repository
from aggregator.application.persistence.unit_of_work import UnitOfWork
from aggregator.kernel.cancellation import CancellationToken
from aggregator.kernel.di import ServiceScopeFactory
from aggregator.kernel.errors import BaseError, MissingDependencyError, UnhandledCommandError

TId = TypeVar("TId")
TCommand = TypeVar("TCommand")
TEvent = TypeVar("TEvent")

logger = structlog.get_logger(__name__)


class CommandProcessor(Generic[TId, TCommand, TEvent]):
    """Run one command through the pipeline.

    Steps, strictly in order:

    1. create a fresh :class:`CommandHandlingContext`;
    2. ``on_prepare_context``;
    3. load the target aggregate and attach it to a :class:`UnitOfWork`;
    4. resolve ``CommandHandler[type(command)]`` and execute the command;
    5. ``on_enrich_event`` for every raw event, in production order;
    6. append the enriched events to the event store;
    7. dispatch the enriched events.

    A failing step aborts the ones after it. Nothing is rolled back here;
    that belongs to the store's own transactional guarantees.
    """

    def __init__(
        self,
        scope_factory: ServiceScopeFactory,
        repository: Repository[TId, Any],
        event_store: EventStore[TId, TEvent],
        event_dispatcher: EventDispatcher[TEvent],
        notification_handlers: CommandProcessorNotificationHandlers[TCommand, TEvent] | None = None,
        identify: Callable[[TCommand], TId] | None = None,
    ) -> None:
        for name, value in (
            ("scope_factory", scope_factory),
            ("repository", repository),
            ("event_store", event_store),
            ("event_dispatcher", event_dispatcher),
        ):
            if value is None:
                raise MissingDependencyError(name)
        self._scope_factory = scope_factory
        self._repository = repository
        self._event_store = event_store
        self._event_dispatcher = event_dispatcher
        self._notifications = notification_handlers or CommandProcessorNotificationHandlers()
        self._identify: Callable[[TCommand], TId] = identify or operator.attrgetter("aggregate_id")

    async def process(self, command: TCommand, cancellation: CancellationToken | None = None) -> None:
        if cancellation is None:
            cancellation = CancellationToken()

        context = CommandHandlingContext()
        self._notifications.on_prepare_context(command, context)

        log_context: dict[str, Any] = {"command_type": type(command).__name__}
        correlation_id = context.get(CORRELATION_ID)
        if correlation_id is not None:
            log_context["correlation_id"] = correlation_id

        with structlog.contextvars.bound_contextvars(**log_context):
            try:
                await self._process(command, context, cancellation)
            except BaseError as exc:
                logger.warning("command.failed", **exc.log_fields())
                raise

    async def _process(
        self,
        command: TCommand,
        context: CommandHandlingContext,
        cancellation: CancellationToken,
    ) -> None:
        cancellation.raise_if_cancellation_requested()
        identifier = self._identify(command)
        logger.debug("command.processing", aggregate_id=str(identifier))

        aggregate = await self._repository.load(identifier, cancellation)
        unit_of_work = UnitOfWork()
        unit_of_work.attach(aggregate)

        cancellation.raise_if_cancellation_requested()
        await self._execute(command, aggregate, context, cancellation)

        changes = unit_of_work.get_changes()
        if not changes:
            logger.info("command.processed", aggregate_id=str(identifier), event_count=0)
            return

        # Enrich everything before anything is persisted.
        enriched = [
            (
                change,
                [self._notifications.on_enrich_event(event, command, context) for event in change.events],
            )
            for change in changes
        ]

        cancellation.raise_if_cancellation_requested()
        for change, events in enriched:
            await self._event_store.append(
                change.identifier, events, change.expected_version, cancellation
            )
            unit_of_work.mark_persisted(change)

        all_events = [event for _, events in enriched for event in events]
        await self._event_dispatcher.dispatch(all_events, cancellation)
        logger.info(
            "command.processed",
            aggregate_id=str(identifier),
            event_count=len(all_events),
        )

    async def _execute(
        self,
        command: TCommand,
        aggregate: Any,
        context: CommandHandlingContext,
        cancellation: CancellationToken,
    ) -> None:
        with contextlib.closing(self._scope_factory.create_scope()) as scope:
            handler = scope.get_service(command_handler_type(type(command)))
            if handler is None:
                raise UnhandledCommandError(type(command))
            await handler.handle(command, aggregate, context, cancellation)


__all__ = ["CommandProcessor"]
