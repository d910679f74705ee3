"""Notification hooks invoked by the command processor."""
from __future__ import annotations

import dataclasses
from typing import Callable, Generic, TypeVar

from aggregator.application.command.context import CommandHandlingContext

TCommand = TypeVar("TCommand")
TEvent = TypeVar("TEvent")

PrepareContext = Callable[[TCommand, CommandHandlingContext], None]
EnrichEvent = Callable[[TEvent, TCommand, CommandHandlingContext], TEvent]


@dataclasses.dataclass(frozen=True)
class CommandProcessorNotificationHandlers(Generic[TCommand, TEvent]):
    """Optional callbacks, fixed at construction.

    * ``prepare_context`` runs once, first, before any aggregate is loaded.
    * ``enrich_event`` runs once per raw event, in production order, before
      anything is persisted. Its return value replaces the event.

    Both may be left unset. Exceptions raised by either propagate to the
    caller of ``process`` and abort the remaining steps.

    Usage::

        hooks = CommandProcessorNotificationHandlers(
            prepare_context=lambda cmd, ctx: ctx.set(CORRELATION_ID, cmd.request_id),
            enrich_event=lambda evt, cmd, ctx: evt.with_metadata(
                correlation_id=ctx.get(CORRELATION_ID)
            ),
        )
    """

    prepare_context: PrepareContext[TCommand] | None = None
    enrich_event: EnrichEvent[TEvent, TCommand] | None = None

    def on_prepare_context(self, command: TCommand, context: CommandHandlingContext) -> None:
        if self.prepare_context is not None:
            self.prepare_context(command, context)

    def on_enrich_event(
        self, event: TEvent, command: TCommand, context: CommandHandlingContext
    ) -> TEvent:
        if self.enrich_event is None:
            return event
        return self.enrich_event(event, command, context)


__all__ = ["CommandProcessorNotificationHandlers", "EnrichEvent", "PrepareContext"]
