"""Application event – EventDispatcher: routes persisted events to handlers."""

from __future__ import annotations

import contextlib
from typing import Any, Generic, Iterable, Sequence, TypeVar

import structlog

from aggregator.application.event.handler import EventHandler, handler_collection_type
from aggregator.kernel.cancellation import CancellationToken
from aggregator.kernel.di import ServiceScope, ServiceScopeFactory
from aggregator.kernel.errors import MissingDependencyError

TEvent = TypeVar("TEvent")

logger = structlog.get_logger(__name__)


class EventDispatcher(Generic[TEvent]):
    """Invoke the handlers registered for each event's exact runtime type.

    One resolution scope is created per non-empty :meth:`dispatch` call and
    closed exactly once, whatever the outcome. Handlers registered for a base
    class do not receive subclass events.

    Usage::

        dispatcher = EventDispatcher(scope_factory)
        await dispatcher.dispatch([OrderPlaced(order_id="o-1")], token)
    """

    def __init__(self, scope_factory: ServiceScopeFactory) -> None:
        if scope_factory is None:
            raise MissingDependencyError("scope_factory")
        self._scope_factory = scope_factory

    async def dispatch(
        self,
        events: Iterable[TEvent] | None,
        cancellation: CancellationToken | None = None,
    ) -> None:
        """Invoke every matching handler once per event, in batch order.

        *events* may be any iterable; it is read once, before the scope is
        created. ``None`` or an empty batch is a no-op. A handler exception
        propagates after the scope is closed; handlers not yet invoked are
        skipped.
        """
        if events is None:
            return
        events = list(events)
        if not events:
            return
        if cancellation is None:
            cancellation = CancellationToken()

        with contextlib.closing(self._scope_factory.create_scope()) as scope:
            handlers = self._resolve_handlers(scope, events)
            log = logger.bind(event_count=len(events), event_types=len(handlers))
            log.debug("events.dispatching")
            for event in events:
                for handler in handlers[type(event)]:
                    try:
                        await handler.handle(event, cancellation)
                    except Exception:
                        log.warning(
                            "event.handler_failed",
                            event_type=type(event).__name__,
                            handler=type(handler).__name__,
                        )
                        raise
            log.debug("events.dispatched")

    @staticmethod
    def _resolve_handlers(
        scope: ServiceScope, events: Sequence[Any]
    ) -> dict[type, list[EventHandler[Any]]]:
        """Resolve each distinct event type exactly once, in first-seen order."""
        handlers: dict[type, list[EventHandler[Any]]] = {}
        for event in events:
            event_type = type(event)
            if event_type in handlers:
                continue
            resolved = scope.get_service(handler_collection_type(event_type))
            handlers[event_type] = list(resolved) if resolved else []
        return handlers


__all__ = ["EventDispatcher"]
