"""Unit tests for CommandHandlingContext and CommandProcessorNotificationHandlers."""

from __future__ import annotations

import dataclasses

import pytest

from aggregator.application.command import (
    CORRELATION_ID,
    CommandHandlingContext,
    CommandProcessorNotificationHandlers,
    ContextKey,
)

TENANT: ContextKey[str] = ContextKey("tenant")
ATTEMPT: ContextKey[int] = ContextKey("attempt")


# ---------------------------------------------------------------------------
# CommandHandlingContext
# ---------------------------------------------------------------------------


class TestCommandHandlingContext:
    def test_new_context_is_empty(self) -> None:
        ctx = CommandHandlingContext()
        assert len(ctx) == 0
        assert CORRELATION_ID not in ctx

    def test_set_and_get(self) -> None:
        ctx = CommandHandlingContext()
        ctx.set(TENANT, "acme")
        ctx.set(ATTEMPT, 3)
        assert ctx.get(TENANT) == "acme"
        assert ctx.get(ATTEMPT) == 3
        assert len(ctx) == 2

    def test_get_missing_returns_default(self) -> None:
        ctx = CommandHandlingContext()
        assert ctx.get(TENANT) is None
        assert ctx.get(TENANT, "fallback") == "fallback"

    def test_set_overwrites(self) -> None:
        ctx = CommandHandlingContext()
        ctx.set(ATTEMPT, 1)
        ctx.set(ATTEMPT, 2)
        assert ctx.require(ATTEMPT) == 2
        assert len(ctx) == 1

    def test_require_missing_raises_key_error(self) -> None:
        ctx = CommandHandlingContext()
        with pytest.raises(KeyError, match="tenant"):
            ctx.require(TENANT)

    def test_keys_compare_by_name(self) -> None:
        ctx = CommandHandlingContext()
        ctx.set(ContextKey("tenant"), "acme")
        assert ctx.get(TENANT) == "acme"
        assert TENANT in ctx

    def test_context_key_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            TENANT.name = "other"  # type: ignore[misc]

    def test_contexts_are_independent(self) -> None:
        first = CommandHandlingContext()
        second = CommandHandlingContext()
        first.set(TENANT, "acme")
        assert TENANT not in second


# ---------------------------------------------------------------------------
# CommandProcessorNotificationHandlers
# ---------------------------------------------------------------------------


class TestNotificationHandlers:
    def test_unset_prepare_is_noop(self) -> None:
        ctx = CommandHandlingContext()
        CommandProcessorNotificationHandlers().on_prepare_context(object(), ctx)
        assert len(ctx) == 0

    def test_unset_enrich_returns_same_instance(self) -> None:
        event = object()
        result = CommandProcessorNotificationHandlers().on_enrich_event(
            event, object(), CommandHandlingContext()
        )
        assert result is event

    def test_prepare_receives_command_and_context(self) -> None:
        received: list[tuple[object, CommandHandlingContext]] = []
        hooks = CommandProcessorNotificationHandlers(
            prepare_context=lambda cmd, ctx: received.append((cmd, ctx))
        )
        command, ctx = object(), CommandHandlingContext()
        hooks.on_prepare_context(command, ctx)
        assert received == [(command, ctx)]

    def test_enrich_result_replaces_event(self) -> None:
        hooks = CommandProcessorNotificationHandlers(
            enrich_event=lambda evt, cmd, ctx: {**evt, "tenant": ctx.get(TENANT)}
        )
        ctx = CommandHandlingContext()
        ctx.set(TENANT, "acme")
        assert hooks.on_enrich_event({"id": 1}, object(), ctx) == {"id": 1, "tenant": "acme"}

    def test_hook_exceptions_propagate(self) -> None:
        def _boom(cmd: object, ctx: CommandHandlingContext) -> None:
            raise LookupError("no principal")

        hooks = CommandProcessorNotificationHandlers(prepare_context=_boom)
        with pytest.raises(LookupError, match="no principal"):
            hooks.on_prepare_context(object(), CommandHandlingContext())

    def test_hooks_cannot_be_rebound(self) -> None:
        hooks = CommandProcessorNotificationHandlers()
        with pytest.raises(dataclasses.FrozenInstanceError):
            hooks.enrich_event = lambda evt, cmd, ctx: evt  # type: ignore[misc]
