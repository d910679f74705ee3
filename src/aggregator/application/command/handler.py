"""Application command – Command marker and CommandHandler port."""
from __future__ import annotations

import abc
from typing import Any, Generic, TypeVar

from aggregator.application.command.context import CommandHandlingContext
from aggregator.kernel.cancellation import CancellationToken

C = TypeVar("C")
TAggregate = TypeVar("TAggregate")


class Command:
    """Marker base for commands (intent to change state).

    The processor reads ``aggregate_id`` to find the target aggregate unless
    it was built with a custom ``identify`` callable.
    """

    aggregate_id: Any


class CommandHandler(abc.ABC, Generic[C, TAggregate]):
    """Execute a single command type against its aggregate.

    Registered in the resolution scope under ``CommandHandler[C]`` (see
    :func:`command_handler_type`). Events raised on the aggregate are picked
    up by the processor after ``handle`` returns.
    """

    @abc.abstractmethod
    async def handle(
        self,
        command: C,
        aggregate: TAggregate,
        context: CommandHandlingContext,
        cancellation: CancellationToken,
    ) -> None: ...


def command_handler_type(command_type: type) -> Any:
    """Resolution token under which the handler of *command_type* is registered."""
    return CommandHandler[command_type, Any]  # type: ignore[valid-type]


__all__ = ["Command", "CommandHandler", "command_handler_type"]
