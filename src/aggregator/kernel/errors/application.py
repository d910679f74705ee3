"""Application-layer errors raised by the command pipeline and dispatcher."""

from __future__ import annotations

from typing import Any

from aggregator.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class MissingDependencyError(ApplicationError, ValueError):
    """A required constructor dependency was ``None``.

    Raised at construction time, never deferred to a later call.
    ``parameter`` names the offending constructor argument.
    """

    default_code = "missing_dependency"

    def __init__(self, parameter: str, **kwargs: Any) -> None:
        super().__init__(
            f"Required dependency '{parameter}' is missing",
            detail={"parameter": parameter},
            **kwargs,
        )
        self.parameter = parameter


class UnhandledCommandError(ApplicationError):
    """No command handler is registered for the command's exact type."""

    default_code = "unhandled_command"

    def __init__(self, command_type: type, **kwargs: Any) -> None:
        super().__init__(
            f"No handler registered for command {command_type.__name__!r}",
            detail={"command_type": command_type.__name__},
            **kwargs,
        )
        self.command_type = command_type


class OperationCancelledError(ApplicationError):
    """The operation observed a cancellation request."""

    default_code = "operation_cancelled"

    def __init__(self, message: str = "Operation was cancelled", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = [
    "ApplicationError",
    "MissingDependencyError",
    "OperationCancelledError",
    "UnhandledCommandError",
]
