"""Kernel – framework-agnostic building blocks."""

from aggregator.kernel.cancellation import CancellationToken
from aggregator.kernel.errors import (
    ApplicationError,
    BaseError,
    ConcurrencyError,
    InfrastructureError,
    MissingDependencyError,
    OperationCancelledError,
    UnhandledCommandError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CancellationToken",
    "ConcurrencyError",
    "InfrastructureError",
    "MissingDependencyError",
    "OperationCancelledError",
    "UnhandledCommandError",
]
