"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError         (application.py)
    │   ├── MissingDependencyError
    │   ├── UnhandledCommandError
    │   └── OperationCancelledError
    └── InfrastructureError      (infrastructure.py)
        └── ConcurrencyError

Exceptions raised by event handlers and notification hooks are not wrapped:
they reach the caller of ``process`` / ``dispatch`` unchanged.
"""

from aggregator.kernel.errors.application import (
    ApplicationError,
    MissingDependencyError,
    OperationCancelledError,
    UnhandledCommandError,
)
from aggregator.kernel.errors.base import BaseError
from aggregator.kernel.errors.infrastructure import ConcurrencyError, InfrastructureError

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConcurrencyError",
    "InfrastructureError",
    "MissingDependencyError",
    "OperationCancelledError",
    "UnhandledCommandError",
]
