"""Infrastructure errors — raised by persistence collaborators."""

from __future__ import annotations

from typing import Any

from aggregator.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class ConcurrencyError(InfrastructureError):
    """The expected stream version does not match the stored one."""

    default_code = "concurrency_conflict"

    def __init__(self, identifier: Any, expected: int, actual: int, **kwargs: Any) -> None:
        super().__init__(
            f"Concurrency conflict on aggregate '{identifier}': "
            f"expected version {expected}, found {actual}",
            detail={"identifier": str(identifier), "expected": expected, "actual": actual},
            **kwargs,
        )
        self.identifier = identifier
        self.expected = expected
        self.actual = actual


__all__ = ["ConcurrencyError", "InfrastructureError"]
