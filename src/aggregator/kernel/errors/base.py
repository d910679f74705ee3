"""Root error class for the aggregator error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of every error this package raises.

    ``code`` is a stable slug for the failure kind and ``detail`` holds the
    values that identify the failing call (parameter name, command type,
    stream version...). :meth:`log_fields` flattens both into key/value
    pairs for a structlog call.
    """

    default_code: str = "aggregator_error"

    def __init__(
        self,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = dict(detail or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def code(self) -> str:
        return self.default_code

    def log_fields(self) -> dict[str, Any]:
        return {"error_code": self.code, **self.detail}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


__all__ = ["BaseError"]
