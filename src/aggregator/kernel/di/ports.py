"""Resolution scope ports consumed by the processor and the dispatcher.

The container behind these ports is external. Any object with matching
methods satisfies them; no inheritance is required.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ServiceScope(Protocol):
    """Short-lived resolution lifetime.

    ``get_service`` returns ``None`` when nothing is registered for *token*.
    ``close`` releases scoped instances and is called exactly once.
    """

    def get_service(self, token: Any) -> Any | None: ...

    def close(self) -> None: ...


@runtime_checkable
class ServiceScopeFactory(Protocol):
    """Creates a new :class:`ServiceScope` per call."""

    def create_scope(self) -> ServiceScope: ...


__all__ = ["ServiceScope", "ServiceScopeFactory"]
