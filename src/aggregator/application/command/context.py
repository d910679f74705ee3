"""Command handling context – per-``process`` bag of typed values."""
from __future__ import annotations

import dataclasses
from typing import Any, Generic, TypeVar, overload

T = TypeVar("T")
D = TypeVar("D")


@dataclasses.dataclass(frozen=True)
class ContextKey(Generic[T]):
    """Named key for a :class:`CommandHandlingContext` value of type ``T``.

    Keys compare by name, so declare each key once at module level::

        PRINCIPAL: ContextKey[Principal] = ContextKey("principal")
    """

    name: str

    def __repr__(self) -> str:
        return f"ContextKey({self.name!r})"


CORRELATION_ID: ContextKey[str] = ContextKey("correlation_id")


class CommandHandlingContext:
    """Ambient values for one command processing call.

    Created empty by the processor, seeded by the prepare-context hook and
    then read by command handlers and the enrich-event hook. Values cannot be
    removed once set.
    """

    def __init__(self) -> None:
        self._values: dict[ContextKey[Any], Any] = {}

    def set(self, key: ContextKey[T], value: T) -> None:
        self._values[key] = value

    @overload
    def get(self, key: ContextKey[T]) -> T | None: ...

    @overload
    def get(self, key: ContextKey[T], default: D) -> T | D: ...

    def get(self, key: ContextKey[Any], default: Any = None) -> Any:
        return self._values.get(key, default)

    def require(self, key: ContextKey[T]) -> T:
        try:
            return self._values[key]
        except KeyError:
            raise KeyError(f"No value set for {key!r}") from None

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        keys = ", ".join(k.name for k in self._values)
        return f"CommandHandlingContext({keys})"


__all__ = ["CORRELATION_ID", "CommandHandlingContext", "ContextKey"]
