"""Cooperative cancellation token threaded through the pipeline."""
from __future__ import annotations

from aggregator.kernel.errors import OperationCancelledError


class CancellationToken:
    """Cooperative cancellation flag.

    The pipeline never cancels on its own; it only checks the token between
    steps and hands it to every external call and handler, which decide what
    to do with it.

    Usage::

        token = CancellationToken()
        task = asyncio.create_task(processor.process(command, token))
        ...
        token.cancel()
    """

    __slots__ = ("_cancelled",)

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def is_cancellation_requested(self) -> bool:
        return self._cancelled

    def raise_if_cancellation_requested(self) -> None:
        if self._cancelled:
            raise OperationCancelledError()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self._cancelled})"


__all__ = ["CancellationToken"]
