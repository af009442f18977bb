"""Kernel – cooperative cancellation signal forwarded to handlers.

The dispatcher never inspects a token; it hands whatever the caller passed
(including ``None``) to the handler, which decides when to observe it::

    token = CancellationToken()
    task = asyncio.create_task(dispatcher.send(ImportUsers(...), token))
    token.cancel()          # the handler raises OperationCancelledError
"""
from __future__ import annotations

import asyncio
import threading
from typing import Any

from selfcqrs.kernel.errors.base import BaseError


class OperationCancelledError(BaseError):
    """Raised by a handler that observed a cancelled token."""

    default_code = "operation_cancelled"

    def __init__(self, message: str = "Operation was cancelled", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class CancellationToken:
    """Thread-safe, one-way cancellation flag.

    Once cancelled a token stays cancelled. Safe to share between threads
    and event loops because the state lives in a :class:`threading.Event`.
    """

    _NONE: CancellationToken | None = None

    def __init__(self) -> None:
        self._event = threading.Event()
        self._reason: str | None = None

    @classmethod
    def none(cls) -> CancellationToken:
        """Shared token that is never cancelled."""
        if cls._NONE is None:
            cls._NONE = _NeverCancelledToken()
        return cls._NONE

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> str | None:
        return self._reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation; only the first reason is kept."""
        if not self._event.is_set():
            self._reason = reason
            self._event.set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise OperationCancelledError(self._reason or "Operation was cancelled")

    async def wait(self, poll_interval: float = 0.01) -> None:
        """Suspend until the token is cancelled.

        The token is set from any thread and is not bound to an event loop,
        so this polls instead of awaiting a loop future. Wake-up lags
        ``cancel()`` by at most *poll_interval* seconds (10 ms by default);
        pass a larger value for long waits that can tolerate the delay.
        """
        while not self._event.is_set():
            await asyncio.sleep(poll_interval)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cancelled={self.is_cancelled})"


class _NeverCancelledToken(CancellationToken):
    def cancel(self, reason: str | None = None) -> None:
        raise TypeError("CancellationToken.none() cannot be cancelled")


__all__ = ["CancellationToken", "OperationCancelledError"]
