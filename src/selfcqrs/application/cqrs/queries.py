"""Application CQRS – Query and QueryHandler."""
from __future__ import annotations

import abc
from typing import Generic, TypeVar

from selfcqrs.kernel.cancellation import CancellationToken

Q = TypeVar("Q", bound="Query")
R = TypeVar("R")


class Query(Generic[R]):
    """Marker base for queries (read-only intent producing an ``R``).

    Concrete queries fix ``R`` in their bases so it stays recoverable at
    dispatch time: ``class GetUser(Query[User])``.
    """


class QueryHandler(abc.ABC, Generic[Q, R]):
    """Handle a single query type and return its declared response."""

    @abc.abstractmethod
    async def handle(self, query: Q, cancellation: CancellationToken | None = None) -> R: ...


__all__ = ["Query", "QueryHandler"]
