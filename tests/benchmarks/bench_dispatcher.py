"""Benchmark: Dispatcher.send.

Measures the median dispatch latency of:
- a command routed to an async handler
- a query routed to a class-bound handler (fresh instance per call)
- a query routed to a sync handler (no awaitable returned)

Target: resolution overhead well under 100 µs per dispatch.
"""

from __future__ import annotations

from typing import Any

from selfcqrs.application.cqrs import (
    Command,
    CommandHandler,
    Dispatcher,
    HandlerRegistry,
    Query,
    QueryHandler,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


class _PlaceOrder(Command):
    """Minimal command used only in benchmarks."""


class _OrderTotal(Query[int]):
    """Minimal query used only in benchmarks."""


class _PlaceOrderHandler(CommandHandler[_PlaceOrder]):
    async def handle(self, command: _PlaceOrder, cancellation: Any = None) -> None:
        return None


class _OrderTotalHandler(QueryHandler[_OrderTotal, int]):
    async def handle(self, query: _OrderTotal, cancellation: Any = None) -> int:
        return 42


class _SyncOrderTotalHandler(QueryHandler[_OrderTotal, int]):
    def handle(self, query: _OrderTotal, cancellation: Any = None) -> int:  # type: ignore[override]
        return 42


def _make_dispatcher(query_handler: Any = _OrderTotalHandler) -> Dispatcher:
    registry = HandlerRegistry()
    registry.register(_PlaceOrder, _PlaceOrderHandler())
    registry.register(_OrderTotal, query_handler)
    registry.freeze()
    return Dispatcher(registry)


# ---------------------------------------------------------------------------
# Benchmarks
# ---------------------------------------------------------------------------


def test_send_command(benchmark, run_async):
    """Command bound to a handler instance."""
    dispatcher = _make_dispatcher()
    cmd = _PlaceOrder()

    result = benchmark(lambda: run_async(dispatcher.send(cmd)))
    assert result is None


def test_send_query_class_binding(benchmark, run_async):
    """Query bound to a handler class: one instantiation per dispatch."""
    dispatcher = _make_dispatcher()
    query = _OrderTotal()

    result = benchmark(lambda: run_async(dispatcher.send(query)))
    assert result == 42


def test_send_query_sync_handler(benchmark, run_async):
    """Sync handler: no awaitable to drive beyond the dispatcher coroutine."""
    dispatcher = _make_dispatcher(_SyncOrderTotalHandler)
    query = _OrderTotal()

    result = benchmark(lambda: run_async(dispatcher.send(query)))
    assert result == 42
