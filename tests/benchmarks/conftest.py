"""conftest.py for benchmarks.

Provides a session event loop, a helper to drive coroutines on it, and
quiets structlog so debug output from the dispatcher does not skew timings.
"""

from __future__ import annotations

import asyncio
import logging

import pytest
import structlog


@pytest.fixture(scope="session", autouse=True)
def _quiet_structlog():
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))
    yield
    structlog.reset_defaults()


@pytest.fixture(scope="session")
def event_loop():
    """Session-scoped event loop shared by all async benchmark helpers."""
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture(scope="session")
def run_async(event_loop):
    """Execute a coroutine in the session event loop.

    Usage inside a benchmark::

        def test_something(benchmark, run_async):
            benchmark(lambda: run_async(some_coroutine_factory()))
    """

    def _run(coro):
        return event_loop.run_until_complete(coro)

    return _run
