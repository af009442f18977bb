"""Application CQRS – @command_handler and @query_handler explicit registration.

An alternative to scanning: each handler names its request type at the
definition site, the decorators collect the pairs in a module-level
catalogue, and :func:`register_decorated_handlers` replays them into a
:class:`HandlerRegistry` at startup.

Usage::

    @command_handler(CreateOrder)
    class CreateOrderHandler(CommandHandler[CreateOrder]):
        async def handle(self, command, cancellation=None) -> None:
            ...

    registry = HandlerRegistry()
    register_decorated_handlers(registry)
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from selfcqrs.application.cqrs.commands import Command
from selfcqrs.application.cqrs.queries import Query
from selfcqrs.application.cqrs.registry import HandlerRegistry

H = TypeVar("H", bound=type)

# ---------------------------------------------------------------------------
# Catalogue populated at import time by the decorators
# ---------------------------------------------------------------------------

_CATALOGUE: list[tuple[type, type]] = []


def _collect(request_type: type) -> Callable[[H], H]:
    def decorator(handler_class: H) -> H:
        _CATALOGUE.append((request_type, handler_class))
        return handler_class

    return decorator


def command_handler(command_type: type[Command]) -> Callable[[H], H]:
    """Class decorator declaring the handler for *command_type*."""
    return _collect(command_type)


def query_handler(query_type: type[Query[Any]]) -> Callable[[H], H]:
    """Class decorator declaring the handler for *query_type*."""
    return _collect(query_type)


def decorated_handlers() -> list[tuple[type, type]]:
    """Snapshot of the ``(request_type, handler_class)`` pairs, in declaration order."""
    return list(_CATALOGUE)


def register_decorated_handlers(registry: HandlerRegistry) -> list[type]:
    """Bind every decorated handler; duplicates follow the registry's policy."""
    bound: list[type] = []
    for request_type, handler_class in _CATALOGUE:
        registry.register(request_type, handler_class)
        bound.append(request_type)
    return bound


def clear_catalogue() -> None:
    """Forget every decorated handler.  Only call in tests."""
    _CATALOGUE.clear()


__all__ = [
    "clear_catalogue",
    "command_handler",
    "decorated_handlers",
    "query_handler",
    "register_decorated_handlers",
]
