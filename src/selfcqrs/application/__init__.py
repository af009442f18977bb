"""Application – use-case building blocks (CQRS dispatch)."""

from selfcqrs.application.cqrs import (
    Command,
    CommandHandler,
    DispatchFacility,
    Dispatcher,
    HandlerRegistry,
    Query,
    QueryHandler,
    register_dispatch_facility,
    scan_and_register_handlers,
)

__all__ = [
    "Command",
    "CommandHandler",
    "DispatchFacility",
    "Dispatcher",
    "HandlerRegistry",
    "Query",
    "QueryHandler",
    "register_dispatch_facility",
    "scan_and_register_handlers",
]
