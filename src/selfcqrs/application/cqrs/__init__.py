"""Application CQRS – commands, queries, handler registry and dispatcher."""
from selfcqrs.application.cqrs.commands import Command, CommandHandler
from selfcqrs.application.cqrs.decorators import (
    clear_catalogue,
    command_handler,
    decorated_handlers,
    query_handler,
    register_decorated_handlers,
)
from selfcqrs.application.cqrs.dispatcher import Dispatcher
from selfcqrs.application.cqrs.introspection import HandlerKind, ServedRequest, served_requests
from selfcqrs.application.cqrs.queries import Query, QueryHandler
from selfcqrs.application.cqrs.registry import HandlerBinding, HandlerRegistry
from selfcqrs.application.cqrs.scanner import handler_types, scan_and_register_handlers
from selfcqrs.application.cqrs.wiring import DispatchFacility, register_dispatch_facility

__all__ = [
    "Command",
    "CommandHandler",
    "DispatchFacility",
    "Dispatcher",
    "HandlerBinding",
    "HandlerKind",
    "HandlerRegistry",
    "Query",
    "QueryHandler",
    "ServedRequest",
    "clear_catalogue",
    "command_handler",
    "decorated_handlers",
    "handler_types",
    "query_handler",
    "register_decorated_handlers",
    "register_dispatch_facility",
    "scan_and_register_handlers",
    "served_requests",
]
