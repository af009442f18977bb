"""Application CQRS – recover request / response types from generic bases.

Handlers state what they serve through their generic parameters
(``CommandHandler[CreateUser]``, ``QueryHandler[GetUser, User]``) and
queries state what they return (``Query[User]``). Those parameters survive
at run time in ``__orig_bases__``; this module reads them back so the
registry can key bindings by concrete request type.
"""
from __future__ import annotations

import dataclasses
import enum
from typing import Any, ForwardRef, TypeVar, get_args, get_origin

from selfcqrs.application.cqrs.commands import Command, CommandHandler
from selfcqrs.application.cqrs.queries import Query, QueryHandler


class HandlerKind(str, enum.Enum):
    """The two call shapes a request can take."""

    COMMAND = "command"
    QUERY = "query"


@dataclasses.dataclass(frozen=True)
class ServedRequest:
    """One request type a handler class declares it serves."""

    kind: HandlerKind
    request_type: type
    response_type: Any = None


def _own_generic_bases(klass: type) -> tuple[Any, ...]:
    # Only the bases written on this class; inherited ones are visited via the MRO.
    return vars(klass).get("__orig_bases__", ())


def _is_request_class(arg: Any, marker: type) -> bool:
    return isinstance(arg, type) and issubclass(arg, marker)


def _resolved(arg: Any) -> Any:
    if arg is Any or isinstance(arg, (TypeVar, ForwardRef, str)):
        return None
    return arg


def request_kind(request_type: type) -> HandlerKind | None:
    """Kind of a request class, ``None`` when it is neither command nor query."""
    if not isinstance(request_type, type):
        return None
    if issubclass(request_type, Command):
        return HandlerKind.COMMAND
    if issubclass(request_type, Query):
        return HandlerKind.QUERY
    return None


def handler_kind(handler_type: type) -> HandlerKind | None:
    if not isinstance(handler_type, type):
        return None
    if issubclass(handler_type, CommandHandler):
        return HandlerKind.COMMAND
    if issubclass(handler_type, QueryHandler):
        return HandlerKind.QUERY
    return None


def serves_kind(handler_type: type, kind: HandlerKind) -> bool:
    """``True`` when *handler_type* derives from the handler base for *kind*.

    A class may derive from both bases and serve commands and queries alike.
    """
    base = CommandHandler if kind is HandlerKind.COMMAND else QueryHandler
    return isinstance(handler_type, type) and issubclass(handler_type, base)


def query_response_type(query_type: type) -> Any:
    """Return the ``R`` of ``Query[R]`` declared by *query_type* or an ancestor.

    ``None`` when the query never fixes ``R``.
    """
    for klass in query_type.__mro__:
        for base in _own_generic_bases(klass):
            if get_origin(base) is Query:
                response = _resolved(get_args(base)[0])
                if response is not None:
                    return response
    return None


def served_requests(handler_type: type) -> list[ServedRequest]:
    """List every concrete request type *handler_type* serves.

    Parameterisations with a type variable or a forward reference are
    skipped; a handler generic over its request cannot be keyed.
    """
    found: dict[type, ServedRequest] = {}
    for klass in handler_type.__mro__:
        for base in _own_generic_bases(klass):
            origin = get_origin(base)
            args = get_args(base)
            if origin is CommandHandler and _is_request_class(args[0], Command):
                found.setdefault(args[0], ServedRequest(HandlerKind.COMMAND, args[0]))
            elif origin is QueryHandler and _is_request_class(args[0], Query):
                found.setdefault(
                    args[0],
                    ServedRequest(HandlerKind.QUERY, args[0], _resolved(args[1])),
                )
    return list(found.values())


def is_handler_class(candidate: Any) -> bool:
    """``True`` for a concrete handler class serving at least one request type."""
    return (
        isinstance(candidate, type)
        and handler_kind(candidate) is not None
        and not getattr(candidate, "__abstractmethods__", None)
        and bool(served_requests(candidate))
    )


__all__ = [
    "HandlerKind",
    "ServedRequest",
    "handler_kind",
    "is_handler_class",
    "query_response_type",
    "request_kind",
    "served_requests",
    "serves_kind",
]
