"""Unit tests for the request / handler model and generic introspection."""

from __future__ import annotations

import dataclasses
from typing import Any, Generic, TypeVar

import pytest

from selfcqrs.application.cqrs import (
    Command,
    CommandHandler,
    HandlerKind,
    Query,
    QueryHandler,
    ServedRequest,
    served_requests,
)
from selfcqrs.application.cqrs.introspection import (
    handler_kind,
    is_handler_class,
    query_response_type,
    request_kind,
)


# ---------------------------------------------------------------------------
# Requests / handlers used across tests
# ---------------------------------------------------------------------------


@dataclasses.dataclass
class User:
    id: int
    name: str


@dataclasses.dataclass
class CreateUser(Command):
    name: str


@dataclasses.dataclass
class GetUser(Query[User]):
    user_id: int


class GetAdmin(GetUser):
    """Inherits ``Query[User]`` through ``GetUser``."""


class ListUsers(Query[list[User]]):
    pass


class Untyped(Query):
    pass


class CreateUserHandler(CommandHandler[CreateUser]):
    async def handle(self, command: CreateUser, cancellation: Any = None) -> None:
        return None


class GetUserHandler(QueryHandler[GetUser, User]):
    async def handle(self, query: GetUser, cancellation: Any = None) -> User:
        return User(query.user_id, "x")


T = TypeVar("T", bound=Command)


class GenericCommandHandler(CommandHandler[T], Generic[T]):
    async def handle(self, command: T, cancellation: Any = None) -> None:
        return None


class AbstractUserHandler(CommandHandler[CreateUser]):
    pass


# ---------------------------------------------------------------------------
# Request model
# ---------------------------------------------------------------------------


class TestRequestKind:
    def test_command(self) -> None:
        assert request_kind(CreateUser) is HandlerKind.COMMAND

    def test_query(self) -> None:
        assert request_kind(GetUser) is HandlerKind.QUERY

    def test_neither(self) -> None:
        assert request_kind(User) is None

    def test_non_type(self) -> None:
        assert request_kind(CreateUser("x")) is None  # type: ignore[arg-type]


class TestQueryResponseType:
    def test_declared_on_class(self) -> None:
        assert query_response_type(GetUser) is User

    def test_inherited_from_base_query(self) -> None:
        assert query_response_type(GetAdmin) is User

    def test_generic_alias_response(self) -> None:
        assert query_response_type(ListUsers) == list[User]

    def test_unparameterised_query_is_unknown(self) -> None:
        assert query_response_type(Untyped) is None


# ---------------------------------------------------------------------------
# Handler model
# ---------------------------------------------------------------------------


class TestHandlerKind:
    def test_command_handler(self) -> None:
        assert handler_kind(CreateUserHandler) is HandlerKind.COMMAND

    def test_query_handler(self) -> None:
        assert handler_kind(GetUserHandler) is HandlerKind.QUERY

    def test_plain_class(self) -> None:
        assert handler_kind(User) is None


class TestServedRequests:
    def test_command_handler_serves_its_command(self) -> None:
        assert served_requests(CreateUserHandler) == [
            ServedRequest(HandlerKind.COMMAND, CreateUser)
        ]

    def test_query_handler_carries_response(self) -> None:
        assert served_requests(GetUserHandler) == [
            ServedRequest(HandlerKind.QUERY, GetUser, User)
        ]

    def test_typevar_parameter_is_skipped(self) -> None:
        assert served_requests(GenericCommandHandler) == []

    def test_subclass_of_handler_inherits_request(self) -> None:
        class Audited(CreateUserHandler):
            pass

        assert [s.request_type for s in served_requests(Audited)] == [CreateUser]

    def test_multiple_request_types_through_inheritance(self) -> None:
        @dataclasses.dataclass
        class RenameUser(Command):
            name: str

        class _Create(CommandHandler[CreateUser]):
            pass

        class _Rename(CommandHandler[RenameUser]):
            pass

        class Both(_Create, _Rename):
            async def handle(self, command: Any, cancellation: Any = None) -> None:
                return None

        served = {s.request_type for s in served_requests(Both)}
        assert served == {CreateUser, RenameUser}


class TestIsHandlerClass:
    def test_concrete_handler(self) -> None:
        assert is_handler_class(CreateUserHandler)

    def test_abstract_handler_rejected(self) -> None:
        assert not is_handler_class(AbstractUserHandler)

    def test_generic_handler_rejected(self) -> None:
        assert not is_handler_class(GenericCommandHandler)

    def test_non_handler_rejected(self) -> None:
        assert not is_handler_class(User)

    def test_instance_rejected(self) -> None:
        assert not is_handler_class(CreateUserHandler())


class TestHandlerContract:
    def test_cannot_instantiate_without_handle(self) -> None:
        with pytest.raises(TypeError):
            AbstractUserHandler()  # type: ignore[abstract]

    def test_handler_kind_is_string_enum(self) -> None:
        assert HandlerKind.COMMAND == "command"
        assert HandlerKind.QUERY.value == "query"
