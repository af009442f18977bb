"""Example: create a user with a command, read it back with a query.

Run with::

    pip install -e .
    python docs/examples/users_demo.py

Handlers are discovered by scanning this module, the dispatcher is taken
from the composition root, and the two requests are sent through it.
"""

from __future__ import annotations

import asyncio
import dataclasses

from selfcqrs.application.cqrs import (
    Command,
    CommandHandler,
    Query,
    QueryHandler,
    register_dispatch_facility,
)
from selfcqrs.config.settings import DispatchSettings
from selfcqrs.kernel.cancellation import CancellationToken
from selfcqrs.kernel.errors import NotFoundError, ValidationError
from selfcqrs.observability.logging import configure_logging, get_logger

log = get_logger("users_demo")


@dataclasses.dataclass
class User:
    id: int
    name: str
    email: str


_USERS: dict[int, User] = {}


@dataclasses.dataclass
class CreateUserCommand(Command):
    name: str
    email: str


@dataclasses.dataclass
class GetUserQuery(Query[User]):
    user_id: int


class CreateUserCommandHandler(CommandHandler[CreateUserCommand]):
    async def handle(
        self, command: CreateUserCommand, cancellation: CancellationToken | None = None
    ) -> None:
        if "@" not in command.email:
            raise ValidationError("email is invalid", errors=[{"field": "email"}])
        user = User(id=len(_USERS) + 1, name=command.name, email=command.email)
        _USERS[user.id] = user
        log.info("user.created", user_id=user.id, name=user.name)


class GetUserQueryHandler(QueryHandler[GetUserQuery, User]):
    async def handle(
        self, query: GetUserQuery, cancellation: CancellationToken | None = None
    ) -> User:
        if cancellation is not None:
            cancellation.raise_if_cancelled()
        try:
            return _USERS[query.user_id]
        except KeyError:
            raise NotFoundError("User", query.user_id) from None


async def main() -> None:
    settings = DispatchSettings(log_json=False)
    configure_logging(settings)

    facility = register_dispatch_facility(settings)
    facility.scan()
    dispatcher = facility.dispatcher()

    await dispatcher.send(CreateUserCommand(name="John Doe", email="john@example.com"))
    user = await dispatcher.send_query(GetUserQuery(user_id=1), response_type=User)
    log.info("user.retrieved", name=user.name, email=user.email)


if __name__ == "__main__":
    asyncio.run(main())
