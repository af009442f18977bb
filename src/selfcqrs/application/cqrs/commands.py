"""Application CQRS – Command and CommandHandler."""
from __future__ import annotations

import abc
from typing import Any, Generic, TypeVar

from selfcqrs.kernel.cancellation import CancellationToken

C = TypeVar("C", bound="Command")


class Command:
    """Marker base for commands (intent to change state, no result)."""


class CommandHandler(abc.ABC, Generic[C]):
    """Handle a single command type.

    The served command type is read from the generic parameter::

        class CreateUserHandler(CommandHandler[CreateUser]):
            async def handle(self, command, cancellation=None) -> None:
                ...
    """

    @abc.abstractmethod
    async def handle(self, command: C, cancellation: CancellationToken | None = None) -> Any: ...


__all__ = ["Command", "CommandHandler"]
