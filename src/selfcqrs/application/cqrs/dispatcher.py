"""Application CQRS – Dispatcher: route a request to its single handler.

Each call is stateless: look up the binding for the request's *concrete*
type, build or fetch the handler, invoke it once, hand back its result.
Handler exceptions propagate untouched; the dispatcher neither wraps nor
retries them, and it forwards the cancellation token without reading it.

Usage::

    dispatcher = Dispatcher(registry)
    await dispatcher.send(CreateUser(name="John Doe", email="john@example.com"))
    user = await dispatcher.send(GetUser(user_id=1))
"""
from __future__ import annotations

import inspect
from typing import Any, TypeVar

from selfcqrs.application.cqrs.commands import Command
from selfcqrs.application.cqrs.queries import Query
from selfcqrs.application.cqrs.registry import HandlerBinding, HandlerRegistry
from selfcqrs.kernel.cancellation import CancellationToken
from selfcqrs.kernel.errors import HandlerNotFoundError, InvalidRequestError, type_name
from selfcqrs.observability.logging import get_logger

R = TypeVar("R")

_log = get_logger(__name__)


class Dispatcher:
    """Runtime entry point of the dispatch facility.

    Holds only a reference to the registry; cheap to create per call scope
    and safe to share between concurrent calls.
    """

    def __init__(self, registry: HandlerRegistry) -> None:
        if registry is None:
            raise TypeError("Dispatcher requires a HandlerRegistry")
        self._registry = registry

    @property
    def registry(self) -> HandlerRegistry:
        return self._registry

    async def send(
        self,
        request: Command | Query[Any],
        cancellation: CancellationToken | None = None,
    ) -> Any:
        """Dispatch a command (returns ``None``) or a query (returns its response)."""
        if isinstance(request, Command):
            return await self.send_command(request, cancellation)
        if isinstance(request, Query):
            return await self.send_query(request, cancellation)
        raise InvalidRequestError(_describe_invalid(request, "a Command or a Query"), request=request)

    async def send_command(
        self,
        command: Command,
        cancellation: CancellationToken | None = None,
    ) -> None:
        """Run the handler bound to ``type(command)``."""
        if not isinstance(command, Command):
            raise InvalidRequestError(_describe_invalid(command, "a Command"), request=command)
        binding = self._binding_for(command)
        await self._invoke(binding, command, cancellation)

    async def send_query(
        self,
        query: Query[R],
        cancellation: CancellationToken | None = None,
        *,
        response_type: type[R] | None = None,
    ) -> R:
        """Run the handler bound to ``type(query)`` and return its response.

        *response_type* is the response the caller expects. If the binding
        declares a different one the call fails with
        :class:`HandlerNotFoundError`, as no handler for that pairing exists.
        """
        if not isinstance(query, Query):
            raise InvalidRequestError(_describe_invalid(query, "a Query"), request=query)
        binding = self._binding_for(query)
        if (
            response_type is not None
            and binding.response_type is not None
            and response_type != binding.response_type
        ):
            _log.warning(
                "dispatch.handler_not_found",
                request_type=binding.request_type,
                expected_response=type_name(response_type),
                bound_response=type_name(binding.response_type),
            )
            raise HandlerNotFoundError(
                binding.request_type,
                reason=(
                    f"bound handler returns {type_name(binding.response_type)!r}, "
                    f"caller expects {type_name(response_type)!r}"
                ),
            )
        return await self._invoke(binding, query, cancellation)

    def _binding_for(self, request: Any) -> HandlerBinding:
        request_type = type(request)
        try:
            return self._registry.binding(request_type)
        except HandlerNotFoundError:
            _log.warning("dispatch.handler_not_found", request_type=request_type)
            raise

    async def _invoke(
        self,
        binding: HandlerBinding,
        request: Any,
        cancellation: CancellationToken | None,
    ) -> Any:
        handler = binding.create()
        _log.debug(
            "dispatch.resolved",
            request_type=binding.request_type,
            handler=binding.handler_type,
            kind=binding.kind.value,
        )
        result = handler.handle(request, cancellation)
        if inspect.isawaitable(result):
            result = await result
        return result


def _describe_invalid(request: Any, expected: str) -> str:
    if request is None:
        return f"Request must not be None; expected {expected}"
    return f"{type_name(type(request))!r} is not {expected}"


__all__ = ["Dispatcher"]
