"""Application CQRS – HandlerRegistry: request type → single handler binding.

The registry is populated once, at startup, then frozen. Reads after that
point never take a lock; only :meth:`HandlerRegistry.register` mutates.

Duplicate policy
----------------
By default a second, *different* handler for an already bound request type
raises :class:`~selfcqrs.kernel.errors.DuplicateHandlerError`. Constructing
the registry with ``allow_overwrite=True`` switches to last-registration-wins.
Registering the very same handler object twice is a no-op under both
policies, so scanning a module twice is harmless.
"""
from __future__ import annotations

import dataclasses
import threading
import types
from collections.abc import Iterator, Mapping
from typing import Any

from selfcqrs.application.cqrs.introspection import (
    HandlerKind,
    ServedRequest,
    handler_kind,
    query_response_type,
    request_kind,
    served_requests,
    serves_kind,
)
from selfcqrs.kernel.errors import (
    DuplicateHandlerError,
    HandlerNotFoundError,
    HandlerRegistrationError,
    RegistryFrozenError,
    ResponseTypeMismatchError,
    type_name,
)
from selfcqrs.observability.logging import get_logger

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class HandlerBinding:
    """How to obtain the handler for one request type.

    ``target`` is what was registered: a handler class (a fresh instance is
    built on every :meth:`create`) or a handler instance (always returned).
    """

    request_type: type
    kind: HandlerKind
    handler_type: type
    target: Any
    response_type: Any = None

    def create(self) -> Any:
        if isinstance(self.target, type):
            return self.target()
        return self.target


class HandlerRegistry:
    """Startup-populated mapping from concrete request type to its handler."""

    def __init__(self, *, allow_overwrite: bool = False) -> None:
        self._bindings: Mapping[type, HandlerBinding] = {}
        self._allow_overwrite = allow_overwrite
        self._frozen = False
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    def register(self, request_type: type, handler: Any) -> HandlerBinding:
        """Bind *handler* (class or instance) to *request_type*.

        Raises
        ------
        RegistryFrozenError
            The registry was frozen.
        DuplicateHandlerError
            Another handler already serves *request_type* and overwriting
            is disallowed.
        ResponseTypeMismatchError
            Query and handler disagree on the response type.
        HandlerRegistrationError
            Any other invalid pairing.
        """
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(
                    f"Cannot bind {type_name(request_type)!r}: registry is frozen"
                )
            binding = self._make_binding(request_type, handler)
            existing = self._bindings.get(request_type)
            if existing is not None:
                if existing.target is binding.target:
                    return existing
                if not self._allow_overwrite:
                    raise DuplicateHandlerError(
                        request_type, existing.handler_type, binding.handler_type
                    )
                _log.warning(
                    "handler.overwritten",
                    request_type=request_type,
                    previous=existing.handler_type,
                    handler=binding.handler_type,
                )
            self._bindings[request_type] = binding  # type: ignore[index]
        _log.debug(
            "handler.registered",
            request_type=request_type,
            handler=binding.handler_type,
            kind=binding.kind.value,
        )
        return binding

    def freeze(self) -> None:
        """Stop accepting bindings; the table becomes a read-only view."""
        with self._lock:
            if self._frozen:
                return
            self._bindings = types.MappingProxyType(dict(self._bindings))
            self._frozen = True
        _log.info("registry.frozen", bindings=len(self._bindings))

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def binding(self, request_type: type) -> HandlerBinding:
        """Return the binding for exactly *request_type* (no base-class fallback)."""
        binding = self._bindings.get(request_type)
        if binding is None:
            raise HandlerNotFoundError(request_type)
        return binding

    def resolve(self, request_type: type) -> Any:
        """Return a handler ready to serve *request_type*."""
        return self.binding(request_type).create()

    def request_types(self) -> list[type]:
        return sorted(self._bindings, key=type_name)

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def allow_overwrite(self) -> bool:
        return self._allow_overwrite

    def __contains__(self, request_type: object) -> bool:
        return request_type in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    def __iter__(self) -> Iterator[HandlerBinding]:
        return iter([self._bindings[t] for t in self.request_types()])

    def __repr__(self) -> str:
        return f"HandlerRegistry(bindings={len(self)}, frozen={self._frozen})"

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _make_binding(self, request_type: type, handler: Any) -> HandlerBinding:
        kind = request_kind(request_type)
        if kind is None:
            raise HandlerRegistrationError(
                f"{type_name(request_type)!r} is neither a Command nor a Query"
            )
        handler_type = handler if isinstance(handler, type) else type(handler)
        if handler_kind(handler_type) is None:
            raise HandlerRegistrationError(
                f"{type_name(handler_type)!r} is neither a CommandHandler nor a QueryHandler"
            )

        served = served_requests(handler_type)
        match = _match(served, request_type)
        if match is not None:
            kind_ok = match.kind is kind
        else:
            # Handlers deriving from both bases answer to either kind.
            kind_ok = serves_kind(handler_type, kind)
        if not kind_ok:
            raise HandlerRegistrationError(
                f"{type_name(handler_type)!r} cannot serve {kind.value} "
                f"{type_name(request_type)!r}"
            )
        if served and match is None:
            declared = ", ".join(type_name(s.request_type) for s in served)
            raise HandlerRegistrationError(
                f"{type_name(handler_type)!r} serves {declared}, "
                f"not {type_name(request_type)!r}"
            )

        response_type = None
        if kind is HandlerKind.QUERY:
            declared_response = query_response_type(request_type)
            handled_response = match.response_type if match is not None else None
            if (
                declared_response is not None
                and handled_response is not None
                and declared_response != handled_response
            ):
                raise ResponseTypeMismatchError(request_type, declared_response, handled_response)
            response_type = declared_response if declared_response is not None else handled_response

        return HandlerBinding(
            request_type=request_type,
            kind=kind,
            handler_type=handler_type,
            target=handler,
            response_type=response_type,
        )


def _match(served: list[ServedRequest], request_type: type) -> ServedRequest | None:
    for entry in served:
        if entry.request_type is request_type:
            return entry
    for entry in served:
        if issubclass(request_type, entry.request_type):
            return entry
    return None


__all__ = ["HandlerBinding", "HandlerKind", "HandlerRegistry"]
