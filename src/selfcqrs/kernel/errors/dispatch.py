"""Dispatch errors – raised by the registry and the dispatcher themselves.

Failures raised *by a handler* are not part of this hierarchy: the
dispatcher lets them propagate exactly as the handler raised them.
"""

from __future__ import annotations

from typing import Any

from selfcqrs.kernel.errors.base import BaseError, type_name


class DispatchError(BaseError):
    """Root of every error the dispatch machinery raises on its own."""

    default_code = "dispatch_error"


class InvalidRequestError(DispatchError):
    """The request is missing or is neither a command nor a query."""

    default_code = "invalid_request"

    def __init__(self, message: str, *, request: Any = None, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"request_type": type_name(type(request))})
        super().__init__(message, **kwargs)
        self.request = request


class HandlerNotFoundError(DispatchError):
    """No handler is bound to the request's concrete type."""

    default_code = "handler_not_found"

    def __init__(
        self,
        request_type: type,
        *,
        reason: str | None = None,
        **kwargs: Any,
    ) -> None:
        msg = f"No handler registered for {type_name(request_type)!r}"
        if reason:
            msg = f"{msg}: {reason}"
        kwargs.setdefault("detail", {"request_type": type_name(request_type)})
        super().__init__(msg, **kwargs)
        self.request_type = request_type


class HandlerRegistrationError(DispatchError):
    """A handler binding is invalid; composition should abort."""

    default_code = "handler_registration_error"


class DuplicateHandlerError(HandlerRegistrationError):
    """Two different handlers claim the same request type."""

    default_code = "duplicate_handler"

    def __init__(
        self,
        request_type: type,
        existing: type,
        duplicate: type,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"{type_name(request_type)!r} is already handled by "
            f"{type_name(existing)!r}; refusing to bind {type_name(duplicate)!r}",
            detail={
                "request_type": type_name(request_type),
                "existing_handler": type_name(existing),
                "duplicate_handler": type_name(duplicate),
            },
            **kwargs,
        )
        self.request_type = request_type
        self.existing = existing
        self.duplicate = duplicate


class ResponseTypeMismatchError(HandlerRegistrationError):
    """A query handler declares a response type its query does not."""

    default_code = "response_type_mismatch"

    def __init__(
        self,
        query_type: type,
        declared: Any,
        handled: Any,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"{type_name(query_type)!r} declares response {type_name(declared)!r} "
            f"but its handler returns {type_name(handled)!r}",
            detail={
                "query_type": type_name(query_type),
                "declared_response": type_name(declared),
                "handler_response": type_name(handled),
            },
            **kwargs,
        )
        self.query_type = query_type
        self.declared = declared
        self.handled = handled


class RegistryFrozenError(HandlerRegistrationError):
    """The registry was frozen after startup and no longer accepts bindings."""

    default_code = "registry_frozen"


__all__ = [
    "DispatchError",
    "DuplicateHandlerError",
    "HandlerNotFoundError",
    "HandlerRegistrationError",
    "InvalidRequestError",
    "RegistryFrozenError",
    "ResponseTypeMismatchError",
]
