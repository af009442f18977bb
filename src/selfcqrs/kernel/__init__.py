"""Kernel – framework-agnostic building blocks (errors, cancellation)."""

from selfcqrs.kernel.cancellation import CancellationToken, OperationCancelledError
from selfcqrs.kernel.errors import (
    ApplicationError,
    BaseError,
    DispatchError,
    DomainError,
    DuplicateHandlerError,
    HandlerNotFoundError,
    HandlerRegistrationError,
    InvalidRequestError,
    NotFoundError,
    RegistryFrozenError,
    ResponseTypeMismatchError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CancellationToken",
    "DispatchError",
    "DomainError",
    "DuplicateHandlerError",
    "HandlerNotFoundError",
    "HandlerRegistrationError",
    "InvalidRequestError",
    "NotFoundError",
    "OperationCancelledError",
    "RegistryFrozenError",
    "ResponseTypeMismatchError",
    "ValidationError",
]
