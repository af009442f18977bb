"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                  (domain.py)
    │   ├── ValidationError
    │   └── NotFoundError
    ├── ApplicationError             (application.py)
    └── DispatchError                (dispatch.py)
        ├── InvalidRequestError
        ├── HandlerNotFoundError
        └── HandlerRegistrationError
            ├── DuplicateHandlerError
            ├── ResponseTypeMismatchError
            └── RegistryFrozenError
"""

from selfcqrs.kernel.errors.application import ApplicationError
from selfcqrs.kernel.errors.base import BaseError, type_name
from selfcqrs.kernel.errors.dispatch import (
    DispatchError,
    DuplicateHandlerError,
    HandlerNotFoundError,
    HandlerRegistrationError,
    InvalidRequestError,
    RegistryFrozenError,
    ResponseTypeMismatchError,
)
from selfcqrs.kernel.errors.domain import DomainError, NotFoundError, ValidationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DispatchError",
    "DomainError",
    "DuplicateHandlerError",
    "HandlerNotFoundError",
    "HandlerRegistrationError",
    "InvalidRequestError",
    "NotFoundError",
    "RegistryFrozenError",
    "ResponseTypeMismatchError",
    "ValidationError",
    "type_name",
]
