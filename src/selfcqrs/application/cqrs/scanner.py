"""Application CQRS – discover handler classes in a module or package.

Python counterpart of scanning an assembly: every concrete class *defined*
in the given module (and, for a package, its sub-modules) that parameterises
``CommandHandler`` or ``QueryHandler`` is bound once per request type it
serves. Names a module merely imports are skipped so a handler is counted
where it is declared.
"""
from __future__ import annotations

import importlib
import inspect
import pkgutil
import sys
from collections.abc import Iterator
from types import ModuleType

from selfcqrs.application.cqrs.introspection import is_handler_class, served_requests
from selfcqrs.application.cqrs.registry import HandlerRegistry
from selfcqrs.kernel.errors import HandlerRegistrationError
from selfcqrs.observability.logging import get_logger

_log = get_logger(__name__)


def _load(module: ModuleType | str) -> ModuleType:
    if isinstance(module, ModuleType):
        return module
    return importlib.import_module(module)


def _calling_module(stacklevel: int) -> ModuleType:
    # +1 skips this helper's own frame.
    frame = sys._getframe(stacklevel + 1)
    name = frame.f_globals.get("__name__")
    module = sys.modules.get(name) if name is not None else None
    if module is None:
        raise HandlerRegistrationError(
            f"Calling module {name!r} is not importable; pass the module to scan explicitly"
        )
    return module


def iter_modules(module: ModuleType | str, *, recursive: bool = True) -> Iterator[ModuleType]:
    """Yield *module* and, if it is a package and *recursive*, every sub-module."""
    root = _load(module)
    yield root
    if recursive and hasattr(root, "__path__"):
        for info in pkgutil.walk_packages(root.__path__, prefix=f"{root.__name__}."):
            yield importlib.import_module(info.name)


def handler_types(module: ModuleType | str, *, recursive: bool = True) -> list[type]:
    """Concrete handler classes declared in *module*, in a stable order."""
    found: dict[type, None] = {}
    for mod in iter_modules(module, recursive=recursive):
        for _, candidate in inspect.getmembers(mod, inspect.isclass):
            if candidate.__module__ == mod.__name__ and is_handler_class(candidate):
                found[candidate] = None
    return sorted(found, key=lambda cls: (cls.__module__, cls.__qualname__))


def scan_and_register_handlers(
    registry: HandlerRegistry,
    module: ModuleType | str | None = None,
    *,
    recursive: bool = True,
    stacklevel: int = 1,
) -> list[type]:
    """Bind every handler found in *module* and return the bound request types.

    With *module* omitted, the module calling this function is scanned;
    wrappers raise *stacklevel* to point past themselves.
    """
    target = _load(module) if module is not None else _calling_module(stacklevel)
    bound: list[type] = []
    handlers = handler_types(target, recursive=recursive)
    for handler_cls in handlers:
        for served in served_requests(handler_cls):
            registry.register(served.request_type, handler_cls)
            bound.append(served.request_type)
    _log.info(
        "scan.completed",
        module=target.__name__,
        handlers=len(handlers),
        request_types=len(bound),
    )
    return bound


__all__ = ["handler_types", "iter_modules", "scan_and_register_handlers"]
