"""Application CQRS – composition-root wiring.

:func:`register_dispatch_facility` builds an empty :class:`HandlerRegistry`
configured from :class:`DispatchSettings` and, when given a provider map
(``type -> zero-argument factory``, the shape most small DI registries
use), publishes the registry and a dispatcher factory into it::

    services: dict[type, Callable[[], Any]] = {}
    facility = register_dispatch_facility(services=services)
    facility.scan("myapp.handlers")

    dispatcher = services[Dispatcher]()
"""
from __future__ import annotations

import dataclasses
from collections.abc import Callable, MutableMapping
from types import ModuleType
from typing import Any

from selfcqrs.application.cqrs.dispatcher import Dispatcher
from selfcqrs.application.cqrs.registry import HandlerRegistry
from selfcqrs.application.cqrs.scanner import scan_and_register_handlers
from selfcqrs.config.settings import DispatchSettings, EnvSettingsLoader, SettingsLoader


@dataclasses.dataclass
class DispatchFacility:
    """The registry plus the policy that governs it, owned by the composition root."""

    registry: HandlerRegistry
    settings: DispatchSettings

    def scan(
        self,
        module: ModuleType | str | None = None,
        *,
        recursive: bool = True,
        stacklevel: int = 1,
    ) -> list[type]:
        """Scan *module* (default: the caller's module) into the registry."""
        return scan_and_register_handlers(
            self.registry, module, recursive=recursive, stacklevel=stacklevel + 1
        )

    def register(self, request_type: type, handler: Any) -> None:
        self.registry.register(request_type, handler)

    def dispatcher(self) -> Dispatcher:
        """Return a dispatcher for one call scope.

        With ``freeze_on_dispatch`` the registry is frozen on the first call,
        closing the population phase.
        """
        if self.settings.freeze_on_dispatch:
            self.registry.freeze()
        return Dispatcher(self.registry)


def register_dispatch_facility(
    settings: DispatchSettings | None = None,
    *,
    services: MutableMapping[type, Callable[[], Any]] | None = None,
    loader: SettingsLoader | None = None,
) -> DispatchFacility:
    """Create the facility with an empty registry.

    *settings* default to whatever *loader* (environment by default) yields.
    """
    if settings is None:
        settings = (loader or EnvSettingsLoader()).load(DispatchSettings)
    facility = DispatchFacility(
        registry=HandlerRegistry(allow_overwrite=settings.allow_overwrite),
        settings=settings,
    )
    if services is not None:
        services[HandlerRegistry] = lambda: facility.registry
        services[DispatchFacility] = lambda: facility
        services[Dispatcher] = facility.dispatcher
    return facility


__all__ = ["DispatchFacility", "register_dispatch_facility"]
