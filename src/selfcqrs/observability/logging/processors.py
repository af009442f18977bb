"""Observability – get_logger helper and the request-type processor."""
from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


class TypeNameProcessor:
    """structlog processor rendering ``type`` objects as qualified names.

    Registry and dispatcher log the request and handler classes themselves;
    this keeps the JSON output readable instead of ``<class '...'>``.
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, type):
                event_dict[key] = f"{value.__module__}.{value.__qualname__}"
        return event_dict


__all__ = ["TypeNameProcessor", "get_logger"]
