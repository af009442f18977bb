"""Observability – structlog configuration for the dispatch facility."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from selfcqrs.config.settings import DispatchSettings
from selfcqrs.observability.logging.processors import TypeNameProcessor


class JsonLoggerFactory:
    """Configure structlog on top of stdlib :mod:`logging`."""

    @staticmethod
    def configure(level: int = logging.INFO, json: bool = True) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            TypeNameProcessor(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


def configure_logging(settings: DispatchSettings | None = None) -> None:
    """Configure logging from :class:`DispatchSettings` (defaults when omitted)."""
    settings = settings or DispatchSettings()
    JsonLoggerFactory.configure(level=settings.log_level_number, json=settings.log_json)


__all__ = ["JsonLoggerFactory", "configure_logging"]
