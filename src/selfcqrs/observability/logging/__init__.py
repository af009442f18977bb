"""Observability – structured logging helpers."""
from selfcqrs.observability.logging.factory import JsonLoggerFactory, configure_logging
from selfcqrs.observability.logging.processors import TypeNameProcessor, get_logger

__all__ = ["JsonLoggerFactory", "TypeNameProcessor", "configure_logging", "get_logger"]
