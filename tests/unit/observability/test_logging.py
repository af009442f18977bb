"""Unit tests for structured logging helpers."""

from __future__ import annotations

import importlib
import logging

import pytest
import structlog

from selfcqrs.config.settings import DispatchSettings
from selfcqrs.observability.logging import (
    JsonLoggerFactory,
    TypeNameProcessor,
    configure_logging,
    get_logger,
)


class _Request:
    pass


@pytest.fixture
def _restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestTypeNameProcessor:
    def test_renders_types_as_qualified_names(self) -> None:
        event = TypeNameProcessor()(None, "info", {"request_type": _Request, "n": 1})
        assert event["request_type"].endswith("test_logging._Request")
        assert event["n"] == 1

    def test_leaves_instances_alone(self) -> None:
        instance = _Request()
        event = TypeNameProcessor()(None, "info", {"request": instance})
        assert event["request"] is instance


class TestGetLogger:
    def test_returns_structlog_logger(self) -> None:
        log = get_logger(__name__)
        assert hasattr(log, "info")
        assert hasattr(log, "bind")

    def test_initial_values_bound(self) -> None:
        from structlog.testing import capture_logs

        with capture_logs() as logs:
            get_logger(__name__, component="registry").info("hello")
        assert logs == [{"component": "registry", "event": "hello", "log_level": "info"}]


@pytest.mark.usefixtures("_restore_logging")
class TestJsonLoggerFactory:
    def test_configure_installs_single_root_handler(self) -> None:
        JsonLoggerFactory.configure(level=logging.DEBUG)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        assert root.level == logging.DEBUG

    def test_console_rendering(self) -> None:
        JsonLoggerFactory.configure(json=False)
        assert structlog.is_configured()

    def test_configure_logging_uses_settings(self) -> None:
        configure_logging(DispatchSettings(log_level="error", log_json=False))
        assert logging.getLogger().level == logging.ERROR

    def test_configure_logging_defaults(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO


class TestPublicReExports:
    def test_all_symbols_importable(self) -> None:
        mod = importlib.import_module("selfcqrs.observability.logging")
        for name in mod.__all__:
            assert hasattr(mod, name)
