"""Tests for funcspec.core.logging configuration helpers."""

from __future__ import annotations

import structlog
from structlog.contextvars import get_contextvars

from funcspec.core.logging import (
    LogContext,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    is_configured,
    unbind_context,
)


class TestConfigureLogging:
    def test_marks_configured(self):
        assert is_configured() is False
        configure_logging(level="DEBUG")
        assert is_configured() is True

    def test_json_renderer(self):
        configure_logging(json_format=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_from_settings(self):
        configure_logging()
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_format_from_env(self, monkeypatch):
        monkeypatch.setenv("FUNCSPEC_LOG_FORMAT", "json")
        configure_logging()
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_second_call_is_noop(self):
        configure_logging(json_format=True)
        configure_logging(json_format=False)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_force_reconfigures(self):
        configure_logging(json_format=True)
        configure_logging(json_format=False, force=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


class TestContext:
    def test_bind_and_unbind(self):
        bind_context(caller="billing", attempt=2)
        assert get_contextvars() == {"caller": "billing", "attempt": 2}
        unbind_context("attempt")
        assert get_contextvars() == {"caller": "billing"}

    def test_clear(self):
        bind_context(caller="billing")
        clear_context()
        assert get_contextvars() == {}

    def test_scoped_context(self):
        with LogContext(request_id="abc"):
            assert get_contextvars()["request_id"] == "abc"
        assert "request_id" not in get_contextvars()


def test_get_logger_returns_structlog_logger():
    logger = get_logger("funcspec.test")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "bind")
