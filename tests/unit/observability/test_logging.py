"""Unit tests for observability logging."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from pagequery.observability.logging import JsonLoggerFactory, Logger, get_logger


@pytest.fixture
def reset_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestGetLogger:
    def test_returns_structlog_logger(self) -> None:
        with capture_logs() as logs:
            get_logger("pagequery.test").info("hello", answer=42)
        assert logs == [{"event": "hello", "answer": 42, "log_level": "info"}]

    def test_initial_values_are_bound(self) -> None:
        with capture_logs() as logs:
            get_logger("pagequery.test", endpoint="posts").warning("slow")
        assert logs[0]["endpoint"] == "posts"

    def test_satisfies_logger_protocol(self) -> None:
        logger: Logger = get_logger(__name__)
        for method in ("debug", "info", "warning", "error"):
            assert callable(getattr(logger, method))


class TestJsonLoggerFactory:
    def test_renders_json_lines(self, reset_logging: None) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(logging.DEBUG, stream=stream)
        get_logger("pagequery.json").info("query.listed", records=3, pages=2)

        line = stream.getvalue().strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "query.listed"
        assert payload["records"] == 3
        assert payload["level"] == "info"
        assert payload["logger"] == "pagequery.json"
        assert "timestamp" in payload

    def test_respects_level(self, reset_logging: None) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(logging.WARNING, stream=stream)
        get_logger("pagequery.json").info("ignored")
        assert stream.getvalue() == ""
