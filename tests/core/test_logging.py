"""Tests for farcaster_dev_mcp.core.logging module."""

from __future__ import annotations

import json
import logging
import sys
from unittest.mock import MagicMock

import pytest

from farcaster_dev_mcp.core.logging import (
    JSONFormatter,
    StandardFormatter,
    ToolCallLogger,
    configure_logging,
    correlation_context,
    get_correlation_id,
)


def _record(msg: str = "hello", level: int = logging.INFO, **extra) -> logging.LogRecord:
    record = logging.LogRecord("farcaster_dev_mcp.test", level, __file__, 10, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


# ============================================================================
# Correlation ID Tests
# ============================================================================


class TestCorrelationId:
    """Tests for correlation ID functionality."""

    def test_default_none(self):
        assert get_correlation_id() is None

    def test_context_generates_id(self):
        """Context manager should generate ID if not provided."""
        with correlation_context() as cid:
            assert len(cid) == 36
            assert get_correlation_id() == cid

        assert get_correlation_id() is None

    def test_context_uses_provided_id(self):
        with correlation_context("my-custom-id") as cid:
            assert cid == "my-custom-id"
            assert get_correlation_id() == "my-custom-id"

    def test_nested_contexts_restore(self):
        with correlation_context("outer"):
            with correlation_context("inner"):
                assert get_correlation_id() == "inner"
            assert get_correlation_id() == "outer"


# ============================================================================
# Formatter Tests
# ============================================================================


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(_record("hello")))
        assert data["message"] == "hello"
        assert data["level"] == "INFO"
        assert data["logger"] == "farcaster_dev_mcp.test"
        assert "timestamp" in data
        assert "source" not in data

    def test_warning_includes_source(self):
        data = json.loads(JSONFormatter().format(_record("careful", logging.WARNING)))
        assert data["source"]["line"] == 10

    def test_includes_correlation_id(self):
        with correlation_context("abc-123"):
            data = json.loads(JSONFormatter().format(_record()))
        assert data["correlation_id"] == "abc-123"

    def test_includes_extra_data(self):
        data = json.loads(JSONFormatter().format(_record(extra_data={"tool": "x"})))
        assert data["extra"] == {"tool": "x"}


class TestStandardFormatter:
    """Tests for StandardFormatter."""

    def test_plain_output_without_tty(self):
        formatter = StandardFormatter(use_colors=False)
        output = formatter.format(_record("plain"))
        assert "INFO" in output
        assert "plain" in output
        assert "\033[" not in output

    def test_prefixes_correlation_id(self):
        formatter = StandardFormatter(use_colors=False)
        with correlation_context("12345678-aaaa"):
            output = formatter.format(_record("traced"))
        assert "[12345678] traced" in output


# ============================================================================
# configure_logging Tests
# ============================================================================


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.fixture(autouse=True)
    def _restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_logs_to_stderr_only(self, clean_env):
        configure_logging(level="DEBUG", json_format=True)
        root = logging.getLogger()

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr
        assert isinstance(root.handlers[0].formatter, JSONFormatter)

    def test_text_format(self, clean_env):
        configure_logging(level="INFO", json_format=False)
        assert isinstance(logging.getLogger().handlers[0].formatter, StandardFormatter)

    def test_reads_level_from_settings(self, clean_env, monkeypatch):
        monkeypatch.setenv("FARCASTER_MCP_LOG_LEVEL", "ERROR")
        configure_logging(json_format=True)
        assert logging.getLogger().level == logging.ERROR

    def test_file_handler(self, clean_env, tmp_path):
        log_file = tmp_path / "server.log"
        configure_logging(level="INFO", json_format=False, log_file=str(log_file))
        handlers = logging.getLogger().handlers
        assert len(handlers) == 2
        assert isinstance(handlers[1], logging.FileHandler)
        assert isinstance(handlers[1].formatter, JSONFormatter)
        handlers[1].close()

    def test_quiets_sdk_logger(self, clean_env):
        configure_logging(level="DEBUG", json_format=True)
        assert logging.getLogger("mcp").level == logging.WARNING


# ============================================================================
# ToolCallLogger Tests
# ============================================================================


class TestToolCallLogger:
    """Tests for ToolCallLogger."""

    def test_log_call_sanitizes_sensitive_keys(self):
        mock_logger = MagicMock()
        ToolCallLogger(mock_logger).log_call("farcaster_validate_user", {"fid": 3, "signature": "0xdead"})

        extra = mock_logger.log.call_args.kwargs["extra"]["extra_data"]
        assert extra["tool"] == "farcaster_validate_user"
        assert extra["arguments"] == {"fid": 3, "signature": "[REDACTED]"}

    def test_log_call_without_arguments(self):
        mock_logger = MagicMock()
        ToolCallLogger(mock_logger, include_arguments=False).log_call("t", {"fid": 3})

        extra = mock_logger.log.call_args.kwargs["extra"]["extra_data"]
        assert "arguments" not in extra

    def test_truncates_long_strings(self):
        tool_logger = ToolCallLogger(MagicMock())
        sanitized = tool_logger._sanitize({"abi": "x" * 600, "nested": [{"private_key": "k"}]})

        assert len(sanitized["abi"]) == ToolCallLogger.MAX_STRING_LENGTH + 3
        assert sanitized["nested"] == [{"private_key": "[REDACTED]"}]

    def test_track_success(self):
        mock_logger = MagicMock()
        with ToolCallLogger(mock_logger).track("t", {}) as outcome:
            assert outcome == {"success": True}

        result_call = mock_logger.log.call_args_list[-1]
        extra = result_call.kwargs["extra"]["extra_data"]
        assert extra["success"] is True
        assert extra["duration_ms"] >= 0

    def test_track_marks_failure(self):
        mock_logger = MagicMock()
        with ToolCallLogger(mock_logger).track("t", {}) as outcome:
            outcome["success"] = False

        extra = mock_logger.log.call_args_list[-1].kwargs["extra"]["extra_data"]
        assert extra["success"] is False
        assert "failure" in mock_logger.log.call_args_list[-1].args[1]

    def test_track_reraises(self):
        mock_logger = MagicMock()
        with pytest.raises(RuntimeError):
            with ToolCallLogger(mock_logger).track("t", {}):
                raise RuntimeError("boom")

        extra = mock_logger.log.call_args_list[-1].kwargs["extra"]["extra_data"]
        assert extra["success"] is False
