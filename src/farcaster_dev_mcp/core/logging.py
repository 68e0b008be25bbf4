# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Structured logging for the MCP server.

stdout carries the MCP protocol stream, so every handler configured here
writes to stderr (or a file). Provides:
- JSON formatter for log aggregation
- Colour formatter for terminals
- Correlation IDs scoped to a single tool call
- Sanitized tool call logging with durations
"""

from __future__ import annotations

import json
import logging
import sys
import time
import uuid
from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> str | None:
    """Return the correlation ID of the current context.

    Returns:
        The ID set by the enclosing correlation_context, or None outside one.
    """
    return _correlation_id.get()


@contextmanager
def correlation_context(
    correlation_id: str | None = None,
) -> Generator[str, None, None]:
    """Scope a correlation ID to a block.

    Args:
        correlation_id: ID to use. A new UUID4 is generated when omitted.

    Yields:
        The correlation ID in effect inside the block.
    """
    cid = correlation_id or str(uuid.uuid4())
    token = _correlation_id.set(cid)
    try:
        yield cid
    finally:
        _correlation_id.reset(token)


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for machine consumption.

    Warnings and above carry their source location. The active correlation ID
    and any ``extra_data`` attached to the record are included when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Render a record as a single JSON line.

        Args:
            record: The record to render.

        Returns:
            JSON text with timestamp, level, logger and message keys.
        """
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        correlation_id = get_correlation_id()
        if correlation_id:
            log_data["correlation_id"] = correlation_id

        if record.levelno >= logging.WARNING:
            log_data["source"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_data"):
            log_data["extra"] = record.extra_data

        return json.dumps(log_data, default=str)


class StandardFormatter(logging.Formatter):
    """Human-readable formatter with level colours on a TTY."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"
    CORRELATION_COLOR = "\033[90m"

    def __init__(self, use_colors: bool = True):
        """Create the formatter.

        Args:
            use_colors: Colour level names. Ignored unless stderr is a TTY.
        """
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        self.use_colors = use_colors and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        """Render a record as one human-readable line.

        Args:
            record: The record to render.

        Returns:
            ``time - logger - LEVEL - message``, prefixed with the first eight
            characters of the correlation ID when one is active.
        """
        # Copy so other handlers see the unmodified record
        record = logging.makeLogRecord(record.__dict__)

        correlation_id = get_correlation_id()
        if correlation_id:
            short_cid = correlation_id[:8]
            if self.use_colors:
                cid_str = f"{self.CORRELATION_COLOR}[{short_cid}]{self.RESET} "
            else:
                cid_str = f"[{short_cid}] "
            record.msg = cid_str + str(record.msg)

        if self.use_colors:
            color = self.COLORS.get(record.levelname, "")
            record.levelname = f"{color}{record.levelname}{self.RESET}"

        return super().format(record)


def configure_logging(
    level: str | int | None = None,
    json_format: bool | None = None,
    log_file: str | None = None,
) -> None:
    """Configure the root logger for the server process.

    Args:
        level: Level name or number (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: Emit JSON lines instead of the colour format.
        log_file: Path of an additional JSON log file.

    Arguments left as None fall back to the FARCASTER_MCP_LOG_LEVEL,
    FARCASTER_MCP_LOG_FORMAT and FARCASTER_MCP_LOG_FILE settings. With no
    format configured, JSON is used unless stderr is a terminal.
    """
    from .config import get_config

    config = get_config()

    if level is None:
        level = config.log_level
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if json_format is None:
        if config.log_format == "json":
            json_format = True
        elif config.log_format == "text":
            json_format = False
        else:
            json_format = not sys.stderr.isatty()

    log_file = config.log_file if log_file is None else log_file

    formatter: logging.Formatter
    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = StandardFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)

    # The SDK logs every request at INFO
    logging.getLogger("mcp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


class ToolCallLogger:
    """Logger for MCP tool calls.

    Argument values whose key looks sensitive are redacted and long strings
    are truncated before anything is written.
    """

    SENSITIVE_PARAMS = {
        "password",
        "secret",
        "token",
        "api_key",
        "apikey",
        "private_key",
        "privatekey",
        "signature",
        "credential",
    }
    MAX_STRING_LENGTH = 500

    def __init__(self, logger: logging.Logger | None = None, include_arguments: bool = True):
        """Create a tool call logger.

        Args:
            logger: Destination logger. Defaults to ``farcaster_dev_mcp.tools``.
            include_arguments: Log sanitized arguments with each call.
        """
        self.logger = logger or logging.getLogger("farcaster_dev_mcp.tools")
        self.include_arguments = include_arguments

    def log_call(
        self,
        tool_name: str,
        arguments: dict[str, Any],
        level: int = logging.DEBUG,
    ) -> None:
        """Log the start of a tool call.

        Args:
            tool_name: Name of the tool
            arguments: Raw call arguments, sanitized before logging
            level: Log level
        """
        extra_data: dict[str, Any] = {"tool": tool_name}
        if self.include_arguments:
            extra_data["arguments"] = self._sanitize(arguments)
        self.logger.log(level, f"Tool call: {tool_name}", extra={"extra_data": extra_data})

    def log_result(
        self,
        tool_name: str,
        success: bool,
        duration_ms: float | None = None,
        level: int = logging.DEBUG,
    ) -> None:
        """Log the outcome of a tool call.

        Args:
            tool_name: Name of the tool
            success: Whether the call produced a non-error result
            duration_ms: Call duration in milliseconds
            level: Log level
        """
        status = "success" if success else "failure"
        msg = f"Tool result: {tool_name} -> {status}"
        if duration_ms is not None:
            msg += f" ({duration_ms:.1f}ms)"

        self.logger.log(
            level,
            msg,
            extra={
                "extra_data": {
                    "tool": tool_name,
                    "success": success,
                    "duration_ms": duration_ms,
                }
            },
        )

    @contextmanager
    def track(self, tool_name: str, arguments: dict[str, Any]) -> Generator[dict[str, bool], None, None]:
        """Log a call on entry and its result with duration on exit.

        Args:
            tool_name: Name of the tool
            arguments: Raw call arguments

        Yields:
            A dict starting as ``{"success": True}``. Set ``success`` to False
            inside the block to record a failure. An exception escaping the
            block is recorded as a failure too.
        """
        self.log_call(tool_name, arguments)
        outcome = {"success": True}
        started = time.perf_counter()
        try:
            yield outcome
        except Exception:
            outcome["success"] = False
            raise
        finally:
            duration_ms = (time.perf_counter() - started) * 1000
            self.log_result(tool_name, outcome["success"], duration_ms)

    def _sanitize(self, data: Any) -> Any:
        """Redact sensitive keys and truncate long strings, recursively."""
        if isinstance(data, dict):
            result = {}
            for key, value in data.items():
                if any(s in str(key).lower() for s in self.SENSITIVE_PARAMS):
                    result[key] = "[REDACTED]"
                else:
                    result[key] = self._sanitize(value)
            return result
        elif isinstance(data, list):
            return [self._sanitize(item) for item in data]
        elif isinstance(data, str) and len(data) > self.MAX_STRING_LENGTH:
            return data[: self.MAX_STRING_LENGTH] + "..."
        else:
            return data


# Default tool call logger
tool_logger = ToolCallLogger()
