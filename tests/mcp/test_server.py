"""Tests for the MCP server entry point.

Tests cover:
1. create_server - list_tools and call_tool protocol handlers
2. build_application - wiring of store, registry and server
3. parse_args / run - CLI flags, health check and start-up failures
4. serve - stdio transport start-up
"""

from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, patch

import mcp.types as types
import pytest

from farcaster_dev_mcp.core.config import CoreSettings
from farcaster_dev_mcp.core.exceptions import ConfigException
from farcaster_dev_mcp.mcp.server import (
    READY_MESSAGE,
    build_application,
    create_server,
    parse_args,
    run,
    serve,
)

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def server(registry, clean_env):
    return create_server(registry, CoreSettings())


def _call_request(name: str, arguments: dict | None = None) -> types.CallToolRequest:
    return types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )


# ---------------------------------------------------------------------------
# Tests: protocol handlers
# ---------------------------------------------------------------------------


class TestProtocolHandlers:
    """Tests for the handlers registered by create_server."""

    async def test_list_tools(self, server):
        result = await server.request_handlers[types.ListToolsRequest](types.ListToolsRequest(method="tools/list"))

        tools = result.root.tools
        assert len(tools) == 30
        assert tools[0].name == "farcaster_create_mini_app"

    async def test_call_tool(self, server):
        handler = server.request_handlers[types.CallToolRequest]
        result = await handler(_call_request("farcaster_start_dev_server", {"port": 4000}))

        assert result.root.isError is False
        assert "port: 4000," in result.root.content[0].text

    async def test_call_unknown_tool(self, server):
        handler = server.request_handlers[types.CallToolRequest]
        result = await handler(_call_request("__nonexistent__", {}))

        assert result.root.isError is True
        assert result.root.content[0].text == "Error: Unknown tool: __nonexistent__"

    async def test_call_missing_argument(self, server):
        handler = server.request_handlers[types.CallToolRequest]
        result = await handler(_call_request("farcaster_validate_user"))

        assert result.root.isError is True
        assert result.root.content[0].text == "Error: Missing required argument: fid"

    def test_server_identity(self, server):
        assert server.name == "farcaster-dev-mcp-server"
        assert server.version == "1.0.0"


class TestBuildApplication:
    """Tests for build_application."""

    def test_wires_registry(self, clean_env):
        server, registry = build_application()

        assert len(registry) == 30
        assert server.name == "farcaster-dev-mcp-server"

    def test_respects_argument_logging_setting(self, clean_env, monkeypatch):
        monkeypatch.setenv("FARCASTER_MCP_LOG_TOOL_ARGUMENTS", "false")
        _, registry = build_application(CoreSettings())

        assert registry.call_logger.include_arguments is False


# ---------------------------------------------------------------------------
# Tests: CLI
# ---------------------------------------------------------------------------


class TestParseArgs:
    """Tests for parse_args."""

    def test_defaults(self):
        args = parse_args([])

        assert args.health_check is False
        assert args.list_tools is False
        assert args.log_level is None

    def test_log_level_case_insensitive(self):
        assert parse_args(["--log-level", "debug"]).log_level == "DEBUG"

    def test_rejects_unknown_level(self):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--log-level", "loud"])
        assert exc_info.value.code == 2


class TestRun:
    """Tests for run."""

    def test_list_tools(self, clean_env, capsys):
        with patch("farcaster_dev_mcp.mcp.server.configure_logging"):
            run(["--list-tools"])

        catalog = json.loads(capsys.readouterr().out)
        assert len(catalog) == 30
        assert catalog[-1]["name"] == "farcaster_list_topics"
        assert "inputSchema" in catalog[0]

    def test_health_check(self, clean_env, capsys):
        with pytest.raises(SystemExit) as exc_info:
            run(["--health-check"])

        assert exc_info.value.code == 0
        assert "Healthy: True" in capsys.readouterr().out

    def test_startup_failure_exits(self, clean_env):
        with (
            patch("farcaster_dev_mcp.mcp.server.configure_logging"),
            patch(
                "farcaster_dev_mcp.mcp.server.build_application",
                side_effect=ConfigException("No wallet handler for farcaster_configure_chains"),
            ),
            pytest.raises(SystemExit) as exc_info,
        ):
            run([])

        assert exc_info.value.code == 1

    def test_keyboard_interrupt_stops_cleanly(self, clean_env):
        with (
            patch("farcaster_dev_mcp.mcp.server.configure_logging"),
            patch("farcaster_dev_mcp.mcp.server.startup_checks") as mock_checks,
            patch("farcaster_dev_mcp.mcp.server.serve", MagicMock()),
            patch("farcaster_dev_mcp.mcp.server.asyncio.run", side_effect=KeyboardInterrupt),
        ):
            run([])

        mock_checks.assert_called_once_with(fail_fast=True)

    def test_log_level_flag_forwarded(self, clean_env):
        with (
            patch("farcaster_dev_mcp.mcp.server.configure_logging") as mock_configure,
            patch("farcaster_dev_mcp.mcp.server.build_application", side_effect=ConfigException("stop")),
            pytest.raises(SystemExit),
        ):
            run(["--log-level", "warning"])

        mock_configure.assert_called_once_with(level="WARNING")


class TestServe:
    """Tests for serve."""

    async def test_runs_over_stdio(self, server, caplog):
        read_stream, write_stream = object(), object()

        @asynccontextmanager
        async def fake_stdio():
            yield read_stream, write_stream

        with (
            patch("farcaster_dev_mcp.mcp.server.stdio_server", fake_stdio),
            patch.object(server, "run", AsyncMock()) as mock_run,
            caplog.at_level(logging.INFO, logger="farcaster_dev_mcp.mcp.server"),
        ):
            await serve(server)

        assert READY_MESSAGE in caplog.text
        assert mock_run.await_args.args[:2] == (read_stream, write_stream)
