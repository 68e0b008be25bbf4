# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Farcaster Dev MCP server.

Serves the tool catalog over stdio. stdout carries the protocol, so every
log line goes to stderr.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from ..core.config import CoreSettings, get_config
from ..core.health import cli_health_check, startup_checks
from ..core.logging import ToolCallLogger, configure_logging
from ..knowledge import build_knowledge_store
from .registry import ToolRegistry, build_registry

logger = logging.getLogger(__name__)

READY_MESSAGE = "Farcaster Dev MCP Server running on stdio"


def create_server(registry: ToolRegistry, config: CoreSettings) -> Server:
    """Wire ``registry`` into an MCP server instance."""
    server = Server(config.server_name, version=config.server_version)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List all available tools."""
        return registry.list_tools()

    # Arguments are bound against the parameter models by the registry
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
        """Route tool calls through the registry."""
        return registry.dispatch(name, arguments)

    return server


def build_application(config: CoreSettings | None = None) -> tuple[Server, ToolRegistry]:
    """Build the knowledge store, registry and server for this process."""
    config = config or get_config()
    store = build_knowledge_store()
    registry = build_registry(store, call_logger=ToolCallLogger(include_arguments=config.log_tool_arguments))
    return create_server(registry, config), registry


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="farcaster-dev-mcp",
        description="MCP server with Farcaster Mini App development tools",
    )
    parser.add_argument("--health-check", action="store_true", help="Run health check and exit")
    parser.add_argument("--list-tools", action="store_true", help="Print the tool catalog as JSON and exit")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Override FARCASTER_MCP_LOG_LEVEL",
    )
    return parser.parse_args(argv)


async def serve(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        logger.info(READY_MESSAGE)
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run(argv: list[str] | None = None) -> None:
    """Run the MCP server."""
    args = parse_args(argv)

    if args.health_check:
        sys.exit(cli_health_check())

    try:
        configure_logging(level=args.log_level)
        server, registry = build_application()

        if args.list_tools:
            catalog = [tool.model_dump(mode="json", exclude_none=True) for tool in registry.list_tools()]
            print(json.dumps(catalog, indent=2))
            return

        startup_checks(fail_fast=True)
        logger.info(f"Starting {server.name} {server.version} with {len(registry)} tools")
        asyncio.run(serve(server))
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except Exception:  # Intentionally broad: any start-up failure ends the process
        logger.exception("Server failed to start")
        sys.exit(1)


if __name__ == "__main__":
    run()
