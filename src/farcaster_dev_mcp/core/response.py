# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Result envelope helpers.

Every tool call answers with an ``mcp.types.CallToolResult`` holding text
blocks, so callers always see the same shape whether the call succeeded or
not::

    from farcaster_dev_mcp.core.response import text_result, error_result

    return text_result(markdown)
    return error_result("Unknown tool: foo")
"""

from __future__ import annotations

import json
from typing import Any

from mcp.types import CallToolResult, TextContent


def text_result(*texts: str) -> CallToolResult:
    """Build a successful result with one text block per argument."""
    return CallToolResult(
        content=[TextContent(type="text", text=text) for text in texts],
        isError=False,
    )


def json_text(data: Any) -> str:
    """Serialise a payload the way knowledge tools present it."""
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def error_result(message: str) -> CallToolResult:
    """Build a failed result whose single block reads ``Error: <message>``."""
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error: {message}")],
        isError=True,
    )


def result_text(result: CallToolResult) -> str:
    """Join the text blocks of a result.

    Convenience for the CLI and for tests.
    """
    return "\n".join(block.text for block in result.content if isinstance(block, TextContent))
