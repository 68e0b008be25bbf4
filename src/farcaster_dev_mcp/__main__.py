# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Allow ``python -m farcaster_dev_mcp``."""

from farcaster_dev_mcp.mcp.server import run

run()
