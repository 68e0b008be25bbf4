# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""MCP tool definitions, grouped by domain.

ALL_TOOLS is the catalog in the order ``tools/list`` reports it.
"""

from __future__ import annotations

from .auth import AUTH_TOOLS
from .development import DEVELOPMENT_TOOLS
from .knowledge import KNOWLEDGE_TOOLS
from .project_setup import PROJECT_SETUP_TOOLS
from .publishing import PUBLISHING_TOOLS
from .sdk import SDK_TOOLS
from .wallet import WALLET_TOOLS

ALL_TOOLS = [
    *PROJECT_SETUP_TOOLS,
    *AUTH_TOOLS,
    *WALLET_TOOLS,
    *SDK_TOOLS,
    *DEVELOPMENT_TOOLS,
    *PUBLISHING_TOOLS,
    *KNOWLEDGE_TOOLS,
]

__all__ = [
    "ALL_TOOLS",
    "AUTH_TOOLS",
    "DEVELOPMENT_TOOLS",
    "KNOWLEDGE_TOOLS",
    "PROJECT_SETUP_TOOLS",
    "PUBLISHING_TOOLS",
    "SDK_TOOLS",
    "WALLET_TOOLS",
]
