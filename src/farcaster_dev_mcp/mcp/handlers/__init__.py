# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Tool handlers, one module per domain.

Each domain module exposes ``<DOMAIN>_HANDLERS`` (tool name -> leaf function)
and a ``handle_<domain>_tool`` router that raises
UnknownToolInDomainException for names it does not own.
"""

from __future__ import annotations

from .auth import AUTH_HANDLERS, handle_auth_tool
from .development import DEVELOPMENT_HANDLERS, handle_development_tool
from .knowledge import KNOWLEDGE_HANDLERS, handle_knowledge_tool
from .project_setup import PROJECT_SETUP_HANDLERS, handle_project_setup_tool
from .publishing import PUBLISHING_HANDLERS, handle_publishing_tool
from .sdk import SDK_HANDLERS, handle_sdk_tool
from .wallet import WALLET_HANDLERS, handle_wallet_tool

__all__ = [
    "AUTH_HANDLERS",
    "DEVELOPMENT_HANDLERS",
    "KNOWLEDGE_HANDLERS",
    "PROJECT_SETUP_HANDLERS",
    "PUBLISHING_HANDLERS",
    "SDK_HANDLERS",
    "WALLET_HANDLERS",
    "handle_auth_tool",
    "handle_development_tool",
    "handle_knowledge_tool",
    "handle_project_setup_tool",
    "handle_publishing_tool",
    "handle_sdk_tool",
    "handle_wallet_tool",
]
