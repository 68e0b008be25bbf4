# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""MCP surface: tool catalog, argument models, handlers, registry and server."""

from .names import ToolDomain, ToolName
from .registry import ToolEntry, ToolRegistry, bind_arguments, build_registry

__all__ = [
    "ToolDomain",
    "ToolEntry",
    "ToolName",
    "ToolRegistry",
    "bind_arguments",
    "build_registry",
]
