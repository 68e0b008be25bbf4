# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Core primitives shared by the server: config, errors, logging, results."""

from .config import CoreSettings, clear_config_cache, get_config
from .exceptions import (
    ConfigException,
    FarcasterMCPException,
    UnknownToolException,
    UnknownToolInDomainException,
    ValidationException,
)
from .logging import (
    ToolCallLogger,
    configure_logging,
    tool_logger,
)
from .response import error_result, text_result

__all__ = [
    "ConfigException",
    "CoreSettings",
    "FarcasterMCPException",
    "ToolCallLogger",
    "UnknownToolException",
    "UnknownToolInDomainException",
    "ValidationException",
    "clear_config_cache",
    "configure_logging",
    "error_result",
    "get_config",
    "text_result",
    "tool_logger",
]
