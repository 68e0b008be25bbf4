# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Custom exception hierarchy for the Farcaster Dev MCP server.

Every failure a tool call can hit is one of these types. The registry is the
single place that catches them and turns them into error results, so nothing
raised here ever reaches the transport.
"""

from __future__ import annotations

from typing import Any


class FarcasterMCPException(Exception):  # noqa: N818
    """Base exception for all server errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(FarcasterMCPException):
    """Exception for malformed tool arguments.

    Raised when:
    - A required argument is missing
    - An argument has the wrong type
    - An argument is outside its declared enumeration
    """

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        super().__init__(message, details)
        self.field = field
        self.value = value


class ConfigException(FarcasterMCPException):
    """Exception for configuration errors.

    Raised when:
    - Environment settings fail validation
    - The tool catalog and handler tables disagree at start-up
    """

    def __init__(self, message: str, missing_vars: list[str] | None = None):
        details = {}
        if missing_vars:
            details["missing_vars"] = missing_vars
        super().__init__(message, details)
        self.missing_vars = missing_vars or []


class UnknownToolException(FarcasterMCPException):
    """A tool call named a tool that is not in the catalog."""

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}", {"tool_name": tool_name})
        self.tool_name = tool_name


class UnknownToolInDomainException(FarcasterMCPException):
    """A domain handler was asked for a tool it does not own.

    Only reachable when the registry and a handler table drift apart.
    """

    def __init__(self, tool_name: str, domain: str):
        super().__init__(
            f"Unknown {domain} tool: {tool_name}",
            {"tool_name": tool_name, "domain": domain},
        )
        self.tool_name = tool_name
        self.domain = domain
