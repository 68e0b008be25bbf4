# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Core configuration for the Farcaster Dev MCP server.

All environment-based configuration flows through this module.

Usage:
    from farcaster_dev_mcp.core.config import get_config
    config = get_config()

    log_level = config.log_level
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigException

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("", "json", "text")


class CoreSettings(BaseSettings):
    """Server settings, read from FARCASTER_MCP_* environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # SERVER IDENTITY
    # ==========================================================================

    server_name: str = Field(
        default="farcaster-dev-mcp-server",
        description="Name reported to MCP clients during initialization",
        validation_alias="FARCASTER_MCP_SERVER_NAME",
    )
    server_version: str = Field(
        default="1.0.0",
        description="Version reported to MCP clients during initialization",
        validation_alias="FARCASTER_MCP_SERVER_VERSION",
    )

    # ==========================================================================
    # LOGGING SETTINGS
    # ==========================================================================

    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
        validation_alias="FARCASTER_MCP_LOG_LEVEL",
    )
    log_format: str = Field(
        default="",
        description="Log format: 'json', 'text', or '' (auto-detect)",
        validation_alias="FARCASTER_MCP_LOG_FORMAT",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (optional)",
        validation_alias="FARCASTER_MCP_LOG_FILE",
    )
    log_tool_arguments: bool = Field(
        default=True,
        description="Include sanitized arguments in tool call logs",
        validation_alias="FARCASTER_MCP_LOG_TOOL_ARGUMENTS",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}")
        return level

    @field_validator("log_format")
    @classmethod
    def _normalize_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in VALID_LOG_FORMATS:
            raise ValueError("log_format must be 'json', 'text' or empty")
        return fmt


_config: CoreSettings | None = None


def get_config() -> CoreSettings:
    """Get the core configuration singleton.

    Configuration is loaded lazily on first access.

    Raises:
        ConfigException: If the environment holds an invalid setting.
    """
    global _config
    if _config is None:
        try:
            _config = CoreSettings()
        except ValidationError as e:
            fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            raise ConfigException(f"Invalid configuration: {e}", missing_vars=fields) from e
    return _config


def clear_config_cache() -> None:
    """Clear the config cache. Useful for testing."""
    global _config
    _config = None
