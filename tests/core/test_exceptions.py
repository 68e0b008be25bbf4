"""Tests for farcaster_dev_mcp.core.exceptions module."""

from __future__ import annotations

import pytest

from farcaster_dev_mcp.core.exceptions import (
    ConfigException,
    FarcasterMCPException,
    UnknownToolException,
    UnknownToolInDomainException,
    ValidationException,
)

# ============================================================================
# FarcasterMCPException Tests
# ============================================================================


class TestFarcasterMCPException:
    """Tests for the base exception."""

    def test_create_with_message(self):
        """Create exception with just message."""
        exc = FarcasterMCPException("Something went wrong")
        assert str(exc) == "Something went wrong"
        assert exc.message == "Something went wrong"
        assert exc.details == {}

    def test_to_dict(self):
        """to_dict should serialize correctly."""
        exc = FarcasterMCPException("Test error", details={"info": "extra"})
        assert exc.to_dict() == {
            "error": "FarcasterMCPException",
            "message": "Test error",
            "details": {"info": "extra"},
        }

    def test_to_dict_class_name(self):
        """to_dict should use actual class name."""
        assert ConfigException("bad").to_dict()["error"] == "ConfigException"

    def test_can_be_raised_and_caught(self):
        with pytest.raises(FarcasterMCPException) as exc_info:
            raise UnknownToolException("nope")
        assert exc_info.value.message == "Unknown tool: nope"


# ============================================================================
# ValidationException Tests
# ============================================================================


class TestValidationException:
    """Tests for ValidationException."""

    def test_field_and_value_in_details(self):
        exc = ValidationException("Invalid port", field="port", value=0)
        assert exc.field == "port"
        assert exc.value == 0
        assert exc.details == {"field": "port", "value": "0"}

    def test_without_field(self):
        """No field, no value: empty details."""
        exc = ValidationException("Invalid arguments")
        assert exc.details == {}
        assert exc.field is None


class TestConfigException:
    """Tests for ConfigException."""

    def test_missing_vars(self):
        exc = ConfigException("Invalid configuration", missing_vars=["FARCASTER_MCP_LOG_LEVEL"])
        assert exc.missing_vars == ["FARCASTER_MCP_LOG_LEVEL"]
        assert exc.details["missing_vars"] == ["FARCASTER_MCP_LOG_LEVEL"]

    def test_defaults_to_empty_list(self):
        assert ConfigException("x").missing_vars == []


class TestUnknownToolExceptions:
    """Tests for the unknown-tool exceptions."""

    def test_unknown_tool_message(self):
        exc = UnknownToolException("farcaster_bogus")
        assert exc.message == "Unknown tool: farcaster_bogus"
        assert exc.tool_name == "farcaster_bogus"

    def test_unknown_tool_in_domain_message(self):
        exc = UnknownToolInDomainException("farcaster_bogus", "wallet")
        assert exc.message == "Unknown wallet tool: farcaster_bogus"
        assert exc.details == {"tool_name": "farcaster_bogus", "domain": "wallet"}
