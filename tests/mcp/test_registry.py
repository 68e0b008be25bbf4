"""Tests for farcaster_dev_mcp.mcp.registry - routing, argument binding and error policy."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from mcp.types import CallToolResult

from farcaster_dev_mcp.core.exceptions import ConfigException, ValidationException
from farcaster_dev_mcp.core.logging import ToolCallLogger
from farcaster_dev_mcp.core.response import result_text
from farcaster_dev_mcp.mcp import params as P
from farcaster_dev_mcp.mcp.names import ToolDomain, ToolName
from farcaster_dev_mcp.mcp.registry import (
    PARAMS_MODELS,
    ToolEntry,
    ToolRegistry,
    bind_arguments,
    build_registry,
)
from farcaster_dev_mcp.mcp.tools import ALL_TOOLS

# ============================================================================
# build_registry
# ============================================================================


class TestBuildRegistry:
    """Tests for build_registry consistency checks."""

    def test_registers_every_tool(self, registry):
        assert len(registry) == 30
        assert registry.names == [name.value for name in ToolName]

    def test_domains(self, registry):
        assert registry.get("farcaster_configure_chains").domain is ToolDomain.WALLET
        assert registry.get("farcaster_list_topics").domain is ToolDomain.KNOWLEDGE

    def test_params_models_cover_enum(self):
        assert set(PARAMS_MODELS) == set(ToolName)

    def test_missing_handler_raises(self, store):
        with patch.dict("farcaster_dev_mcp.mcp.handlers.wallet.WALLET_HANDLERS", clear=True):
            with pytest.raises(ConfigException, match="No wallet handler"):
                build_registry(store)

    def test_missing_params_model_raises(self, store):
        with patch.dict("farcaster_dev_mcp.mcp.registry.PARAMS_MODELS"):
            del PARAMS_MODELS[ToolName.LIST_TOPICS]
            with pytest.raises(ConfigException, match="No parameter model"):
                build_registry(store)

    def test_duplicate_entry_raises(self):
        entry = ToolEntry(
            ToolName.LIST_TOPICS, ALL_TOOLS[-1], ToolDomain.KNOWLEDGE, P.ListTopicsParams, lambda n, p: ""
        )
        with pytest.raises(ConfigException, match="Duplicate"):
            ToolRegistry([entry, entry])


# ============================================================================
# list_tools
# ============================================================================


class TestListTools:
    """Tests for ToolRegistry.list_tools."""

    def test_stable_across_calls(self, registry):
        assert registry.list_tools() == registry.list_tools()

    def test_matches_catalog(self, registry):
        assert registry.list_tools() == ALL_TOOLS

    def test_returns_copy(self, registry):
        tools = registry.list_tools()
        tools.clear()
        assert len(registry.list_tools()) == 30


# ============================================================================
# bind_arguments
# ============================================================================


class TestBindArguments:
    """Tests for bind_arguments."""

    def test_applies_defaults(self):
        params = bind_arguments(P.StartDevServerParams, {})
        assert params.port == 3000
        assert params.https is True
        assert params.tunnel is False

    def test_none_means_empty(self):
        assert bind_arguments(P.ListTopicsParams, None).format == "simple"

    def test_camel_case_aliases(self):
        params = bind_arguments(P.GenerateTestSuiteParams, {"testFramework": "vitest", "mockSDK": False})
        assert params.test_framework == "vitest"
        assert params.mock_sdk is False

    def test_extra_arguments_ignored(self):
        params = bind_arguments(P.ListTopicsParams, {"format": "detailed", "bogus": 1})
        assert params.format == "detailed"

    def test_missing_required(self):
        with pytest.raises(ValidationException) as exc_info:
            bind_arguments(P.CreateMiniAppParams, {"name": "x"})
        assert exc_info.value.field == "homeUrl"
        assert exc_info.value.message == "Missing required argument: homeUrl"

    def test_out_of_enum(self):
        with pytest.raises(ValidationException) as exc_info:
            bind_arguments(P.ImplementSiwfParams, {"framework": "svelte"})
        assert exc_info.value.field == "framework"
        assert exc_info.value.value == "svelte"

    def test_wrong_type(self):
        with pytest.raises(ValidationException) as exc_info:
            bind_arguments(P.ValidateUserParams, {"fid": "not-a-number"})
        assert exc_info.value.field == "fid"

    def test_out_of_range(self):
        with pytest.raises(ValidationException) as exc_info:
            bind_arguments(P.StartDevServerParams, {"port": 70000})
        assert exc_info.value.field == "port"

    def test_nested_field_path(self):
        with pytest.raises(ValidationException) as exc_info:
            bind_arguments(P.ConfigureChainsParams, {"customRpcs": [{"chainId": 1, "name": "x"}]})
        assert exc_info.value.field == "customRpcs.0.rpcUrl"

    def test_not_a_mapping(self):
        with pytest.raises(ValidationException, match="Invalid arguments"):
            bind_arguments(P.ListTopicsParams, ["format"])


# ============================================================================
# dispatch
# ============================================================================


class TestDispatch:
    """Tests for ToolRegistry.dispatch error policy."""

    def test_success(self, registry):
        result = registry.dispatch("farcaster_list_topics", {})
        assert isinstance(result, CallToolResult)
        assert result.isError is False
        assert '"core-concepts"' in result_text(result)

    def test_unknown_tool(self, registry):
        result = registry.dispatch("__nonexistent__", {})
        assert result.isError is True
        assert result_text(result) == "Error: Unknown tool: __nonexistent__"

    def test_prefix_is_not_enough(self, registry):
        """Exact-match routing: a known prefix does not route."""
        result = registry.dispatch("farcaster_create_mini_app_v2", {"name": "a", "homeUrl": "https://a"})
        assert result.isError is True
        assert "Unknown tool" in result_text(result)

    def test_missing_argument_names_field(self, registry):
        result = registry.dispatch("farcaster_create_mini_app", {})
        assert result.isError is True
        assert result_text(result).startswith("Error: Missing required argument:")

    def test_none_arguments(self, registry):
        assert registry.dispatch("farcaster_list_topics", None).isError is False

    def test_handler_crash_becomes_error_result(self, store):
        def boom(params):
            raise RuntimeError("template exploded")

        with patch.dict("farcaster_dev_mcp.mcp.handlers.sdk.SDK_HANDLERS", {"farcaster_initialize_sdk": boom}):
            result = build_registry(store).dispatch("farcaster_initialize_sdk", {"framework": "react"})

        assert result.isError is True
        assert result_text(result) == "Error: template exploded"

    def test_logs_outcome(self, store):
        mock_logger = MagicMock()
        registry = build_registry(store, call_logger=ToolCallLogger(mock_logger))
        registry.dispatch("__nonexistent__", {"signature": "secret"})

        call_extra = mock_logger.log.call_args_list[0].kwargs["extra"]["extra_data"]
        result_extra = mock_logger.log.call_args_list[-1].kwargs["extra"]["extra_data"]
        assert call_extra["arguments"] == {"signature": "[REDACTED]"}
        assert result_extra["success"] is False

    @pytest.mark.parametrize("name", [name.value for name in ToolName])
    def test_empty_arguments_never_raise(self, registry, name):
        """Tools without required fields succeed; the rest name a missing field."""
        result = registry.dispatch(name, {})
        required = ALL_TOOLS[[t.name for t in ALL_TOOLS].index(name)].inputSchema.get("required", [])

        assert isinstance(result, CallToolResult)
        if required:
            assert result.isError is True
            assert any(field in result_text(result) for field in required)
        else:
            assert result.isError is False
            assert result_text(result)

    @pytest.mark.parametrize("name", [name.value for name in ToolName])
    def test_deterministic(self, registry, name):
        entry = registry.get(name)
        schema = entry.tool.inputSchema
        arguments = {
            field: (schema["properties"][field].get("enum") or ["https://example.com"])[0]
            for field in schema.get("required", [])
        }
        if "fid" in arguments:
            arguments["fid"] = 3
        first = registry.dispatch(name, arguments)
        second = registry.dispatch(name, arguments)

        assert first.isError is False, result_text(first)
        assert result_text(first) == result_text(second)
