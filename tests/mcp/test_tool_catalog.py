"""Tests for the tool catalog: descriptors, names and parameter models agree."""

from __future__ import annotations

import pytest

from farcaster_dev_mcp.mcp.names import ToolName
from farcaster_dev_mcp.mcp.registry import PARAMS_MODELS
from farcaster_dev_mcp.mcp.tools import ALL_TOOLS

TOOLS_BY_NAME = {tool.name: tool for tool in ALL_TOOLS}


def _aliases(model) -> dict[str, object]:
    """Client-facing name -> field info."""
    return {(info.alias or name): info for name, info in model.model_fields.items()}


class TestCatalog:
    """The catalog covers ToolName exactly, in order."""

    def test_thirty_tools(self):
        assert len(ALL_TOOLS) == 30

    def test_names_unique(self):
        names = [tool.name for tool in ALL_TOOLS]
        assert len(names) == len(set(names))

    def test_catalog_order_matches_enum(self):
        assert [tool.name for tool in ALL_TOOLS] == [name.value for name in ToolName]

    def test_every_tool_has_description_and_object_schema(self):
        for tool in ALL_TOOLS:
            assert tool.description
            assert tool.inputSchema["type"] == "object"

    def test_parse_exact_match_only(self):
        assert ToolName.parse("farcaster_list_topics") is ToolName.LIST_TOPICS
        assert ToolName.parse("farcaster_list") is None
        assert ToolName.parse("FARCASTER_LIST_TOPICS") is None


@pytest.mark.parametrize("name", [name for name in ToolName], ids=lambda n: n.value)
class TestSchemaMatchesParams:
    """Each descriptor's input schema mirrors its parameter model."""

    def test_properties_match_fields(self, name):
        schema = TOOLS_BY_NAME[name.value].inputSchema
        assert set(schema.get("properties", {})) == set(_aliases(PARAMS_MODELS[name]))

    def test_required_match(self, name):
        schema = TOOLS_BY_NAME[name.value].inputSchema
        required = {alias for alias, info in _aliases(PARAMS_MODELS[name]).items() if info.is_required()}
        assert set(schema.get("required", [])) == required

    def test_defaults_match(self, name):
        schema = TOOLS_BY_NAME[name.value].inputSchema
        fields = _aliases(PARAMS_MODELS[name])
        for prop, spec in schema.get("properties", {}).items():
            if "default" in spec:
                assert fields[prop].get_default(call_default_factory=True) == spec["default"], prop

    def test_enums_accepted(self, name):
        """Every enum value in the schema validates against the model."""
        schema = TOOLS_BY_NAME[name.value].inputSchema
        model = PARAMS_MODELS[name]
        base = {
            alias: _sample(schema["properties"][alias])
            for alias, info in _aliases(model).items()
            if info.is_required()
        }
        for prop, spec in schema.get("properties", {}).items():
            values = spec.get("enum") or spec.get("items", {}).get("enum") or []
            for value in values:
                arg = [value] if spec.get("type") == "array" else value
                model.model_validate({**base, prop: arg})


def _sample(spec: dict) -> object:
    if "enum" in spec:
        return spec["enum"][0]
    return {"string": "https://example.com", "number": 1, "boolean": True, "array": []}[spec["type"]]
