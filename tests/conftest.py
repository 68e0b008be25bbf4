"""Global test fixtures for the Farcaster Dev MCP test suite."""

from __future__ import annotations

import os

import pytest

from farcaster_dev_mcp.core.config import clear_config_cache
from farcaster_dev_mcp.core.response import result_text
from farcaster_dev_mcp.knowledge import KnowledgeStore, build_knowledge_store
from farcaster_dev_mcp.mcp.registry import ToolRegistry, build_registry

# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all FARCASTER_MCP_ environment variables and the cached config."""
    for key in list(os.environ.keys()):
        if key.startswith("FARCASTER_MCP_"):
            monkeypatch.delenv(key, raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


# ============================================================================
# Knowledge / Registry Fixtures
# ============================================================================


@pytest.fixture(scope="session")
def store() -> KnowledgeStore:
    """The bundled knowledge store."""
    return build_knowledge_store()


@pytest.fixture
def registry(store) -> ToolRegistry:
    """A registry built over the bundled store."""
    return build_registry(store)


@pytest.fixture
def call(registry):
    """Dispatch a tool and return ``(text, is_error)``."""

    def _call(name: str, arguments: dict | None = None) -> tuple[str, bool]:
        result = registry.dispatch(name, arguments or {})
        return result_text(result), bool(result.isError)

    return _call
