# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Health check utilities.

Verifies that the knowledge store loads and that the tool catalog, parameter
models and handler tables agree, without starting the transport.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Any

from .exceptions import FarcasterMCPException

logger = logging.getLogger(__name__)


@dataclass
class HealthStatus:
    """Overall health status of the server."""

    healthy: bool = False
    config_valid: bool = False
    knowledge_loaded: bool = False
    registry_valid: bool = False
    tool_count: int = 0
    article_count: int = 0
    topics: dict[str, int] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "healthy": self.healthy,
            "config_valid": self.config_valid,
            "knowledge_loaded": self.knowledge_loaded,
            "registry_valid": self.registry_valid,
            "tool_count": self.tool_count,
            "article_count": self.article_count,
            "topics": self.topics,
            "warnings": self.warnings,
            "error": self.error,
        }


def run_health_check() -> HealthStatus:
    """Run every start-up check.

    Returns:
        HealthStatus with all check results
    """
    from ..knowledge import build_knowledge_store
    from ..mcp.registry import build_registry
    from .config import get_config

    status = HealthStatus()

    try:
        get_config()
        status.config_valid = True
    except FarcasterMCPException as e:
        status.error = e.message
        return status

    try:
        store = build_knowledge_store()
    except FarcasterMCPException as e:
        status.error = f"Knowledge store failed to load: {e.message}"
        return status
    status.knowledge_loaded = True
    status.article_count = len(store)
    status.topics = {category: len(keys) for category, keys in store.list_topics().items()}
    empty = [category for category, count in status.topics.items() if count == 0]
    if empty:
        status.warnings.append(f"Empty knowledge categories: {', '.join(empty)}")

    try:
        registry = build_registry(store)
    except FarcasterMCPException as e:
        status.error = f"Tool registry invalid: {e.message}"
        return status
    status.registry_valid = True
    status.tool_count = len(registry)

    status.healthy = True
    return status


def startup_checks(fail_fast: bool = True) -> HealthStatus:
    """Run all startup checks and log the outcome.

    Args:
        fail_fast: If True, exit with error code on failure
    """
    status = run_health_check()

    if status.healthy:
        logger.info(f"Startup checks passed: {status.tool_count} tools, {status.article_count} articles")
        for warning in status.warnings:
            logger.warning(warning)
    else:
        logger.error(f"Startup checks FAILED: {status.error}")
        if fail_fast:
            sys.exit(1)

    return status


def cli_health_check() -> int:
    """CLI entry point for health check.

    Returns:
        Exit code (0 for healthy, 1 for unhealthy)
    """
    status = run_health_check()

    print(f"Healthy: {status.healthy}")
    print(f"Configuration valid: {status.config_valid}")
    print(f"Knowledge loaded: {status.knowledge_loaded} ({status.article_count} articles)")
    print(f"Registry valid: {status.registry_valid} ({status.tool_count} tools)")

    if status.topics:
        print("Topics:")
        for category, count in status.topics.items():
            print(f"  - {category}: {count}")

    if status.error:
        print(f"Error: {status.error}")

    if status.warnings:
        print("Warnings:")
        for warning in status.warnings:
            print(f"  - {warning}")

    return 0 if status.healthy else 1
