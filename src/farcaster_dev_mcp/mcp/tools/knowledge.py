# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Knowledge base tool definitions."""

from __future__ import annotations

from mcp.types import Tool

from ...knowledge.models import KnowledgeCategory

_CATEGORY_NAMES = [category.value for category in KnowledgeCategory]

KNOWLEDGE_TOOLS = [
    Tool(
        name="farcaster_get_knowledge",
        description=(
            "Get comprehensive knowledge about Farcaster Mini App development topics.\n\n"
            "With a topic key, returns that article; with a tag, the articles carrying it; "
            "otherwise every article in the category. Use 'all' for every article in every category "
            "(topic and tag are ignored)."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "category": {
                    "type": "string",
                    "enum": [*_CATEGORY_NAMES, "all"],
                    "description": "Knowledge category to retrieve",
                },
                "topic": {
                    "type": "string",
                    "description": "Specific topic key to retrieve (optional)",
                },
                "tag": {
                    "type": "string",
                    "description": "Filter by tag (optional)",
                },
            },
            "required": ["category"],
        },
    ),
    Tool(
        name="farcaster_search_knowledge",
        description="Search through Farcaster Mini App knowledge base",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query to find relevant knowledge",
                },
                "categories": {
                    "type": "array",
                    "items": {"type": "string", "enum": _CATEGORY_NAMES},
                    "description": "Categories to search in, in order (optional, defaults to all)",
                },
            },
            "required": ["query"],
        },
    ),
    Tool(
        name="farcaster_list_topics",
        description="List all available knowledge topics and categories",
        inputSchema={
            "type": "object",
            "properties": {
                "format": {
                    "type": "string",
                    "enum": ["simple", "detailed"],
                    "description": "Output format",
                    "default": "simple",
                },
            },
        },
    ),
]
