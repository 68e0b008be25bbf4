# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Knowledge base handlers.

Results are serialised as indented JSON. A lookup that finds nothing is
reported as ``null`` rather than as an error.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ...core.exceptions import UnknownToolInDomainException
from ...core.response import json_text
from ...knowledge import KnowledgeArticle, KnowledgeStore
from ..params import GetKnowledgeParams, ListTopicsParams, SearchKnowledgeParams


def get_knowledge(store: KnowledgeStore, p: GetKnowledgeParams) -> str:
    found = store.get_by_category(p.category, topic=p.topic, tag=p.tag)
    if found is None:
        return json_text(None)
    if isinstance(found, KnowledgeArticle):
        return json_text(found.to_dict())
    return json_text([article.to_dict() for article in found])


def search_knowledge(store: KnowledgeStore, p: SearchKnowledgeParams) -> str:
    return json_text([article.to_dict() for article in store.search(p.query, p.categories)])


def list_topics(store: KnowledgeStore, p: ListTopicsParams) -> str:
    if p.format == "detailed":
        return json_text(store.describe_topics())
    return json_text(store.list_topics())


KNOWLEDGE_HANDLERS: dict[str, Callable[[KnowledgeStore, Any], str]] = {
    "farcaster_get_knowledge": get_knowledge,
    "farcaster_search_knowledge": search_knowledge,
    "farcaster_list_topics": list_topics,
}


def handle_knowledge_tool(store: KnowledgeStore, name: str, params: Any) -> str:
    """Route a knowledge tool to its handler, reading from ``store``."""
    handler = KNOWLEDGE_HANDLERS.get(name)
    if handler is None:
        raise UnknownToolInDomainException(name, "knowledge")
    return handler(store, params)
