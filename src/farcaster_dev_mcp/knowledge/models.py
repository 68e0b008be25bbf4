# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Knowledge article types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class KnowledgeCategory(str, Enum):
    """Article categories, in the order ``all`` concatenates them."""

    CORE_CONCEPTS = "core-concepts"
    AUTHENTICATION = "authentication"
    WALLET_INTEGRATION = "wallet-integration"
    BEST_PRACTICES = "best-practices"


ALL_CATEGORIES = "all"


@dataclass(frozen=True)
class KnowledgeArticle:
    """A static reference document.

    Attributes:
        key: Topic key, unique within its category (e.g. ``siwf-implementation``).
        title: Display title.
        category: Category the article is filed under.
        tags: Exact-match labels used by tag filtering.
        content: Markdown body.
    """

    key: str
    title: str
    category: KnowledgeCategory
    tags: tuple[str, ...]
    content: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "title": self.title,
            "content": self.content,
            "category": self.category.value,
            "tags": list(self.tags),
        }

    def summary(self) -> dict[str, Any]:
        """Key, title and tags without the body."""
        return {"key": self.key, "title": self.title, "tags": list(self.tags)}

    def matches(self, needle: str) -> bool:
        """Case-insensitive substring match on title, body or any tag.

        ``needle`` must already be lower-cased.
        """
        return (
            needle in self.title.lower()
            or needle in self.content.lower()
            or any(needle in tag.lower() for tag in self.tags)
        )
