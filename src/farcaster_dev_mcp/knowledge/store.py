# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""In-memory knowledge store.

Articles are grouped by category and keep their declaration order, which is
the order every lookup returns them in. The store is read-only once built.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from ..core.exceptions import ConfigException
from . import authentication, best_practices, core_concepts, wallet_integration
from .models import ALL_CATEGORIES, KnowledgeArticle, KnowledgeCategory

logger = logging.getLogger(__name__)


class KnowledgeStore:
    """Category-indexed collection of knowledge articles."""

    def __init__(self, articles: Iterable[KnowledgeArticle]):
        self._by_category: dict[KnowledgeCategory, dict[str, KnowledgeArticle]] = {
            category: {} for category in KnowledgeCategory
        }
        for article in articles:
            bucket = self._by_category[article.category]
            if article.key in bucket:
                raise ConfigException(f"Duplicate knowledge topic '{article.key}' in {article.category.value}")
            bucket[article.key] = article

    @property
    def categories(self) -> list[KnowledgeCategory]:
        return list(self._by_category)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._by_category.values())

    def get_by_category(
        self,
        category: str,
        topic: str | None = None,
        tag: str | None = None,
    ) -> KnowledgeArticle | list[KnowledgeArticle] | None:
        """Look up articles in a category.

        ``topic`` wins over ``tag``: with a topic the single matching article
        is returned (or None), with a tag the articles carrying exactly that
        tag, otherwise every article in the category. ``all`` ignores ``topic``
        and ``tag`` and concatenates every category in its fixed order. An
        unknown category returns None.
        """
        if category == ALL_CATEGORIES:
            return [article for bucket in self._by_category.values() for article in bucket.values()]

        try:
            cat = KnowledgeCategory(category)
        except ValueError:
            logger.debug(f"Unknown knowledge category: {category}")
            return None
        return self._lookup(cat, topic, tag)

    def _lookup(
        self,
        category: KnowledgeCategory,
        topic: str | None,
        tag: str | None,
    ) -> KnowledgeArticle | list[KnowledgeArticle] | None:
        bucket = self._by_category[category]
        if topic:
            return bucket.get(topic)
        if tag:
            return [article for article in bucket.values() if tag in article.tags]
        return list(bucket.values())

    def search(self, query: str, categories: Sequence[str] | None = None) -> list[KnowledgeArticle]:
        """Substring search over titles, bodies and tags.

        Categories are scanned in the order given, every category when
        ``categories`` is None. An empty list selects nothing. Within a
        category results keep declaration order. No ranking. Unknown
        category names are ignored.
        """
        needle = query.lower()
        if categories is None:
            selected = list(KnowledgeCategory)
        else:
            known = {cat.value: cat for cat in KnowledgeCategory}
            selected = [known[name] for name in categories if name in known]

        return [
            article
            for cat in selected
            for article in self._by_category[cat].values()
            if article.matches(needle)
        ]

    def list_topics(self) -> dict[str, list[str]]:
        """Topic keys per category."""
        return {cat.value: list(bucket) for cat, bucket in self._by_category.items()}

    def describe_topics(self) -> dict[str, list[dict]]:
        """Key, title and tags of every topic, per category."""
        return {
            cat.value: [article.summary() for article in bucket.values()]
            for cat, bucket in self._by_category.items()
        }


def build_knowledge_store() -> KnowledgeStore:
    """Build the store from the bundled article modules."""
    store = KnowledgeStore(
        [
            *core_concepts.ARTICLES,
            *authentication.ARTICLES,
            *wallet_integration.ARTICLES,
            *best_practices.ARTICLES,
        ]
    )
    logger.debug(f"Knowledge store loaded with {len(store)} articles")
    return store
