# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Static Farcaster Mini App knowledge base."""

from .models import ALL_CATEGORIES, KnowledgeArticle, KnowledgeCategory  # noqa: F401
from .store import KnowledgeStore, build_knowledge_store  # noqa: F401
