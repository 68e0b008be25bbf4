# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Farcaster Dev MCP - developer tooling for Farcaster Mini Apps over MCP.

The server exposes a fixed catalog of tools to an MCP client. Every tool
returns generated text: project scaffolds, manifests, SDK and wallet
integration code, test suites, deployment scripts and reference articles.
Nothing is executed, signed or deployed; the code only appears inside the
returned text.

Architecture:
  Tool descriptors (static catalog, one module per domain)
    -> Registry (exact-match name lookup, typed argument binding)
    -> Domain handlers (pure template rendering)
    -> Knowledge store (static articles, category/tag/search lookups)

CLI entry point: ``farcaster-dev-mcp``
"""

__version__ = "1.0.0"
