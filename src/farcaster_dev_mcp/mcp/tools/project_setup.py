# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Project setup tool definitions.

Tool list:
    farcaster_create_mini_app         Scaffold a new Mini App project
    farcaster_generate_manifest       Build /.well-known/farcaster.json
    farcaster_validate_manifest       Check a manifest URL and/or JSON body
    farcaster_setup_dev_environment   Dependencies and tooling configuration
"""

from __future__ import annotations

from mcp.types import Tool

PROJECT_SETUP_TOOLS = [
    Tool(
        name="farcaster_create_mini_app",
        description=(
            "Create a new Farcaster Mini App project with proper structure and configuration.\n\n"
            "Returns package.json, index.html with fc:frame embed tags, the entry point, "
            "a root component, styles and a Vite config, plus next steps."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "name": {
                    "type": "string",
                    "description": "Name of the Mini App project",
                },
                "homeUrl": {
                    "type": "string",
                    "description": "Home URL where the app will be hosted",
                },
                "framework": {
                    "type": "string",
                    "enum": ["react", "vanilla", "vue", "next"],
                    "description": "Frontend framework to use",
                    "default": "react",
                },
                "includeWallet": {
                    "type": "boolean",
                    "description": "Include wallet integration setup",
                    "default": True,
                },
                "includeAuth": {
                    "type": "boolean",
                    "description": "Include authentication setup",
                    "default": True,
                },
            },
            "required": ["name", "homeUrl"],
        },
    ),
    Tool(
        name="farcaster_generate_manifest",
        description="Generate a valid Farcaster Mini App manifest file (/.well-known/farcaster.json)",
        inputSchema={
            "type": "object",
            "properties": {
                "name": {
                    "type": "string",
                    "description": "Display name of the Mini App",
                },
                "homeUrl": {
                    "type": "string",
                    "description": "Home URL of the Mini App",
                },
                "iconUrl": {
                    "type": "string",
                    "description": "URL to the app icon (recommended 200x200px)",
                },
                "imageUrl": {
                    "type": "string",
                    "description": "URL to preview image (optional)",
                },
                "description": {
                    "type": "string",
                    "description": "Brief description of the app",
                },
                "categories": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Categories for app discovery",
                },
                "buttonTitle": {
                    "type": "string",
                    "description": "Custom button title for the app",
                    "default": "Open App",
                },
            },
            "required": ["name", "homeUrl", "iconUrl"],
        },
    ),
    Tool(
        name="farcaster_validate_manifest",
        description=(
            "Validate a Farcaster Mini App manifest file for compliance.\n\n"
            "Checks the manifest URL shape and, when given, the raw JSON content. "
            "The URL is not fetched; pass manifestContent to validate the body."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "manifestUrl": {
                    "type": "string",
                    "description": "URL to the manifest file to validate",
                },
                "manifestContent": {
                    "type": "string",
                    "description": "Raw JSON content of manifest (alternative to URL)",
                },
            },
        },
    ),
    Tool(
        name="farcaster_setup_dev_environment",
        description="Setup development environment for Farcaster Mini Apps with required dependencies",
        inputSchema={
            "type": "object",
            "properties": {
                "packageManager": {
                    "type": "string",
                    "enum": ["npm", "yarn", "pnpm"],
                    "description": "Package manager to use",
                    "default": "npm",
                },
                "typescript": {
                    "type": "boolean",
                    "description": "Setup TypeScript configuration",
                    "default": True,
                },
                "eslint": {
                    "type": "boolean",
                    "description": "Setup ESLint configuration",
                    "default": True,
                },
            },
        },
    ),
]
