# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Development workflow tool definitions."""

from __future__ import annotations

from mcp.types import Tool

DEVELOPMENT_TOOLS = [
    Tool(
        name="farcaster_start_dev_server",
        description=(
            "Start local development server with Farcaster Mini App optimizations.\n\n"
            "Nothing is started by this tool. It returns the Vite configuration, commands "
            "and testing notes to run the server yourself."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "port": {
                    "type": "number",
                    "description": "Port to run development server on",
                    "default": 3000,
                },
                "https": {
                    "type": "boolean",
                    "description": "Use HTTPS for development (required for some features)",
                    "default": True,
                },
                "tunnel": {
                    "type": "boolean",
                    "description": "Create public tunnel for testing (ngrok-like)",
                    "default": False,
                },
                "hotReload": {
                    "type": "boolean",
                    "description": "Enable hot reloading",
                    "default": True,
                },
            },
        },
    ),
    Tool(
        name="farcaster_generate_test_suite",
        description="Generate comprehensive test suite for Mini App functionality",
        inputSchema={
            "type": "object",
            "properties": {
                "testFramework": {
                    "type": "string",
                    "enum": ["jest", "vitest", "playwright", "cypress"],
                    "description": "Testing framework to use",
                },
                "testTypes": {
                    "type": "array",
                    "items": {
                        "type": "string",
                        "enum": ["unit", "integration", "e2e", "sdk"],
                    },
                    "description": "Types of tests to generate",
                    "default": ["unit", "integration"],
                },
                "mockSDK": {
                    "type": "boolean",
                    "description": "Include SDK mocking utilities",
                    "default": True,
                },
                "testAuth": {
                    "type": "boolean",
                    "description": "Include authentication flow tests",
                    "default": True,
                },
            },
            "required": ["testFramework"],
        },
    ),
    Tool(
        name="farcaster_debug_mini_app",
        description="Generate debugging utilities and error handling for Mini Apps",
        inputSchema={
            "type": "object",
            "properties": {
                "debugLevel": {
                    "type": "string",
                    "enum": ["basic", "verbose", "production"],
                    "description": "Level of debug information to include",
                },
                "includeSDKDebug": {
                    "type": "boolean",
                    "description": "Include SDK-specific debugging",
                    "default": True,
                },
                "errorReporting": {
                    "type": "boolean",
                    "description": "Include error reporting mechanism",
                    "default": True,
                },
                "performanceMonitoring": {
                    "type": "boolean",
                    "description": "Include performance monitoring",
                    "default": False,
                },
            },
            "required": ["debugLevel"],
        },
    ),
    Tool(
        name="farcaster_optimize_performance",
        description="Generate performance optimization code for Mini Apps",
        inputSchema={
            "type": "object",
            "properties": {
                "optimizations": {
                    "type": "array",
                    "items": {
                        "type": "string",
                        "enum": [
                            "lazy-loading",
                            "code-splitting",
                            "image-optimization",
                            "caching",
                            "bundle-analysis",
                        ],
                    },
                    "description": "Performance optimizations to implement",
                    "default": ["lazy-loading", "image-optimization"],
                },
                "targetMetrics": {
                    "type": "object",
                    "properties": {
                        "loadTime": {"type": "number", "description": "Target load time in ms"},
                        "bundleSize": {"type": "number", "description": "Target bundle size in KB"},
                    },
                    "description": "Performance targets",
                },
            },
        },
    ),
    Tool(
        name="farcaster_generate_error_boundary",
        description="Generate error boundary components for graceful error handling",
        inputSchema={
            "type": "object",
            "properties": {
                "framework": {
                    "type": "string",
                    "enum": ["react", "vue", "vanilla"],
                    "description": "Frontend framework",
                },
                "includeReporting": {
                    "type": "boolean",
                    "description": "Include error reporting to external service",
                    "default": True,
                },
                "fallbackUI": {
                    "type": "string",
                    "enum": ["simple", "detailed", "retry", "custom"],
                    "description": "Type of fallback UI to show on errors",
                    "default": "retry",
                },
            },
            "required": ["framework"],
        },
    ),
]
