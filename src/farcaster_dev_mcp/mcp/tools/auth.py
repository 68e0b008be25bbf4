# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Authentication tool definitions (Sign In With Farcaster, sessions, profiles)."""

from __future__ import annotations

from mcp.types import Tool

AUTH_TOOLS = [
    Tool(
        name="farcaster_implement_siwf",
        description=(
            "Generate Sign In With Farcaster (SIWF) implementation code.\n\n"
            "Quick Auth is the default. Set useQuickAuth to false for a custom SIWF flow "
            "with nonce issuance and server-side verification on the chosen backend."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "framework": {
                    "type": "string",
                    "enum": ["react", "vanilla", "vue", "next"],
                    "description": "Frontend framework to generate code for",
                },
                "backend": {
                    "type": "string",
                    "enum": ["express", "nextjs-api", "fastify", "none"],
                    "description": "Backend framework for auth handling",
                    "default": "none",
                },
                "useQuickAuth": {
                    "type": "boolean",
                    "description": "Use Farcaster Quick Auth service instead of custom SIWF",
                    "default": True,
                },
            },
            "required": ["framework"],
        },
    ),
    Tool(
        name="farcaster_generate_auth_flow",
        description="Generate complete authentication flow with user session management",
        inputSchema={
            "type": "object",
            "properties": {
                "sessionStorage": {
                    "type": "string",
                    "enum": ["localStorage", "sessionStorage", "cookies", "memory"],
                    "description": "Where to store user session data",
                    "default": "localStorage",
                },
                "includeProfile": {
                    "type": "boolean",
                    "description": "Include user profile data fetching",
                    "default": True,
                },
                "autoSignIn": {
                    "type": "boolean",
                    "description": "Automatically attempt sign-in on app load",
                    "default": True,
                },
            },
        },
    ),
    Tool(
        name="farcaster_validate_user",
        description=(
            "Validate Farcaster user authentication and permissions.\n\n"
            "Produces a mock validation report and the server-side code for real verification. "
            "No signature is actually checked."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "fid": {
                    "type": "number",
                    "description": "Farcaster ID to validate",
                },
                "signature": {
                    "type": "string",
                    "description": "User signature to verify",
                },
                "message": {
                    "type": "string",
                    "description": "Original message that was signed",
                },
                "requireVerification": {
                    "type": "boolean",
                    "description": "Require verified Ethereum address",
                    "default": False,
                },
            },
            "required": ["fid"],
        },
    ),
    Tool(
        name="farcaster_get_user_profile",
        description=(
            "Fetch detailed user profile information from Farcaster.\n\n"
            "Returns a deterministic mock profile for the FID plus the client code that "
            "loads the real one."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "fid": {
                    "type": "number",
                    "description": "Farcaster ID of the user",
                },
                "includeFollowing": {
                    "type": "boolean",
                    "description": "Include following count and list",
                    "default": False,
                },
                "includeVerifications": {
                    "type": "boolean",
                    "description": "Include verified addresses",
                    "default": True,
                },
            },
            "required": ["fid"],
        },
    ),
]
