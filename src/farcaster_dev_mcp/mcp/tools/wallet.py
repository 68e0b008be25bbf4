# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Wallet tool definitions (EIP-1193 provider, Wagmi, chains, transactions)."""

from __future__ import annotations

from mcp.types import Tool

WALLET_TOOLS = [
    Tool(
        name="farcaster_setup_wallet_integration",
        description="Setup wallet integration using EIP-1193 provider and Wagmi",
        inputSchema={
            "type": "object",
            "properties": {
                "framework": {
                    "type": "string",
                    "enum": ["react", "vue", "vanilla"],
                    "description": "Frontend framework",
                },
                "chains": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Blockchain networks to support",
                    "default": ["ethereum", "base", "optimism"],
                },
                "includeConnectors": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Wallet connectors to include",
                    "default": ["miniapp", "injected", "walletconnect"],
                },
            },
            "required": ["framework"],
        },
    ),
    Tool(
        name="farcaster_generate_transaction",
        description="Generate transaction code for single or batch operations",
        inputSchema={
            "type": "object",
            "properties": {
                "transactionType": {
                    "type": "string",
                    "enum": ["single", "batch", "erc20-transfer", "nft-mint", "contract-call"],
                    "description": "Type of transaction to generate",
                },
                "contractAddress": {
                    "type": "string",
                    "description": "Contract address (if applicable)",
                },
                "abi": {
                    "type": "string",
                    "description": "Contract ABI JSON (if applicable)",
                },
                "includeGasEstimation": {
                    "type": "boolean",
                    "description": "Include gas estimation logic",
                    "default": True,
                },
                "includeTxPreview": {
                    "type": "boolean",
                    "description": "Include transaction preview UI",
                    "default": True,
                },
            },
            "required": ["transactionType"],
        },
    ),
    Tool(
        name="farcaster_configure_chains",
        description="Configure blockchain networks for wallet integration",
        inputSchema={
            "type": "object",
            "properties": {
                "mainnet": {
                    "type": "boolean",
                    "description": "Include Ethereum mainnet",
                    "default": True,
                },
                "base": {
                    "type": "boolean",
                    "description": "Include Base network",
                    "default": True,
                },
                "optimism": {
                    "type": "boolean",
                    "description": "Include Optimism",
                    "default": False,
                },
                "polygon": {
                    "type": "boolean",
                    "description": "Include Polygon",
                    "default": False,
                },
                "customRpcs": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "chainId": {"type": "number"},
                            "name": {"type": "string"},
                            "rpcUrl": {"type": "string"},
                            "explorerUrl": {"type": "string"},
                        },
                        "required": ["chainId", "name", "rpcUrl"],
                    },
                    "description": "Custom RPC configurations",
                },
            },
        },
    ),
    Tool(
        name="farcaster_handle_wallet_events",
        description="Generate wallet event handling code (connection, disconnection, chain changes)",
        inputSchema={
            "type": "object",
            "properties": {
                "events": {
                    "type": "array",
                    "items": {
                        "type": "string",
                        "enum": ["connect", "disconnect", "accountsChanged", "chainChanged"],
                    },
                    "description": "Wallet events to handle",
                    "default": ["connect", "disconnect", "chainChanged"],
                },
                "includeErrorHandling": {
                    "type": "boolean",
                    "description": "Include comprehensive error handling",
                    "default": True,
                },
                "includeLogging": {
                    "type": "boolean",
                    "description": "Include event logging for debugging",
                    "default": True,
                },
            },
        },
    ),
]
