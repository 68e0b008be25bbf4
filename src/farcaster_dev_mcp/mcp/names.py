# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Closed set of tool names the server answers to."""

from __future__ import annotations

from enum import Enum


class ToolDomain(str, Enum):
    PROJECT_SETUP = "project setup"
    AUTH = "auth"
    WALLET = "wallet"
    SDK = "SDK"
    DEVELOPMENT = "development"
    PUBLISHING = "publishing"
    KNOWLEDGE = "knowledge"


class ToolName(str, Enum):
    """Every tool in the catalog, in ``tools/list`` order."""

    # Project setup
    CREATE_MINI_APP = "farcaster_create_mini_app"
    GENERATE_MANIFEST = "farcaster_generate_manifest"
    VALIDATE_MANIFEST = "farcaster_validate_manifest"
    SETUP_DEV_ENVIRONMENT = "farcaster_setup_dev_environment"

    # Authentication
    IMPLEMENT_SIWF = "farcaster_implement_siwf"
    GENERATE_AUTH_FLOW = "farcaster_generate_auth_flow"
    VALIDATE_USER = "farcaster_validate_user"
    GET_USER_PROFILE = "farcaster_get_user_profile"

    # Wallet
    SETUP_WALLET_INTEGRATION = "farcaster_setup_wallet_integration"
    GENERATE_TRANSACTION = "farcaster_generate_transaction"
    CONFIGURE_CHAINS = "farcaster_configure_chains"
    HANDLE_WALLET_EVENTS = "farcaster_handle_wallet_events"

    # SDK
    INITIALIZE_SDK = "farcaster_initialize_sdk"
    HANDLE_SDK_EVENTS = "farcaster_handle_sdk_events"
    IMPLEMENT_NOTIFICATIONS = "farcaster_implement_notifications"
    GENERATE_NAVIGATION = "farcaster_generate_navigation"
    IMPLEMENT_SHARING = "farcaster_implement_sharing"

    # Development
    START_DEV_SERVER = "farcaster_start_dev_server"
    GENERATE_TEST_SUITE = "farcaster_generate_test_suite"
    DEBUG_MINI_APP = "farcaster_debug_mini_app"
    OPTIMIZE_PERFORMANCE = "farcaster_optimize_performance"
    GENERATE_ERROR_BOUNDARY = "farcaster_generate_error_boundary"

    # Publishing
    PUBLISH_MINI_APP = "farcaster_publish_mini_app"
    GENERATE_SHARE_LINK = "farcaster_generate_share_link"
    SETUP_ANALYTICS = "farcaster_setup_analytics"
    GENERATE_DEPLOYMENT_SCRIPT = "farcaster_generate_deployment_script"
    VALIDATE_DEPLOYMENT = "farcaster_validate_deployment"

    # Knowledge
    GET_KNOWLEDGE = "farcaster_get_knowledge"
    SEARCH_KNOWLEDGE = "farcaster_search_knowledge"
    LIST_TOPICS = "farcaster_list_topics"

    @classmethod
    def parse(cls, name: str) -> ToolName | None:
        """Exact-match lookup; None for anything outside the catalog."""
        try:
            return cls(name)
        except ValueError:
            return None
