# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Typed parameters for every tool.

Each tool binds its raw MCP argument mapping to one of these models before
its handler runs. Field aliases are the camelCase names clients send;
defaults mirror the ``default`` entries of the tool's input schema.
Unrecognised arguments are ignored.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Framework = Literal["react", "vanilla", "vue", "next"]
UIFramework = Literal["react", "vue", "vanilla"]


class ToolParams(BaseModel):
    """Base for tool parameter models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


# ============================================================================
# Project setup
# ============================================================================


class CreateMiniAppParams(ToolParams):
    name: str = Field(..., min_length=1)
    home_url: str = Field(..., min_length=1)
    framework: Framework = "react"
    include_wallet: bool = True
    include_auth: bool = True


class GenerateManifestParams(ToolParams):
    name: str = Field(..., min_length=1)
    home_url: str = Field(..., min_length=1)
    icon_url: str = Field(..., min_length=1)
    image_url: str | None = None
    description: str | None = None
    categories: list[str] = Field(default_factory=list)
    button_title: str = "Open App"


class ValidateManifestParams(ToolParams):
    manifest_url: str | None = None
    manifest_content: str | None = None


class SetupDevEnvironmentParams(ToolParams):
    package_manager: Literal["npm", "yarn", "pnpm"] = "npm"
    typescript: bool = True
    eslint: bool = True


# ============================================================================
# Authentication
# ============================================================================


class ImplementSiwfParams(ToolParams):
    framework: Framework
    backend: Literal["express", "nextjs-api", "fastify", "none"] = "none"
    use_quick_auth: bool = True


class GenerateAuthFlowParams(ToolParams):
    session_storage: Literal["localStorage", "sessionStorage", "cookies", "memory"] = "localStorage"
    include_profile: bool = True
    auto_sign_in: bool = True


class ValidateUserParams(ToolParams):
    fid: int = Field(..., ge=0)
    signature: str | None = None
    message: str | None = None
    require_verification: bool = False


class GetUserProfileParams(ToolParams):
    fid: int = Field(..., ge=0)
    include_following: bool = False
    include_verifications: bool = True


# ============================================================================
# Wallet
# ============================================================================


class CustomRpc(ToolParams):
    chain_id: int
    name: str
    rpc_url: str
    explorer_url: str | None = None


class SetupWalletIntegrationParams(ToolParams):
    framework: UIFramework
    chains: list[str] = Field(default_factory=lambda: ["ethereum", "base", "optimism"])
    include_connectors: list[str] = Field(default_factory=lambda: ["miniapp", "injected", "walletconnect"])


class GenerateTransactionParams(ToolParams):
    transaction_type: Literal["single", "batch", "erc20-transfer", "nft-mint", "contract-call"]
    contract_address: str | None = None
    abi: str | None = None
    include_gas_estimation: bool = True
    include_tx_preview: bool = True


class ConfigureChainsParams(ToolParams):
    mainnet: bool = True
    base: bool = True
    optimism: bool = False
    polygon: bool = False
    custom_rpcs: list[CustomRpc] = Field(default_factory=list)


class HandleWalletEventsParams(ToolParams):
    events: list[Literal["connect", "disconnect", "accountsChanged", "chainChanged"]] = Field(
        default_factory=lambda: ["connect", "disconnect", "chainChanged"]
    )
    include_error_handling: bool = True
    include_logging: bool = True


# ============================================================================
# SDK integration
# ============================================================================


class InitializeSdkParams(ToolParams):
    framework: Framework
    features: list[Literal["auth", "wallet", "notifications", "navigation", "sharing"]] = Field(
        default_factory=lambda: ["auth", "wallet"]
    )
    auto_ready: bool = True


class HandleSdkEventsParams(ToolParams):
    events: list[Literal["ready", "close", "back", "share", "notification"]] = Field(
        default_factory=lambda: ["ready", "close", "back"]
    )
    include_error_handling: bool = True


class ImplementNotificationsParams(ToolParams):
    notification_types: list[Literal["system", "user-action", "reminder", "update"]] = Field(
        default_factory=lambda: ["user-action", "reminder"]
    )
    rate_limiting: bool = True
    token_management: bool = True


class GenerateNavigationParams(ToolParams):
    navigation_type: Literal["stack", "tabs", "drawer", "simple"]
    include_back_button: bool = True
    mobile_optimized: bool = True


class ImplementSharingParams(ToolParams):
    share_types: list[Literal["cast", "frame", "direct-link", "embed"]] = Field(
        default_factory=lambda: ["cast", "direct-link"]
    )
    include_metadata: bool = True
    customize_share_text: bool = True


# ============================================================================
# Development
# ============================================================================


class StartDevServerParams(ToolParams):
    port: int = Field(default=3000, ge=1, le=65535)
    https: bool = True
    tunnel: bool = False
    hot_reload: bool = True


class GenerateTestSuiteParams(ToolParams):
    test_framework: Literal["jest", "vitest", "playwright", "cypress"]
    test_types: list[Literal["unit", "integration", "e2e", "sdk"]] = Field(
        default_factory=lambda: ["unit", "integration"]
    )
    mock_sdk: bool = Field(default=True, alias="mockSDK")
    test_auth: bool = True


class DebugMiniAppParams(ToolParams):
    debug_level: Literal["basic", "verbose", "production"]
    include_sdk_debug: bool = Field(default=True, alias="includeSDKDebug")
    error_reporting: bool = True
    performance_monitoring: bool = False


class TargetMetrics(ToolParams):
    load_time: float | None = Field(default=None, ge=0)
    bundle_size: float | None = Field(default=None, ge=0)


class OptimizePerformanceParams(ToolParams):
    optimizations: list[
        Literal["lazy-loading", "code-splitting", "image-optimization", "caching", "bundle-analysis"]
    ] = Field(default_factory=lambda: ["lazy-loading", "image-optimization"])
    target_metrics: TargetMetrics | None = None


class GenerateErrorBoundaryParams(ToolParams):
    framework: UIFramework
    include_reporting: bool = True
    fallback_ui: Literal["simple", "detailed", "retry", "custom"] = Field(default="retry", alias="fallbackUI")


# ============================================================================
# Publishing
# ============================================================================


class PublishMiniAppParams(ToolParams):
    hosting_method: Literal["self-hosted", "farcaster-hosted", "vercel", "netlify"]
    domain: str = Field(..., min_length=1)
    deployment_target: Literal["production", "staging", "preview"] = "production"
    verify_domain: bool = True


class GenerateShareLinkParams(ToolParams):
    app_url: str = Field(..., min_length=1)
    share_context: Literal["direct", "cast", "frame", "embed"]
    custom_text: str | None = None
    include_preview: bool = True


class SetupAnalyticsParams(ToolParams):
    analytics_provider: Literal["farcaster-native", "google-analytics", "mixpanel", "posthog", "custom"]
    tracking_events: list[Literal["app-open", "user-auth", "wallet-connect", "transaction", "share", "error"]] = Field(
        default_factory=lambda: ["app-open", "user-auth", "wallet-connect"]
    )
    privacy_compliant: bool = True


class EnvironmentVariable(ToolParams):
    name: str = Field(..., min_length=1)
    description: str | None = None
    required: bool = False


class GenerateDeploymentScriptParams(ToolParams):
    platform: Literal["vercel", "netlify", "aws", "gcp", "azure", "custom"]
    build_command: str = "npm run build"
    environment_variables: list[EnvironmentVariable] = Field(default_factory=list)
    include_ci: bool = Field(default=False, alias="includeCI")


class ValidateDeploymentParams(ToolParams):
    app_url: str = Field(..., min_length=1)
    manifest_url: str | None = None
    checks: list[Literal["manifest-valid", "https-required", "domain-verified", "icons-accessible", "performance"]] = (
        Field(default_factory=lambda: ["manifest-valid", "https-required", "icons-accessible"])
    )


# ============================================================================
# Knowledge
# ============================================================================

KnowledgeCategoryName = Literal["core-concepts", "authentication", "wallet-integration", "best-practices"]


class GetKnowledgeParams(ToolParams):
    category: Literal["core-concepts", "authentication", "wallet-integration", "best-practices", "all"]
    topic: str | None = None
    tag: str | None = None


class SearchKnowledgeParams(ToolParams):
    query: str = Field(..., min_length=1)
    categories: list[KnowledgeCategoryName] | None = None


class ListTopicsParams(ToolParams):
    format: Literal["simple", "detailed"] = "simple"
