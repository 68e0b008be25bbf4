"""Tests for farcaster_dev_mcp.mcp.handlers.sdk."""

from __future__ import annotations

import pytest

from farcaster_dev_mcp.core.exceptions import UnknownToolInDomainException
from farcaster_dev_mcp.mcp.handlers.sdk import (
    NOTIFICATION_DAILY_LIMIT,
    NOTIFICATION_MIN_INTERVAL_SECONDS,
    generate_navigation,
    handle_sdk_events,
    handle_sdk_tool,
    implement_notifications,
    implement_sharing,
    initialize_sdk,
)
from farcaster_dev_mcp.mcp.params import (
    GenerateNavigationParams,
    HandleSdkEventsParams,
    ImplementNotificationsParams,
    ImplementSharingParams,
    InitializeSdkParams,
)

# ============================================================================
# initialize_sdk
# ============================================================================


class TestInitializeSdk:
    """Tests for SDK bootstrap code."""

    def test_react_defaults(self):
        text = initialize_sdk(InitializeSdkParams(framework="react"))

        assert text.startswith("# Farcaster SDK Initialization (react)")
        assert "export function useMiniAppSdk()" in text
        assert "useState(false)" in text
        assert "await sdk.actions.ready();" in text
        assert "✅ Auth" in text and "✅ Wallet" in text

    def test_next_uses_react_hook(self):
        assert "useEffect" in initialize_sdk(InitializeSdkParams(framework="next"))

    def test_vue(self):
        text = initialize_sdk(InitializeSdkParams(framework="vue"))
        assert "onMounted(async () => {" in text

    def test_vanilla(self):
        text = initialize_sdk(InitializeSdkParams(framework="vanilla"))
        assert "class MiniAppSdkManager" in text

    def test_features_deduplicated(self):
        text = initialize_sdk(InitializeSdkParams(framework="react", features=["sharing", "sharing"]))

        assert text.count("// Sharing: composeCast opens the cast composer") == 1
        assert text.count("✅ Sharing") == 1

    def test_manual_ready(self):
        text = initialize_sdk(InitializeSdkParams(framework="vanilla", autoReady=False, features=[]))

        assert "autoReady is off" in text
        assert "Hide the splash screen" not in text
        assert "## Features Enabled:\nNone" in text


# ============================================================================
# handle_sdk_events
# ============================================================================


class TestHandleSdkEvents:
    """Tests for SDK event handler code."""

    def test_defaults(self):
        text = handle_sdk_events(HandleSdkEventsParams())

        assert "export async function closeApp" in text
        assert "backNavigationTriggered" in text
        assert "safeSdkCall" in text
        assert "sdk.removeAllListeners();" in text

    def test_notification_and_share(self):
        text = handle_sdk_events(HandleSdkEventsParams(events=["notification", "share"], includeErrorHandling=False))

        assert "notificationsDisabled" in text
        assert "export async function shareCast" in text
        assert "safeSdkCall" not in text

    def test_no_events(self):
        assert "No events selected" in handle_sdk_events(HandleSdkEventsParams(events=[]))


# ============================================================================
# implement_notifications
# ============================================================================


class TestImplementNotifications:
    """Tests for notification code."""

    def test_defaults(self):
        text = implement_notifications(ImplementNotificationsParams())

        assert "export const sendUserActionNotification" in text
        assert "export const sendReminderNotification" in text
        assert "sendSystemNotification" not in text
        assert "parseWebhookEvent" in text
        assert "canNotify(fid)" in text

    def test_limits(self):
        text = implement_notifications(ImplementNotificationsParams())

        assert f"const MIN_INTERVAL_MS = {NOTIFICATION_MIN_INTERVAL_SECONDS} * 1000;" in text
        assert f"const DAILY_LIMIT = {NOTIFICATION_DAILY_LIMIT};" in text
        assert "title.slice(0, 32)" in text
        assert "body.slice(0, 128)" in text

    def test_without_tokens_or_limits(self):
        text = implement_notifications(
            ImplementNotificationsParams(notificationTypes=["update"], rateLimiting=False, tokenManagement=False)
        )

        assert "## Token Management:" not in text
        assert "## Rate Limiting:" not in text
        assert "canNotify" not in text
        assert "notificationDetails: { url: string; token: string }" in text
        assert "export const sendUpdateNotification" in text


# ============================================================================
# generate_navigation / implement_sharing
# ============================================================================


class TestGenerateNavigation:
    """Tests for navigation scaffolding."""

    @pytest.mark.parametrize(
        "nav_type,marker",
        [
            ("stack", "useStackNavigation"),
            ("tabs", "TabNavigation"),
            ("drawer", "DrawerNavigation"),
            ("simple", "useSimpleNavigation"),
        ],
    )
    def test_navigator(self, nav_type, marker):
        text = generate_navigation(GenerateNavigationParams(navigationType=nav_type))

        assert marker in text
        assert "sdk.back.show();" in text
        assert "safe-area-inset-bottom" in text

    def test_minimal(self):
        text = generate_navigation(
            GenerateNavigationParams(navigationType="tabs", includeBackButton=False, mobileOptimized=False)
        )

        assert text.startswith("# Tabs Navigation")
        assert "BackButton" not in text
        assert "safe-area-inset-bottom" not in text


class TestImplementSharing:
    """Tests for sharing helpers."""

    def test_defaults(self):
        text = implement_sharing(ImplementSharingParams())

        assert "shareAsCast" in text
        assert "copyDirectLink" in text
        assert "embedSnippet" not in text
        assert '<meta name="fc:frame"' in text
        assert "buildShareText" in text

    def test_bare(self):
        text = implement_sharing(
            ImplementSharingParams(shareTypes=["embed"], includeMetadata=False, customizeShareText=False)
        )

        assert "embedSnippet" in text
        assert "fc:frame" not in text
        assert "buildShareText" not in text

    def test_no_share_types(self):
        assert "No share types selected" in implement_sharing(ImplementSharingParams(shareTypes=[]))


class TestSdkRouting:
    def test_unknown_tool(self):
        with pytest.raises(UnknownToolInDomainException, match="Unknown SDK tool"):
            handle_sdk_tool("farcaster_nope", HandleSdkEventsParams())
