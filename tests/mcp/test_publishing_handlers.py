"""Tests for farcaster_dev_mcp.mcp.handlers.publishing."""

from __future__ import annotations

import pytest

from farcaster_dev_mcp.core.exceptions import UnknownToolInDomainException
from farcaster_dev_mcp.mcp.handlers._utils import CHECK, CROSS, PENDING
from farcaster_dev_mcp.mcp.handlers.publishing import (
    COMPOSE_URL,
    compose_url,
    deployment_checks,
    generate_deployment_script,
    generate_share_link,
    handle_publishing_tool,
    publish_mini_app,
    setup_analytics,
    validate_deployment,
)
from farcaster_dev_mcp.mcp.params import (
    GenerateDeploymentScriptParams,
    GenerateShareLinkParams,
    PublishMiniAppParams,
    SetupAnalyticsParams,
    ValidateDeploymentParams,
)

# ============================================================================
# publish_mini_app
# ============================================================================


class TestPublishMiniApp:
    """Tests for publishing instructions."""

    def test_domain_normalized(self):
        text = publish_mini_app(PublishMiniAppParams(hostingMethod="vercel", domain="https://my.app/"))

        assert text.startswith("# Publishing Mini App to my.app (production)")
        assert "`https://my.app/.well-known/farcaster.json`" in text
        assert "## Domain Verification:" in text

    @pytest.mark.parametrize(
        "method,marker",
        [
            ("self-hosted", "alias /var/www/miniapp"),
            ("farcaster-hosted", "return 307"),
            ("vercel", '"Access-Control-Allow-Origin"'),
            ("netlify", "[[headers]]"),
        ],
    )
    def test_hosting_config(self, method, marker):
        assert marker in publish_mini_app(PublishMiniAppParams(hostingMethod=method, domain="my.app"))

    def test_preview_without_verification(self):
        text = publish_mini_app(
            PublishMiniAppParams(hostingMethod="netlify", domain="my.app", deploymentTarget="preview", verifyDomain=False)
        )

        assert "preview deployments need their own signed manifest" in text
        assert "## Domain Verification:" not in text
        assert "Account association signed (skipped)" in text


# ============================================================================
# generate_share_link
# ============================================================================


class TestComposeUrl:
    """Tests for composer URL encoding."""

    def test_text_only(self):
        assert compose_url("gm & gn") == f"{COMPOSE_URL}?text=gm%20%26%20gn"

    def test_embed_is_encoded(self):
        url = compose_url("hi", "https://my.app/?a=1")
        assert url == f"{COMPOSE_URL}?text=hi&embeds[]=https%3A%2F%2Fmy.app%2F%3Fa%3D1"


class TestGenerateShareLink:
    """Tests for share link generation."""

    def test_direct(self):
        text = generate_share_link(GenerateShareLinkParams(appUrl="https://my.app", shareContext="direct"))

        assert "## Link:\nhttps://my.app\n" in text
        assert "## Share Text:\nCheck out this Mini App!" in text
        assert '<meta name="fc:frame"' in text

    def test_cast_uses_custom_text(self):
        text = generate_share_link(
            GenerateShareLinkParams(appUrl="https://my.app", shareContext="cast", customText="Play now", includePreview=False)
        )

        assert f"{COMPOSE_URL}?text=Play%20now&embeds[]=https%3A%2F%2Fmy.app" in text
        assert "fc:frame" not in text
        assert 'composeCast({ text: "Play now", embeds: ["https://my.app"] })' in text

    def test_preview_escapes_apostrophe(self):
        params = GenerateShareLinkParams(appUrl="https://my.app", shareContext="direct", customText="Let's go")
        text = generate_share_link(params)
        meta = next(line for line in text.splitlines() if line.startswith('<meta name="fc:frame"'))

        assert '"name":"Let&#39;s go"' in meta
        assert meta.count("'") == 2

    def test_embed_snippet(self):
        text = generate_share_link(GenerateShareLinkParams(appUrl="https://my.app", shareContext="embed"))
        assert '<iframe src="https://my.app"' in text

    def test_deterministic(self):
        params = GenerateShareLinkParams(appUrl="https://my.app", shareContext="frame")
        assert generate_share_link(params) == generate_share_link(params)


# ============================================================================
# setup_analytics
# ============================================================================


class TestSetupAnalytics:
    """Tests for analytics setup."""

    def test_defaults(self):
        text = setup_analytics(SetupAnalyticsParams(analyticsProvider="posthog"))

        assert "npm install posthog-js" in text
        assert "posthog.capture(event, properties);" in text
        assert "import { track } from './analytics';" in text
        assert "trackEvent('app-open'" in text
        assert "import { watchAccount } from '@wagmi/core';" in text
        assert "crypto.subtle.digest('SHA-256'" in text

    def test_hooks_go_through_consent_guard(self):
        text = setup_analytics(SetupAnalyticsParams(analyticsProvider="mixpanel", trackingEvents=["share", "error"]))

        assert "trackEvent('share'" in text
        assert "trackEvent('error'" in text
        assert " track('share'" not in text
        assert "watchAccount" not in text

    def test_without_privacy(self):
        text = setup_analytics(SetupAnalyticsParams(analyticsProvider="farcaster-native", privacyCompliant=False))

        assert "const consented = () => true;" in text
        assert "SHA-256" not in text
        assert "## Install:" not in text

    def test_no_events(self):
        text = setup_analytics(SetupAnalyticsParams(analyticsProvider="custom", trackingEvents=[]))
        assert "No events selected" in text


# ============================================================================
# generate_deployment_script
# ============================================================================


class TestGenerateDeploymentScript:
    """Tests for deployment scripts."""

    @pytest.mark.parametrize(
        "platform,marker",
        [
            ("vercel", "## vercel.json:"),
            ("netlify", "## netlify.toml:"),
            ("aws", "aws s3 sync dist/"),
            ("gcp", "## firebase.json:"),
            ("azure", "## staticwebapp.config.json:"),
            ("custom", "rsync -avz --delete dist/"),
        ],
    )
    def test_platform(self, platform, marker):
        text = generate_deployment_script(GenerateDeploymentScriptParams(platform=platform))

        assert marker in text
        assert "## deploy.sh:" in text
        assert "## CI Workflow" not in text

    def test_custom_build_command(self):
        text = generate_deployment_script(GenerateDeploymentScriptParams(platform="aws", buildCommand="pnpm build"))
        assert "\npnpm build\n" in text

    def test_environment_variables_and_ci(self):
        text = generate_deployment_script(
            GenerateDeploymentScriptParams.model_validate(
                {
                    "platform": "vercel",
                    "includeCI": True,
                    "environmentVariables": [
                        {"name": "API_KEY", "description": "Backend key", "required": True},
                        {"name": "SENTRY_DSN"},
                    ],
                }
            )
        )

        assert "# Backend key\nAPI_KEY=" in text
        assert "# (optional)\nSENTRY_DSN=" in text
        assert "for var in API_KEY; do" in text
        assert "API_KEY: ${{ secrets.API_KEY }}" in text
        assert "Environment variables: 2" in text


# ============================================================================
# validate_deployment
# ============================================================================


class TestDeploymentChecks:
    """Tests for URL-derived deployment checks."""

    def test_https_pass_and_fail(self):
        manifest = "https://my.app/.well-known/farcaster.json"
        assert deployment_checks("https://my.app", manifest, ["https-required"])[0][0] == CHECK
        assert deployment_checks("http://my.app", manifest, ["https-required"])[0][0] == CROSS

    def test_manifest_path_and_host(self):
        wrong_path = deployment_checks("https://my.app", "https://my.app/farcaster.json", ["manifest-valid"])
        wrong_host = deployment_checks(
            "https://my.app", "https://cdn.my.app/.well-known/farcaster.json", ["manifest-valid"]
        )
        ok = deployment_checks("https://my.app", "https://my.app/.well-known/farcaster.json", ["manifest-valid"])

        assert wrong_path[0][0] == CROSS
        assert "differs from app host" in wrong_host[0][2]
        assert ok[0][0] == PENDING

    def test_manual_checks(self):
        rows = deployment_checks(
            "https://my.app", "https://my.app/.well-known/farcaster.json", ["domain-verified", "performance"]
        )
        assert [status for status, _, _ in rows] == [PENDING, PENDING]
        assert "npx lighthouse https://my.app" in rows[1][2]

    def test_duplicates_collapsed(self):
        rows = deployment_checks("https://my.app", "https://my.app/x", ["https-required", "https-required"])
        assert len(rows) == 1


class TestValidateDeployment:
    """Tests for the rendered validation report."""

    def test_default_manifest_url(self):
        text = validate_deployment(ValidateDeploymentParams(appUrl="https://my.app/"))

        assert "**Manifest URL:** https://my.app/.well-known/farcaster.json" in text
        assert "Passed: 1  Failed: 0  Manual: 2" in text

    def test_failure_verdict(self):
        text = validate_deployment(ValidateDeploymentParams(appUrl="http://my.app", checks=["https-required"]))

        assert "Passed: 0  Failed: 1  Manual: 0" in text
        assert "1 check(s) failed" in text

    def test_all_passed(self):
        text = validate_deployment(ValidateDeploymentParams(appUrl="https://my.app", checks=["https-required"]))
        assert "All checks passed." in text


class TestPublishingRouting:
    def test_unknown_tool(self):
        with pytest.raises(UnknownToolInDomainException, match="Unknown publishing tool"):
            handle_publishing_tool("farcaster_nope", ValidateDeploymentParams(appUrl="https://x"))
