"""Tests for farcaster_dev_mcp.mcp.handlers.project_setup."""

from __future__ import annotations

import json

import pytest

from farcaster_dev_mcp.core.exceptions import UnknownToolInDomainException
from farcaster_dev_mcp.mcp.handlers.project_setup import (
    MANIFEST_PATH,
    build_manifest,
    create_mini_app,
    generate_manifest,
    handle_project_setup_tool,
    inspect_manifest,
    setup_dev_environment,
    validate_manifest,
)
from farcaster_dev_mcp.mcp.params import (
    CreateMiniAppParams,
    GenerateManifestParams,
    SetupDevEnvironmentParams,
    ValidateManifestParams,
)

VALID_MANIFEST = {
    "accountAssociation": {"header": "h", "payload": "p", "signature": "s"},
    "frame": {
        "version": "1",
        "name": "Demo",
        "iconUrl": "https://demo.app/icon.png",
        "homeUrl": "https://demo.app",
        "imageUrl": "https://demo.app/og.png",
    },
}


def _create(**kwargs) -> CreateMiniAppParams:
    return CreateMiniAppParams.model_validate({"name": "My App", "homeUrl": "https://my.app", **kwargs})


# ============================================================================
# create_mini_app
# ============================================================================


class TestCreateMiniApp:
    """Tests for project scaffolding."""

    def test_react_defaults(self):
        text = create_mini_app(_create())

        assert text.startswith("# My App Mini App Project Created Successfully!")
        assert '"name": "my-app"' in text
        assert "### src/App.tsx" in text
        assert "### src/config/wagmi.ts" in text
        assert "await sdk.actions.ready();" in text
        assert f"https://my.app{MANIFEST_PATH}" in text

    def test_without_wallet(self):
        text = create_mini_app(_create(includeWallet=False))

        assert "wagmi" not in text
        assert "Wallet Integration (not included)" in text

    def test_next_layout(self):
        text = create_mini_app(_create(framework="next"))

        assert "### app/page.tsx" in text
        assert "'use client';" in text
        assert '"dev": "next dev"' in text
        assert "vite.config.ts" not in text

    def test_vue_layout(self):
        text = create_mini_app(_create(framework="vue"))

        assert "### src/App.vue" in text
        assert "@vitejs/plugin-vue" in text

    def test_vanilla_layout(self):
        text = create_mini_app(_create(framework="vanilla", includeAuth=False))

        assert "### src/main.ts" in text
        assert "sdk.context" not in text

    def test_embed_metadata(self):
        text = create_mini_app(_create())

        assert '<meta name="fc:miniapp"' in text
        assert '"type":"launch_miniapp"' in text

    def test_deterministic(self):
        assert create_mini_app(_create()) == create_mini_app(_create())


# ============================================================================
# generate_manifest
# ============================================================================


class TestGenerateManifest:
    """Tests for manifest generation."""

    def _params(self, **kwargs) -> GenerateManifestParams:
        return GenerateManifestParams.model_validate(
            {"name": "Demo", "homeUrl": "https://demo.app", "iconUrl": "https://demo.app/icon.png", **kwargs}
        )

    def test_minimal_frame(self):
        frame = build_manifest(self._params())["frame"]

        assert frame == {
            "version": "1",
            "name": "Demo",
            "iconUrl": "https://demo.app/icon.png",
            "homeUrl": "https://demo.app",
            "buttonTitle": "Open App",
        }

    def test_metadata_requires_description(self):
        frame = build_manifest(self._params(categories=["games"]))["frame"]
        assert "metadata" not in frame

        frame = build_manifest(self._params(description="A demo", categories=["games"]))["frame"]
        assert frame["metadata"] == {"description": "A demo", "categories": ["games"]}

    def test_account_association_placeholder(self):
        manifest = build_manifest(self._params())
        assert set(manifest["accountAssociation"]) == {"header", "payload", "signature"}

    def test_output_embeds_manifest(self):
        text = generate_manifest(self._params(imageUrl="https://demo.app/og.png"))

        assert MANIFEST_PATH in text
        assert '"imageUrl": "https://demo.app/og.png"' in text


# ============================================================================
# validate_manifest
# ============================================================================


class TestValidateManifest:
    """Tests for offline manifest validation."""

    def test_valid_content(self):
        report = inspect_manifest(None, json.dumps(VALID_MANIFEST))

        assert report.is_valid
        assert report.warnings == []
        assert report.checks["Frame Structure"] is True

    def test_http_url(self):
        report = inspect_manifest(f"http://demo.app{MANIFEST_PATH}", None)

        assert "Manifest URL must use HTTPS" in report.errors

    def test_wrong_path(self):
        report = inspect_manifest("https://demo.app/manifest.json", None)

        assert f"Manifest must be served at {MANIFEST_PATH}" in report.errors

    def test_invalid_json(self):
        report = inspect_manifest(None, "{not json")

        assert report.errors[0].startswith("Invalid JSON format")

    def test_missing_fields(self):
        report = inspect_manifest(None, json.dumps({"frame": {}}))

        assert "Missing accountAssociation" in report.errors
        assert "Missing frame.name" in report.errors
        assert "Missing frame.iconUrl" in report.errors
        assert "Missing frame.homeUrl" in report.errors

    def test_empty_frame_is_present(self):
        manifest = {"accountAssociation": VALID_MANIFEST["accountAssociation"], "frame": {}}
        report = inspect_manifest(None, json.dumps(manifest))

        assert "Missing frame object" not in report.errors
        assert "Missing frame.name" in report.errors

    def test_miniapp_key_accepted(self):
        manifest = {"accountAssociation": VALID_MANIFEST["accountAssociation"], "miniapp": VALID_MANIFEST["frame"]}
        assert inspect_manifest(None, json.dumps(manifest)).is_valid

    def test_nothing_to_validate(self):
        report = inspect_manifest(None, None)

        assert report.is_valid
        assert "Nothing to validate" in report.warnings[0]

    def test_rendered_status(self):
        valid = validate_manifest(ValidateManifestParams(manifestContent=json.dumps(VALID_MANIFEST)))
        invalid = validate_manifest(ValidateManifestParams(manifestContent="[]"))

        assert "VALID" in valid and "INVALID" not in valid
        assert "INVALID" in invalid
        assert "Manifest must be a JSON object" in invalid


# ============================================================================
# setup_dev_environment
# ============================================================================


class TestSetupDevEnvironment:
    """Tests for dev environment setup."""

    def test_npm_defaults(self):
        text = setup_dev_environment(SetupDevEnvironmentParams())

        assert "npm install --save-dev typescript" in text
        assert "## tsconfig.json:" in text
        assert "## .eslintrc.json:" in text

    def test_pnpm_without_tooling(self):
        text = setup_dev_environment(SetupDevEnvironmentParams(packageManager="pnpm", typescript=False, eslint=False))

        assert "pnpm add @farcaster/miniapp-sdk" in text
        assert " -D " not in text
        assert "tsconfig.json" not in text
        assert "run lint" not in text


class TestProjectSetupRouting:
    def test_unknown_tool(self):
        with pytest.raises(UnknownToolInDomainException, match="Unknown project setup tool"):
            handle_project_setup_tool("farcaster_nope", SetupDevEnvironmentParams())
