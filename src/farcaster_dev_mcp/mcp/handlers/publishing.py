# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Publishing handlers: hosting, share links, analytics, deployment and pre-launch checks.

Nothing here touches the network. Deployment checks are derived from the
URLs alone; anything that needs a live request is listed as a manual step
with the command to run.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from urllib.parse import quote, urlsplit

from ...core.exceptions import UnknownToolInDomainException
from ..params import (
    GenerateDeploymentScriptParams,
    GenerateShareLinkParams,
    PublishMiniAppParams,
    SetupAnalyticsParams,
    ValidateDeploymentParams,
)
from ._utils import (
    CHECK,
    CROSS,
    PENDING,
    WARN,
    bullets,
    code_block,
    join_blocks,
    mark,
    meta_content,
    numbered,
    to_json,
)
from .project_setup import MANIFEST_PATH

COMPOSE_URL = "https://farcaster.xyz/~/compose"
DEFAULT_SHARE_TEXT = "Check out this Mini App!"


def _bare_domain(domain: str) -> str:
    """``https://app.example.com/`` -> ``app.example.com``."""
    domain = domain.strip()
    if "://" in domain:
        domain = urlsplit(domain).netloc
    return domain.strip("/")


# ============================================================================
# farcaster_publish_mini_app
# ============================================================================

_HOSTING = {
    "self-hosted": (
        "Serve the manifest from your own web server.",
        "nginx",
        f"""location = {MANIFEST_PATH} {{
    default_type application/json;
    add_header Access-Control-Allow-Origin *;
    alias /var/www/miniapp/.well-known/farcaster.json;
}}""",
    ),
    "farcaster-hosted": (
        "Farcaster hosts the manifest; your domain redirects to it.",
        "nginx",
        f"""# Create the hosted manifest in Farcaster developer tools, then redirect:
location = {MANIFEST_PATH} {{
    return 307 https://api.farcaster.xyz/miniapps/hosted-manifest/YOUR_MANIFEST_ID;
}}""",
    ),
    "vercel": (
        "Place the manifest in `public/.well-known/farcaster.json`; Vercel serves it statically.",
        "json",
        to_json(
            {
                "headers": [
                    {
                        "source": MANIFEST_PATH,
                        "headers": [
                            {"key": "Content-Type", "value": "application/json"},
                            {"key": "Access-Control-Allow-Origin", "value": "*"},
                        ],
                    }
                ]
            }
        ),
    ),
    "netlify": (
        "Place the manifest in `public/.well-known/farcaster.json` and set headers in `netlify.toml`.",
        "toml",
        f"""[[headers]]
  for = "{MANIFEST_PATH}"
  [headers.values]
    Content-Type = "application/json"
    Access-Control-Allow-Origin = "*\"""",
    ),
}


def publish_mini_app(p: PublishMiniAppParams) -> str:
    domain = _bare_domain(p.domain)
    summary, lang, config = _HOSTING[p.hosting_method]
    manifest_url = f"https://{domain}{MANIFEST_PATH}"

    verification = None
    if p.verify_domain:
        verification = "## Domain Verification:\n" + numbered(
            [
                "Open Developer Tools in a Farcaster client and choose the manifest tool",
                f"Enter `{domain}` and sign with your Farcaster account",
                "Copy the generated `accountAssociation` (header, payload, signature) into the manifest",
                f"Confirm the signed payload domain is exactly `{domain}`",
            ]
        )

    target_note = None
    if p.deployment_target != "production":
        target_note = (
            f"{WARN} {p.deployment_target} deployments need their own signed manifest: "
            "the account association is bound to one exact domain, so preview URLs that change per build "
            "cannot be verified."
        )

    return join_blocks(
        f"# Publishing Mini App to {domain} ({p.deployment_target})",
        f"## Hosting: {p.hosting_method}\n{summary}\n\n" + code_block(lang, config),
        "## Manifest Location:\n" + f"`{manifest_url}`",
        target_note,
        verification,
        "## Publishing Checklist:\n"
        + "\n".join(
            [
                f"{PENDING} Manifest reachable at {manifest_url}",
                f"{PENDING} `frame.homeUrl` points to https://{domain}",
                f"{mark(p.verify_domain)} Account association signed" + ("" if p.verify_domain else " (skipped)"),
                f"{PENDING} Icon (1024x1024 PNG) and splash image reachable",
                f"{PENDING} `fc:frame` meta tag on the home page",
            ]
        ),
        "## Next Steps:\n"
        + numbered(
            [
                "Deploy the app and the manifest",
                "Validate with farcaster_validate_deployment",
                "Share the app URL in a cast to test the embed",
            ]
        ),
    )


# ============================================================================
# farcaster_generate_share_link
# ============================================================================


def compose_url(text: str, embed: str | None = None) -> str:
    """Build a cast composer URL with ``text`` and an optional embed, URL-encoded."""
    url = f"{COMPOSE_URL}?text={quote(text, safe='')}"
    if embed:
        url += f"&embeds[]={quote(embed, safe='')}"
    return url


def _embed_meta(app_url: str, text: str) -> str:
    embed = {
        "version": "1",
        "imageUrl": f"{app_url.rstrip('/')}/og-image.png",
        "button": {
            "title": "Open App",
            "action": {"type": "launch_frame", "name": text[:32], "url": app_url},
        },
    }
    return f"<meta name=\"fc:frame\" content='{meta_content(embed)}' />"


def generate_share_link(p: GenerateShareLinkParams) -> str:
    text = p.custom_text or DEFAULT_SHARE_TEXT
    if p.share_context == "direct":
        link = p.app_url
        how = "Share the app URL directly; Farcaster clients render it as an embed card."
    elif p.share_context == "cast":
        link = compose_url(text, p.app_url)
        how = "Opens the cast composer with the text and the app as an embed."
    elif p.share_context == "frame":
        link = compose_url(text, p.app_url)
        how = "Casts the app URL so it renders as a launchable frame using its `fc:frame` meta tag."
    else:
        link = compose_url(text, p.app_url)
        how = "Embed the app elsewhere and offer the composer link for casting."

    embed_snippet = None
    if p.share_context == "embed":
        embed_snippet = "## Embed Code:\n" + code_block(
            "html", f'<iframe src="{p.app_url}" width="424" height="695" style="border:0"></iframe>'
        )

    return join_blocks(
        f"# Share Link ({p.share_context})",
        f"## Link:\n{link}",
        how,
        "## Share Text:\n" + text,
        embed_snippet,
        "## Preview Metadata:\n" + code_block("html", _embed_meta(p.app_url, text)) if p.include_preview else None,
        "## In-App Sharing:\n"
        + code_block(
            "ts",
            "import { sdk } from '@farcaster/miniapp-sdk';\n\n"
            f"await sdk.actions.composeCast({{ text: {to_json(text)}, embeds: [{to_json(p.app_url)}] }});",
        ),
    )


# ============================================================================
# farcaster_setup_analytics
# ============================================================================

_PROVIDERS = {
    "farcaster-native": (
        None,
        """// Events go to your own endpoint; add/remove/notification events arrive via the manifest webhook
export function track(event: string, properties: Record<string, unknown> = {}) {
  navigator.sendBeacon('/api/analytics', JSON.stringify({ event, properties, ts: Date.now() }));
}""",
    ),
    "google-analytics": (
        "npm install ga-gtag",
        """import { install, gtag } from 'ga-gtag';

install(import.meta.env.VITE_GA_MEASUREMENT_ID);

export function track(event: string, properties: Record<string, unknown> = {}) {
  gtag('event', event.replace(/-/g, '_'), properties);
}""",
    ),
    "mixpanel": (
        "npm install mixpanel-browser",
        """import mixpanel from 'mixpanel-browser';

mixpanel.init(import.meta.env.VITE_MIXPANEL_TOKEN);

export function track(event: string, properties: Record<string, unknown> = {}) {
  mixpanel.track(event, properties);
}""",
    ),
    "posthog": (
        "npm install posthog-js",
        """import posthog from 'posthog-js';

posthog.init(import.meta.env.VITE_POSTHOG_KEY, { api_host: 'https://us.i.posthog.com' });

export function track(event: string, properties: Record<string, unknown> = {}) {
  posthog.capture(event, properties);
}""",
    ),
    "custom": (
        None,
        """const queue: { event: string; properties: Record<string, unknown>; ts: number }[] = [];

export function track(event: string, properties: Record<string, unknown> = {}) {
  queue.push({ event, properties, ts: Date.now() });
  if (queue.length >= 10) flush();
}

export function flush() {
  if (!queue.length) return;
  fetch(import.meta.env.VITE_ANALYTICS_URL, {
    method: 'POST',
    headers: { 'Content-Type': 'application/json' },
    body: JSON.stringify(queue.splice(0)),
    keepalive: true,
  });
}

window.addEventListener('pagehide', flush);""",
    ),
}

_EVENT_HOOKS = {
    "app-open": """// app-open
const context = await sdk.context;
track('app-open', { client: context?.client.clientFid, location: context?.location?.type });""",
    "user-auth": """// user-auth
export const trackSignIn = async (fid: number) => track('user-auth', { fid: await anonymize(fid) });""",
    "wallet-connect": """// wallet-connect
watchAccount(config, {
  onChange(account, previous) {
    if (account.isConnected && !previous.isConnected) {
      track('wallet-connect', { connector: account.connector?.name, chainId: account.chainId });
    }
  },
});""",
    "transaction": """// transaction
export const trackTransaction = (hash: string, chainId: number) => track('transaction', { hash, chainId });""",
    "share": """// share
export const trackShare = (context: string, casted: boolean) => track('share', { context, casted });""",
    "error": """// error
window.addEventListener('error', (e) => track('error', { message: e.message }));""",
}


def _anonymize(privacy: bool) -> str:
    if privacy:
        return """// Never send raw FIDs or addresses; hash them with a per-app salt
const SALT = import.meta.env.VITE_ANALYTICS_SALT;
async function sha256(value: string) {
  const digest = await crypto.subtle.digest('SHA-256', new TextEncoder().encode(SALT + value));
  return Array.from(new Uint8Array(digest), (b) => b.toString(16).padStart(2, '0')).join('');
}
const anonymize = (fid: number) => sha256(String(fid));

// Respect opt-out before anything is sent
const consented = () => localStorage.getItem('analytics-consent') === 'granted';"""
    return "const anonymize = (fid: number) => fid;\nconst consented = () => true;"


def setup_analytics(p: SetupAnalyticsParams) -> str:
    install, provider_code = _PROVIDERS[p.analytics_provider]
    events = list(dict.fromkeys(p.tracking_events))
    imports = ["import { sdk } from '@farcaster/miniapp-sdk';", "import { track } from './analytics';"]
    if "wallet-connect" in events:
        imports += ["import { watchAccount } from '@wagmi/core';", "import { config } from './config/wagmi';"]

    guard = (
        "\n\nfunction trackEvent(event: string, properties: Record<string, unknown> = {}) {\n"
        "  if (consented()) track(event, properties);\n}"
    )
    hooks = "\n\n".join(_EVENT_HOOKS[e].replace("track(", "trackEvent(") for e in events)
    events_code = "\n".join(imports) + "\n\n" + _anonymize(p.privacy_compliant) + guard + "\n\n" + hooks

    return join_blocks(
        f"# Analytics Setup ({p.analytics_provider})",
        "## Install:\n" + code_block("bash", install) if install else None,
        "## Provider (analytics.ts):\n" + code_block("ts", provider_code),
        "## Tracked Events:\n" + ("\n".join(f"{CHECK} {e}" for e in events) or f"{WARN} No events selected."),
        "## Event Tracking:\n" + code_block("ts", events_code),
        "## Privacy:\n"
        + "\n".join(
            [
                f"{mark(p.privacy_compliant)} Consent check before sending",
                f"{mark(p.privacy_compliant)} FIDs hashed before leaving the client",
                f"{CHECK} No message content or signatures recorded",
            ]
        ),
    )


# ============================================================================
# farcaster_generate_deployment_script
# ============================================================================


def _platform_files(platform: str, build_command: str) -> list[tuple[str, str, str]]:
    """Return ``(title, lang, body)`` for each platform file."""
    if platform == "vercel":
        return [
            (
                "vercel.json",
                "json",
                to_json(
                    {
                        "buildCommand": build_command,
                        "outputDirectory": "dist",
                        "headers": [
                            {
                                "source": MANIFEST_PATH,
                                "headers": [{"key": "Access-Control-Allow-Origin", "value": "*"}],
                            }
                        ],
                    }
                ),
            ),
            ("deploy.sh", "bash", "#!/usr/bin/env bash\nset -euo pipefail\n\nnpx vercel deploy --prod"),
        ]
    if platform == "netlify":
        return [
            (
                "netlify.toml",
                "toml",
                f"""[build]
  command = "{build_command}"
  publish = "dist"

[[headers]]
  for = "{MANIFEST_PATH}"
  [headers.values]
    Access-Control-Allow-Origin = "*\"""",
            ),
            ("deploy.sh", "bash", "#!/usr/bin/env bash\nset -euo pipefail\n\nnpx netlify deploy --prod --dir=dist"),
        ]
    if platform == "aws":
        return [
            (
                "deploy.sh",
                "bash",
                f"""#!/usr/bin/env bash
set -euo pipefail

: "${{S3_BUCKET:?S3_BUCKET is required}}"
: "${{CLOUDFRONT_DISTRIBUTION_ID:?CLOUDFRONT_DISTRIBUTION_ID is required}}"

{build_command}
aws s3 sync dist/ "s3://$S3_BUCKET" --delete
aws s3 cp dist{MANIFEST_PATH} "s3://$S3_BUCKET{MANIFEST_PATH}" --content-type application/json
aws cloudfront create-invalidation --distribution-id "$CLOUDFRONT_DISTRIBUTION_ID" --paths "/*\"""",
            )
        ]
    if platform == "gcp":
        return [
            (
                "firebase.json",
                "json",
                to_json(
                    {
                        "hosting": {
                            "public": "dist",
                            "headers": [
                                {
                                    "source": MANIFEST_PATH,
                                    "headers": [{"key": "Access-Control-Allow-Origin", "value": "*"}],
                                }
                            ],
                            "rewrites": [{"source": "**", "destination": "/index.html"}],
                        }
                    }
                ),
            ),
            ("deploy.sh", "bash", f"#!/usr/bin/env bash\nset -euo pipefail\n\n{build_command}\nnpx firebase deploy --only hosting"),
        ]
    if platform == "azure":
        return [
            (
                "staticwebapp.config.json",
                "json",
                to_json(
                    {
                        "navigationFallback": {"rewrite": "/index.html", "exclude": ["/.well-known/*"]},
                        "routes": [{"route": MANIFEST_PATH, "headers": {"Access-Control-Allow-Origin": "*"}}],
                        "mimeTypes": {".json": "application/json"},
                    }
                ),
            ),
            (
                "deploy.sh",
                "bash",
                f"#!/usr/bin/env bash\nset -euo pipefail\n\n{build_command}\n"
                'npx @azure/static-web-apps-cli deploy dist --deployment-token "$AZURE_SWA_TOKEN" --env production',
            ),
        ]
    return [
        (
            "deploy.sh",
            "bash",
            f"""#!/usr/bin/env bash
set -euo pipefail

: "${{DEPLOY_HOST:?DEPLOY_HOST is required}}"
: "${{DEPLOY_PATH:?DEPLOY_PATH is required}}"

{build_command}
rsync -avz --delete dist/ "$DEPLOY_HOST:$DEPLOY_PATH\"""",
        )
    ]


def _env_section(p: GenerateDeploymentScriptParams) -> str | None:
    if not p.environment_variables:
        return None
    example = []
    for var in p.environment_variables:
        note = var.description or ""
        if not var.required:
            note = f"{note} (optional)".strip()
        if note:
            example.append(f"# {note}")
        example.append(f"{var.name}=")
    required = [var.name for var in p.environment_variables if var.required]
    check = None
    if required:
        names = " ".join(required)
        check = (
            "### Required variable check (add to deploy.sh):\n"
            + code_block(
                "bash",
                f'for var in {names}; do\n  [ -n "${{!var:-}}" ] || {{ echo "Missing $var" >&2; exit 1; }}\ndone',
            )
        )
    return join_blocks("## Environment Variables (.env.example):\n" + code_block("env", "\n".join(example)), check)


def _ci_workflow(p: GenerateDeploymentScriptParams) -> str:
    env_lines = "".join(f"\n      {v.name}: ${{{{ secrets.{v.name} }}}}" for v in p.environment_variables)
    env_block = f"\n    env:{env_lines}" if env_lines else ""
    return f"""name: Deploy

on:
  push:
    branches: [main]

jobs:
  deploy:
    runs-on: ubuntu-latest{env_block}
    steps:
      - uses: actions/checkout@v4
      - uses: actions/setup-node@v4
        with:
          node-version: 20
          cache: npm
      - run: npm ci
      - run: npm test --if-present
      - run: bash deploy.sh"""


def generate_deployment_script(p: GenerateDeploymentScriptParams) -> str:
    files = _platform_files(p.platform, p.build_command)
    sections: list[str | None] = [f"# Deployment ({p.platform})"]
    sections += [f"## {title}:\n" + code_block(lang, body) for title, lang, body in files]
    sections.append(_env_section(p))
    if p.include_ci:
        sections.append("## CI Workflow (.github/workflows/deploy.yml):\n" + code_block("yaml", _ci_workflow(p)))
    sections.append(
        "## Summary:\n"
        + "\n".join(
            [
                f"{CHECK} Build command: `{p.build_command}`",
                f"{CHECK} Environment variables: {len(p.environment_variables)}",
                f"{mark(p.include_ci)} Continuous deployment",
            ]
        )
    )
    sections.append(
        "## After Deploying:\n"
        + bullets(
            [
                f"Check that `{MANIFEST_PATH}` is served with a JSON content type",
                "Run farcaster_validate_deployment against the live URL",
            ]
        )
    )
    return join_blocks(*sections)


# ============================================================================
# farcaster_validate_deployment
# ============================================================================


def deployment_checks(app_url: str, manifest_url: str, checks: list[str]) -> list[tuple[str, str, str]]:
    """Return ``(status, check, detail)`` rows for the selected checks."""
    app = urlsplit(app_url)
    manifest = urlsplit(manifest_url)
    rows: list[tuple[str, str, str]] = []
    for check in dict.fromkeys(checks):
        if check == "https-required":
            ok = app.scheme == "https" and manifest.scheme == "https"
            rows.append((mark(ok), check, "App and manifest use HTTPS" if ok else "Mini Apps must be served over HTTPS"))
        elif check == "manifest-valid":
            if manifest.path != MANIFEST_PATH:
                rows.append((CROSS, check, f"Manifest must be served at {MANIFEST_PATH}"))
            elif manifest.netloc != app.netloc:
                rows.append((CROSS, check, f"Manifest host {manifest.netloc} differs from app host {app.netloc}"))
            else:
                rows.append((PENDING, check, f"Fetch and check with farcaster_validate_manifest: `curl -s {manifest_url}`"))
        elif check == "domain-verified":
            rows.append(
                (PENDING, check, f"Decode `accountAssociation.payload` and confirm domain is `{app.hostname or app_url}`")
            )
        elif check == "icons-accessible":
            rows.append((PENDING, check, f"`curl -sI <iconUrl>` from {manifest_url} returns 200 and an image type"))
        elif check == "performance":
            rows.append((PENDING, check, f"`npx lighthouse {app_url} --preset=perf --form-factor=mobile`"))
    return rows


def validate_deployment(p: ValidateDeploymentParams) -> str:
    manifest_url = p.manifest_url or p.app_url.rstrip("/") + MANIFEST_PATH
    rows = deployment_checks(p.app_url, manifest_url, p.checks)
    failed = sum(1 for status, _, _ in rows if status == CROSS)
    manual = sum(1 for status, _, _ in rows if status == PENDING)
    passed = len(rows) - failed - manual

    if failed:
        verdict = f"{CROSS} {failed} check(s) failed. Fix them before publishing."
    elif manual:
        verdict = f"{PENDING} No failures found from the URLs; {manual} check(s) need a live request."
    else:
        verdict = f"{CHECK} All checks passed."

    return join_blocks(
        "# Deployment Validation",
        f"**App URL:** {p.app_url}\n**Manifest URL:** {manifest_url}",
        "## Results:\n" + "\n".join(f"{status} **{check}**: {detail}" for status, check, detail in rows),
        f"## Summary:\nPassed: {passed}  Failed: {failed}  Manual: {manual}\n\n{verdict}",
    )


PUBLISHING_HANDLERS: dict[str, Callable[[Any], str]] = {
    "farcaster_publish_mini_app": publish_mini_app,
    "farcaster_generate_share_link": generate_share_link,
    "farcaster_setup_analytics": setup_analytics,
    "farcaster_generate_deployment_script": generate_deployment_script,
    "farcaster_validate_deployment": validate_deployment,
}


def handle_publishing_tool(name: str, params: Any) -> str:
    """Route a publishing tool to its handler."""
    handler = PUBLISHING_HANDLERS.get(name)
    if handler is None:
        raise UnknownToolInDomainException(name, "publishing")
    return handler(params)
