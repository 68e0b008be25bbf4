# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Mini App SDK handlers: initialization, events, notifications, navigation and sharing."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ...core.exceptions import UnknownToolInDomainException
from ..params import (
    GenerateNavigationParams,
    HandleSdkEventsParams,
    ImplementNotificationsParams,
    ImplementSharingParams,
    InitializeSdkParams,
)
from ._utils import CHECK, CROSS, WARN, bullets, code_block, indent, join_blocks, mark, numbered, pascal_case

# Host clients accept one notification per token every 30 seconds and 100 per day
NOTIFICATION_MIN_INTERVAL_SECONDS = 30
NOTIFICATION_DAILY_LIMIT = 100

# ============================================================================
# farcaster_initialize_sdk
# ============================================================================

_FEATURE_LISTENERS = {
    "auth": "// Authentication: the signed-in user is part of the context\nconst user = context?.user;",
    "wallet": "// Wallet: EIP-1193 provider exposed by the host\nconst provider = await sdk.wallet.getEthereumProvider();",
    "notifications": (
        "// Notifications: fired when the user enables or disables them\n"
        "sdk.on('notificationsEnabled', ({ notificationDetails }) => {\n"
        "  console.log('Notifications enabled:', notificationDetails);\n"
        "});"
    ),
    "navigation": "// Navigation: let the host back gesture drive browser history\nawait sdk.back.enableWebNavigation();",
    "sharing": "// Sharing: composeCast opens the cast composer\nconst share = (text: string) => sdk.actions.composeCast({ text });",
}

_FEATURE_METHODS = {
    "auth": "// Authentication\nconst { token } = await sdk.quickAuth.getToken();\nconst user = (await sdk.context).user;",
    "wallet": "// Wallet integration\nconst provider = await sdk.wallet.getEthereumProvider();",
    "notifications": "// Notifications\nawait sdk.actions.addMiniApp(); // prompts the user and yields notification details",
    "navigation": "// Navigation\nawait sdk.back.enableWebNavigation();\nsdk.back.show();",
    "sharing": "// Sharing\nawait sdk.actions.composeCast({ text: 'Check this out', embeds: [location.href] });",
}


def _setup_body(features: list[str], auto_ready: bool) -> str:
    parts = ["const context = await sdk.context;"]
    parts += [_FEATURE_LISTENERS[f] for f in features]
    if auto_ready:
        parts.append("// Hide the splash screen once the UI is rendered\nawait sdk.actions.ready();")
    return "\n\n".join(parts)


def _react_init(p: InitializeSdkParams) -> str:
    body = indent(_setup_body(p.features, p.auto_ready), 8)
    return f"""import {{ useEffect, useState }} from 'react';
import {{ sdk }} from '@farcaster/miniapp-sdk';

export function useMiniAppSdk() {{
  const [isReady, setIsReady] = useState(false);
  const [error, setError] = useState<string | null>(null);

  useEffect(() => {{
    const init = async () => {{
      try {{
{body}

        setIsReady(true);
      }} catch (err) {{
        setError(err instanceof Error ? err.message : 'SDK initialization failed');
      }}
    }};

    init();
    return () => {{
      sdk.removeAllListeners();
    }};
  }}, []);

  return {{ sdk, isReady, error }};
}}"""


def _vue_init(p: InitializeSdkParams) -> str:
    body = indent(_setup_body(p.features, p.auto_ready), 6)
    return f"""import {{ onMounted, onUnmounted, ref }} from 'vue';
import {{ sdk }} from '@farcaster/miniapp-sdk';

export function useMiniAppSdk() {{
  const isReady = ref(false);
  const error = ref<string | null>(null);

  onMounted(async () => {{
    try {{
{body}

      isReady.value = true;
    }} catch (err) {{
      error.value = err instanceof Error ? err.message : 'SDK initialization failed';
    }}
  }});

  onUnmounted(() => sdk.removeAllListeners());

  return {{ sdk, isReady, error }};
}}"""


def _vanilla_init(p: InitializeSdkParams) -> str:
    body = indent(_setup_body(p.features, p.auto_ready), 6)
    return f"""import {{ sdk }} from '@farcaster/miniapp-sdk';

class MiniAppSdkManager {{
  private ready = false;

  async initialize() {{
    try {{
{body}

      this.ready = true;
      console.log('SDK is ready');
    }} catch (error) {{
      console.error('SDK initialization failed:', error);
      throw error;
    }}
  }}

  isReady() {{
    return this.ready;
  }}
}}

export const sdkManager = new MiniAppSdkManager();
sdkManager.initialize();"""


_USAGE = {
    "react": """export default function App() {
  const { isReady, error } = useMiniAppSdk();

  if (error) return <div>Error: {error}</div>;
  if (!isReady) return <div>Loading Mini App...</div>;

  return <main className="mini-app">{/* Your app content */}</main>;
}""",
    "vue": """<script setup lang="ts">
import { useMiniAppSdk } from './useMiniAppSdk';
const { isReady, error } = useMiniAppSdk();
</script>

<template>
  <div v-if="error">Error: {{ error }}</div>
  <div v-else-if="!isReady">Loading Mini App...</div>
  <main v-else class="mini-app"><!-- Your app content --></main>
</template>""",
    "vanilla": """await sdkManager.initialize();
document.querySelector('#app')!.classList.remove('loading');""",
}


def initialize_sdk(p: InitializeSdkParams) -> str:
    features = list(dict.fromkeys(p.features))
    bound = p.model_copy(update={"features": features})
    if p.framework in ("react", "next"):
        code, usage_lang, usage = _react_init(bound), "tsx", _USAGE["react"]
    elif p.framework == "vue":
        code, usage_lang, usage = _vue_init(bound), "vue", _USAGE["vue"]
    else:
        code, usage_lang, usage = _vanilla_init(bound), "ts", _USAGE["vanilla"]

    methods = ["// Core actions", "await sdk.actions.ready();", "await sdk.actions.close();", "await sdk.actions.openUrl(url);"]
    methods_block = "\n".join(methods) + "".join("\n\n" + _FEATURE_METHODS[f] for f in features)

    ready_note = None
    if not p.auto_ready:
        ready_note = (
            f"{WARN} autoReady is off: call `sdk.actions.ready()` yourself once the first screen is rendered, "
            "otherwise the splash screen never hides."
        )

    return join_blocks(
        f"# Farcaster SDK Initialization ({p.framework})",
        "## Features Enabled:\n" + ("\n".join(f"{CHECK} {f.capitalize()}" for f in features) or "None"),
        "## SDK Initialization Code:\n" + code_block("tsx" if p.framework in ("react", "next") else "ts", code),
        ready_note,
        "## Usage:\n" + code_block(usage_lang, usage),
        "## SDK Methods Available:\n" + code_block("ts", methods_block),
        "## Best Practices:\n"
        + bullets(
            [
                "Always call `ready()` after the app has rendered",
                "Handle SDK errors gracefully",
                "Remove event listeners on cleanup",
                "Test in a Farcaster client environment",
            ]
        ),
    )


# ============================================================================
# farcaster_handle_sdk_events
# ============================================================================

_SDK_EVENT_CODE = {
    "ready": "// ready: signal the host that the first screen is rendered\nawait sdk.actions.ready();",
    "close": (
        "// close: persist state before dismissing the Mini App\n"
        "export async function closeApp(saveState?: () => Promise<void>) {\n"
        "  await saveState?.();\n"
        "  await sdk.actions.close();\n"
        "}"
    ),
    "back": (
        "// back: route the host back button through history\n"
        "await sdk.back.enableWebNavigation();\n"
        "sdk.on('backNavigationTriggered', () => {\n"
        "  if (history.length > 1) history.back();\n"
        "  else sdk.actions.close();\n"
        "});"
    ),
    "share": (
        "// share: cast composer results\n"
        "export async function shareCast(text: string, embeds: string[] = []) {\n"
        "  const result = await sdk.actions.composeCast({ text, embeds: embeds.slice(0, 2) as [] | [string] | [string, string] });\n"
        "  return result?.cast ?? null; // null when the user cancels\n"
        "}"
    ),
    "notification": (
        "// notification: the user toggled notifications for this app\n"
        "sdk.on('notificationsEnabled', ({ notificationDetails }) => {\n"
        "  saveNotificationToken(notificationDetails);\n"
        "});\n"
        "sdk.on('notificationsDisabled', () => {\n"
        "  clearNotificationToken();\n"
        "});"
    ),
}

SDK_ERROR_HANDLING = """export async function safeSdkCall<T>(label: string, action: () => Promise<T>): Promise<T | undefined> {
  try {
    return await action();
  } catch (error) {
    console.error(`SDK ${label} failed:`, error);
    if (!(await sdk.isInMiniApp())) {
      console.warn('Not running inside a Farcaster client; SDK actions are unavailable');
    }
    return undefined;
  }
}

// Usage
await safeSdkCall('ready', () => sdk.actions.ready());"""


def handle_sdk_events(p: HandleSdkEventsParams) -> str:
    events = list(dict.fromkeys(p.events))
    code = "\n\n".join(["import { sdk } from '@farcaster/miniapp-sdk';", *(_SDK_EVENT_CODE[e] for e in events)])
    return join_blocks(
        "# SDK Event Handling",
        "## Events Handled:\n" + ("\n".join(f"{CHECK} {e}" for e in events) or f"{WARN} No events selected."),
        "## Event Handlers:\n" + code_block("ts", code),
        "## Error Handling:\n" + code_block("ts", SDK_ERROR_HANDLING) if p.include_error_handling else None,
        "## Cleanup:\n" + code_block("ts", "// Remove every listener when the view unmounts\nsdk.removeAllListeners();"),
    )


# ============================================================================
# farcaster_implement_notifications
# ============================================================================

_NOTIFICATION_TEMPLATES = {
    "system": ("System", "Scheduled maintenance", "The app will be briefly unavailable tonight."),
    "user-action": ("UserAction", "Someone interacted with you", "Open the app to see what happened."),
    "reminder": ("Reminder", "Don't forget!", "Your daily reward is waiting."),
    "update": ("Update", "New features available", "Check out what's new in the app."),
}

TOKEN_STORE = """// Store tokens delivered to your webhook (miniapp_added / notifications_enabled)
type NotificationDetails = { url: string; token: string };

const tokens = new Map<number, NotificationDetails>(); // fid -> details; use a database in production

export function saveToken(fid: number, details: NotificationDetails) {
  tokens.set(fid, details);
}

export function removeToken(fid: number) {
  tokens.delete(fid);
}

export function getToken(fid: number) {
  return tokens.get(fid);
}"""

WEBHOOK = """import { parseWebhookEvent, verifyAppKeyWithNeynar } from '@farcaster/miniapp-node';

export async function POST(request: Request) {
  const data = await parseWebhookEvent(await request.json(), verifyAppKeyWithNeynar);
  const { fid, event } = data;

  switch (event.event) {
    case 'miniapp_added':
    case 'notifications_enabled':
      if (event.notificationDetails) saveToken(fid, event.notificationDetails);
      break;
    case 'miniapp_removed':
    case 'notifications_disabled':
      removeToken(fid);
      break;
  }
  return Response.json({ success: true });
}"""


def _rate_limiter() -> str:
    return f"""const MIN_INTERVAL_MS = {NOTIFICATION_MIN_INTERVAL_SECONDS} * 1000;
const DAILY_LIMIT = {NOTIFICATION_DAILY_LIMIT};
const history = new Map<number, number[]>(); // fid -> send timestamps

export function canNotify(fid: number): boolean {{
  const now = Date.now();
  const sent = (history.get(fid) ?? []).filter((t) => now - t < 24 * 60 * 60 * 1000);
  history.set(fid, sent);
  if (sent.length >= DAILY_LIMIT) return false;
  const last = sent[sent.length - 1];
  return last === undefined || now - last >= MIN_INTERVAL_MS;
}}

export function recordNotification(fid: number) {{
  history.get(fid)?.push(Date.now()) ?? history.set(fid, [Date.now()]);
}}"""


def _sender(p: ImplementNotificationsParams) -> str:
    guard = "  if (!canNotify(fid)) return { sent: false, reason: 'rate_limited' };\n" if p.rate_limiting else ""
    record = "    recordNotification(fid);\n" if p.rate_limiting else ""
    lookup = (
        "  const details = getToken(fid);\n  if (!details) return { sent: false, reason: 'no_token' };\n"
        if p.token_management
        else "  const details = notificationDetails; // supply { url, token } from your own storage\n"
    )
    helpers = []
    for kind in dict.fromkeys(p.notification_types):
        name, title, body = _NOTIFICATION_TEMPLATES[kind]
        helpers.append(
            f"export const send{name}Notification = (fid: number, targetUrl: string) =>\n"
            f"  sendNotification(fid, {{ title: '{title}', body: '{body}', targetUrl }});"
        )
    signature = (
        "export async function sendNotification(fid: number, { title, body, targetUrl }: NotificationInput)"
        if p.token_management
        else "export async function sendNotification(\n  fid: number,\n  { title, body, targetUrl }: NotificationInput,\n"
        "  notificationDetails: { url: string; token: string },\n)"
    )
    return f"""type NotificationInput = {{ title: string; body: string; targetUrl: string }};

{signature} {{
{guard}{lookup}
  const res = await fetch(details.url, {{
    method: 'POST',
    headers: {{ 'Content-Type': 'application/json' }},
    body: JSON.stringify({{
      notificationId: `${{fid}}-${{Date.now()}}`, // stable id lets clients deduplicate
      title: title.slice(0, 32),
      body: body.slice(0, 128),
      targetUrl,
      tokens: [details.token],
    }}),
  }});

  if (res.ok) {{
{record}    return {{ sent: true }};
  }}
  return {{ sent: false, reason: `http_${{res.status}}` }};
}}

""" + "\n\n".join(helpers)


def implement_notifications(p: ImplementNotificationsParams) -> str:
    types = list(dict.fromkeys(p.notification_types))
    return join_blocks(
        "# Mini App Notifications",
        "## Notification Types:\n" + ("\n".join(f"{CHECK} {t}" for t in types) or f"{WARN} No notification types selected."),
        "## Token Management:\n" + code_block("ts", TOKEN_STORE) + "\n\n## Webhook Endpoint:\n" + code_block("ts", WEBHOOK)
        if p.token_management
        else None,
        "## Rate Limiting:\n"
        + f"Clients accept at most 1 notification per {NOTIFICATION_MIN_INTERVAL_SECONDS} seconds "
        + f"and {NOTIFICATION_DAILY_LIMIT} per day for each token.\n\n"
        + code_block("ts", _rate_limiter())
        if p.rate_limiting
        else None,
        "## Sending Notifications:\n" + code_block("ts", _sender(p)),
        "## Features:\n"
        + "\n".join(
            [
                f"{mark(p.token_management)} Token management",
                f"{mark(p.rate_limiting)} Rate limiting",
                f"{CHECK} Title and body truncation (32 / 128 characters)",
            ]
        ),
        "## Next Steps:\n"
        + numbered(
            [
                "Set `webhookUrl` in your farcaster.json manifest",
                "Persist notification tokens in a database",
                "Prompt users with `sdk.actions.addMiniApp()`",
            ]
        ),
    )


# ============================================================================
# farcaster_generate_navigation
# ============================================================================

BACK_BUTTON = """import { sdk } from '@farcaster/miniapp-sdk';

export function BackButton({ onBack }: { onBack: () => void }) {
  useEffect(() => {
    sdk.back.onback = onBack;
    sdk.back.show();
    return () => {
      sdk.back.hide();
    };
  }, [onBack]);

  return (
    <button className="nav-back" onClick={onBack} aria-label="Back">
      ←
    </button>
  );
}"""

_NAVIGATORS = {
    "stack": """import { useState, useCallback } from 'react';

export function useStackNavigation<T extends string>(initial: T) {
  const [stack, setStack] = useState<T[]>([initial]);

  const push = useCallback((screen: T) => setStack((s) => [...s, screen]), []);
  const pop = useCallback(() => setStack((s) => (s.length > 1 ? s.slice(0, -1) : s)), []);

  return { current: stack[stack.length - 1], canGoBack: stack.length > 1, push, pop };
}""",
    "tabs": """import { useState } from 'react';

export function TabNavigation({ tabs }: { tabs: { id: string; label: string; content: React.ReactNode }[] }) {
  const [active, setActive] = useState(tabs[0]?.id);

  return (
    <div className="tabs">
      <div className="tab-panel">{tabs.find((t) => t.id === active)?.content}</div>
      <nav className="tab-bar">
        {tabs.map((tab) => (
          <button key={tab.id} className={tab.id === active ? 'active' : ''} onClick={() => setActive(tab.id)}>
            {tab.label}
          </button>
        ))}
      </nav>
    </div>
  );
}""",
    "drawer": """import { useState } from 'react';

export function DrawerNavigation({ items, onSelect }: { items: string[]; onSelect: (item: string) => void }) {
  const [open, setOpen] = useState(false);

  return (
    <>
      <button className="drawer-toggle" onClick={() => setOpen(true)} aria-label="Open menu">☰</button>
      {open && <div className="drawer-backdrop" onClick={() => setOpen(false)} />}
      <aside className={`drawer ${open ? 'open' : ''}`}>
        {items.map((item) => (
          <button key={item} onClick={() => { onSelect(item); setOpen(false); }}>{item}</button>
        ))}
      </aside>
    </>
  );
}""",
    "simple": """import { useState } from 'react';

export function useSimpleNavigation<T extends string>(initial: T) {
  const [screen, setScreen] = useState<T>(initial);
  const [previous, setPrevious] = useState<T | null>(null);

  const go = (next: T) => {
    setPrevious(screen);
    setScreen(next);
  };
  const back = () => previous && setScreen(previous);

  return { screen, go, back, canGoBack: previous !== null };
}""",
}

NAV_CSS_BASE = """.nav-back {
  position: absolute;
  top: 12px;
  left: 12px;
  background: none;
  border: none;
  font-size: 20px;
}

.tab-bar {
  display: flex;
  position: fixed;
  bottom: 0;
  width: 100%;
  border-top: 1px solid #e5e5e5;
}

.drawer {
  position: fixed;
  top: 0;
  left: -280px;
  width: 280px;
  height: 100%;
  background: white;
  transition: left 0.2s ease;
}

.drawer.open {
  left: 0;
}"""

NAV_CSS_MOBILE = """
/* Mobile: large touch targets and safe areas */
.tab-bar button,
.drawer button {
  flex: 1;
  min-height: 44px;
  padding-bottom: env(safe-area-inset-bottom);
}

@media (max-width: 424px) {
  .drawer {
    width: 85vw;
  }
}"""


def generate_navigation(p: GenerateNavigationParams) -> str:
    css = NAV_CSS_BASE + (NAV_CSS_MOBILE if p.mobile_optimized else "")
    return join_blocks(
        f"# {pascal_case(p.navigation_type)} Navigation",
        "## Navigation Component:\n" + code_block("tsx", _NAVIGATORS[p.navigation_type]),
        "## Back Button (host integrated):\n" + code_block("tsx", "import { useEffect } from 'react';\n" + BACK_BUTTON)
        if p.include_back_button
        else None,
        "## Styles:\n" + code_block("css", css),
        "## Features:\n"
        + "\n".join(
            [
                f"{CHECK} {p.navigation_type} navigation",
                f"{mark(p.include_back_button)} Back button",
                f"{mark(p.mobile_optimized)} Mobile optimization",
            ]
        ),
    )


# ============================================================================
# farcaster_implement_sharing
# ============================================================================

_SHARE_CODE = {
    "cast": """export async function shareAsCast(text: string, url = window.location.href) {
  const result = await sdk.actions.composeCast({ text, embeds: [url] });
  return result?.cast?.hash ?? null;
}""",
    "frame": """// Any page that serves fc:frame meta renders as an embed card when cast
export async function shareFrame(frameUrl: string, text = '') {
  return sdk.actions.composeCast({ text, embeds: [frameUrl] });
}""",
    "direct-link": """export async function copyDirectLink(url = window.location.href) {
  await navigator.clipboard.writeText(url);
  return url;
}""",
    "embed": """export function embedSnippet(url: string) {
  return `<iframe src="${url}" width="424" height="695" style="border:0"></iframe>`;
}""",
}


def _share_metadata() -> str:
    return """<!-- Embed metadata: what shared links render as in a feed -->
<meta name="fc:frame" content='{
  "version": "1",
  "imageUrl": "https://your-app.com/og-image.png",
  "button": {
    "title": "Open App",
    "action": { "type": "launch_frame", "name": "My Mini App", "url": "https://your-app.com" }
  }
}' />
<meta property="og:title" content="My Mini App" />
<meta property="og:image" content="https://your-app.com/og-image.png" />"""


SHARE_TEXT = """export function buildShareText(context: { achievement?: string; score?: number }) {
  if (context.achievement) return `I just unlocked ${context.achievement}! 🎉`;
  if (context.score !== undefined) return `I scored ${context.score}. Can you beat it?`;
  return 'Check out this Mini App!';
}"""


def implement_sharing(p: ImplementSharingParams) -> str:
    types = list(dict.fromkeys(p.share_types))
    code = "\n\n".join(["import { sdk } from '@farcaster/miniapp-sdk';", *(_SHARE_CODE[t] for t in types)])
    return join_blocks(
        "# Sharing Implementation",
        "## Share Types:\n" + "\n".join(f"{CHECK} {t}" for t in types) if types else f"{CROSS} No share types selected.",
        "## Share Functions:\n" + code_block("ts", code),
        "## Share Metadata:\n" + code_block("html", _share_metadata()) if p.include_metadata else None,
        "## Custom Share Text:\n" + code_block("ts", SHARE_TEXT) if p.customize_share_text else None,
        "## Best Practices:\n"
        + bullets(
            [
                "Keep the embed image at a 3:2 aspect ratio",
                "Limit casts to two embeds",
                "Deep link back into the relevant screen",
            ]
        ),
    )


SDK_HANDLERS: dict[str, Callable[[Any], str]] = {
    "farcaster_initialize_sdk": initialize_sdk,
    "farcaster_handle_sdk_events": handle_sdk_events,
    "farcaster_implement_notifications": implement_notifications,
    "farcaster_generate_navigation": generate_navigation,
    "farcaster_implement_sharing": implement_sharing,
}


def handle_sdk_tool(name: str, params: Any) -> str:
    """Route an SDK tool to its handler."""
    handler = SDK_HANDLERS.get(name)
    if handler is None:
        raise UnknownToolInDomainException(name, "SDK")
    return handler(params)
