# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Development handlers: dev server, tests, debugging, performance and error boundaries."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ...core.exceptions import UnknownToolInDomainException
from ..params import (
    DebugMiniAppParams,
    GenerateErrorBoundaryParams,
    GenerateTestSuiteParams,
    OptimizePerformanceParams,
    StartDevServerParams,
)
from ._utils import CHECK, CROSS, WARN, bullets, code_block, join_blocks, mark, numbered, to_json

# ============================================================================
# farcaster_start_dev_server
# ============================================================================


def _dev_vite_config(p: StartDevServerParams) -> str:
    https = (
        "    https: {\n"
        "      key: readFileSync(resolve(__dirname, 'localhost-key.pem')),\n"
        "      cert: readFileSync(resolve(__dirname, 'localhost.pem')),\n"
        "    },\n"
        if p.https
        else ""
    )
    hmr = "    hmr: {\n      overlay: true,\n    },\n" if p.hot_reload else "    hmr: false,\n"
    return f"""import {{ defineConfig }} from 'vite';
import react from '@vitejs/plugin-react';
import {{ readFileSync }} from 'fs';
import {{ resolve }} from 'path';

export default defineConfig({{
  plugins: [react()],
  server: {{
    port: {p.port},
    host: true,
{https}{hmr}  }},
  build: {{
    sourcemap: true,
    rollupOptions: {{
      output: {{
        manualChunks: {{
          vendor: ['react', 'react-dom'],
          sdk: ['@farcaster/miniapp-sdk'],
          wagmi: ['wagmi', '@tanstack/react-query'],
        }},
      }},
    }},
  }},
}});"""


def _dev_scripts(p: StartDevServerParams) -> dict[str, Any]:
    return {
        "scripts": {
            "dev": f"vite --port {p.port}" + (" --https" if p.https else ""),
            "build": "vite build",
            "preview": "vite preview",
            "tunnel": f"ngrok http {p.port}" if p.tunnel else 'echo "Tunnel not configured"',
            "dev:tunnel": 'concurrently "npm run dev" "npm run tunnel"',
            "type-check": "tsc --noEmit",
            "lint": "eslint src --ext .ts,.tsx,.js,.jsx",
            "lint:fix": "eslint src --ext .ts,.tsx,.js,.jsx --fix",
            "test": "jest",
            "test:watch": "jest --watch",
        }
    }


MKCERT = """# Install mkcert for local HTTPS
brew install mkcert  # macOS
# or
choco install mkcert # Windows

# Create local CA
mkcert -install

# Generate certificates
mkcert localhost 127.0.0.1 ::1"""


def start_dev_server(p: StartDevServerParams) -> str:
    scheme = "https" if p.https else "http"
    if p.https:
        certs = "## 1. HTTPS Certificates (Required for Mini Apps)\n### Generate local certificates:\n" + code_block(
            "bash", MKCERT
        )
    else:
        certs = f"## 1. HTTPS Certificates\n{WARN} HTTPS disabled - some Mini App features may not work"

    tunnel = None
    if p.tunnel:
        tunnel = "## 3. Public Tunnel (for testing)\n" + code_block(
            "bash", "# Install ngrok\nnpm install -g ngrok\n\n# Start dev server with tunnel\nnpm run dev:tunnel"
        )

    return join_blocks(
        "# Development Server Configuration",
        "## Vite Configuration:\n" + code_block("typescript", _dev_vite_config(p)),
        "## Package.json Scripts:\n" + code_block("json", to_json(_dev_scripts(p))),
        certs,
        "## 2. Start Development Server\n"
        + code_block("bash", f"npm run dev\n# Server will start at {scheme}://localhost:{p.port}"),
        tunnel,
        "## 4. Farcaster Testing\n"
        + numbered(
            [
                "Enable Developer Mode in Farcaster settings",
                "Use Developer Tools to test your Mini App",
                "Add your local URL for testing",
            ]
        ),
        "## 5. Environment Variables (.env.local)\n"
        + code_block("env", f"VITE_APP_URL={scheme}://localhost:{p.port}\nVITE_NODE_ENV=development\nVITE_DEBUG=true"),
        "## Features:\n"
        + "\n".join(
            [
                f"{CHECK} Port: {p.port}",
                f"{CHECK} HTTPS enabled" if p.https else f"{CROSS} HTTPS disabled",
                f"{CHECK} Hot reload enabled" if p.hot_reload else f"{CROSS} Hot reload disabled",
                f"{CHECK} Tunnel support" if p.tunnel else f"{CROSS} No tunnel",
            ]
        ),
        "## Development Workflow:\n"
        + numbered(
            [
                "`npm run dev` - Start development server",
                "`npm run type-check` - Check TypeScript",
                "`npm run lint` - Run linting",
                "`npm run test` - Run tests",
                "`npm run build` - Build for production",
            ]
        ),
    )


# ============================================================================
# farcaster_generate_test_suite
# ============================================================================

# framework -> (mock function, install command, config file name, config body)
_TEST_FRAMEWORKS = {
    "jest": (
        "jest.fn",
        "npm install -D jest ts-jest @types/jest @testing-library/react @testing-library/jest-dom jest-environment-jsdom",
        "jest.config.ts",
        """export default {
  preset: 'ts-jest',
  testEnvironment: 'jsdom',
  setupFilesAfterEnv: ['<rootDir>/src/test/setup.ts'],
  moduleNameMapper: { '\\\\.(css)$': 'identity-obj-proxy' },
};""",
    ),
    "vitest": (
        "vi.fn",
        "npm install -D vitest jsdom @testing-library/react @testing-library/jest-dom",
        "vitest.config.ts",
        """import { defineConfig } from 'vitest/config';
import react from '@vitejs/plugin-react';

export default defineConfig({
  plugins: [react()],
  test: {
    environment: 'jsdom',
    setupFiles: ['./src/test/setup.ts'],
    globals: true,
  },
});""",
    ),
    "playwright": (
        "",
        "npm install -D @playwright/test && npx playwright install",
        "playwright.config.ts",
        """import { defineConfig, devices } from '@playwright/test';

export default defineConfig({
  testDir: './e2e',
  use: { baseURL: 'https://localhost:3000', ignoreHTTPSErrors: true },
  // Mini Apps render in a mobile-sized web view
  projects: [{ name: 'mobile', use: { ...devices['iPhone 13'] } }],
  webServer: { command: 'npm run dev', url: 'https://localhost:3000', ignoreHTTPSErrors: true, reuseExistingServer: true },
});""",
    ),
    "cypress": (
        "",
        "npm install -D cypress",
        "cypress.config.ts",
        """import { defineConfig } from 'cypress';

export default defineConfig({
  e2e: {
    baseUrl: 'https://localhost:3000',
    viewportWidth: 424,
    viewportHeight: 695,
  },
});""",
    ),
}


def _sdk_mock(fn: str) -> str:
    module_mock = "vi.mock" if fn == "vi.fn" else "jest.mock"
    header = "import { vi } from 'vitest';\n\n" if fn == "vi.fn" else ""
    return f"""{header}// src/test/setup.ts
{module_mock}('@farcaster/miniapp-sdk', () => ({{
  sdk: {{
    context: Promise.resolve({{ user: {{ fid: 12345, username: 'testuser', displayName: 'Test User' }} }}),
    isInMiniApp: {fn}().mockResolvedValue(true),
    actions: {{
      ready: {fn}().mockResolvedValue(undefined),
      close: {fn}().mockResolvedValue(undefined),
      composeCast: {fn}().mockResolvedValue({{ cast: {{ hash: '0xabc' }} }}),
      openUrl: {fn}(),
    }},
    quickAuth: {{
      getToken: {fn}().mockResolvedValue({{ token: 'test-jwt' }}),
      fetch: {fn}(),
    }},
    wallet: {{ getEthereumProvider: {fn}().mockResolvedValue({{ request: {fn}() }}) }},
    on: {fn}(),
    removeAllListeners: {fn}(),
  }},
}}));"""


def _browser_sdk_stub(framework: str) -> str:
    hook = "await page.addInitScript" if framework == "playwright" else "cy.on('window:before:load', (win) =>"
    if framework == "playwright":
        return f"""// e2e/fixtures.ts: stub the host bridge before the app loads
import {{ test as base }} from '@playwright/test';

export const test = base.extend({{
  page: async ({{ page }}, use) => {{
    {hook}(() => {{
      (window as any).__MINIAPP_TEST__ = {{ user: {{ fid: 12345, username: 'testuser' }} }};
    }});
    await use(page);
  }},
}});"""
    return f"""// cypress/support/e2e.ts: stub the host bridge before the app loads
{hook} {{
  (win as any).__MINIAPP_TEST__ = {{ user: {{ fid: 12345, username: 'testuser' }} }};
}});"""


_UNIT_TEST = """import { render, screen } from '@testing-library/react';
import App from '../App';

describe('App', () => {
  it('shows the loading state before the SDK is ready', () => {
    render(<App />);
    expect(screen.getByText(/loading/i)).toBeInTheDocument();
  });
});"""

_INTEGRATION_TEST = """import { render, screen, waitFor } from '@testing-library/react';
import { sdk } from '@farcaster/miniapp-sdk';
import App from '../App';

describe('App integration', () => {
  it('calls ready() once mounted', async () => {
    render(<App />);
    await waitFor(() => expect(sdk.actions.ready).toHaveBeenCalled());
  });

  it('renders the signed-in user from context', async () => {
    render(<App />);
    expect(await screen.findByText(/testuser/)).toBeInTheDocument();
  });
});"""

_SDK_TEST = """import { sdk } from '@farcaster/miniapp-sdk';
import { shareAsCast } from '../lib/share';

describe('SDK actions', () => {
  it('composes a cast with the app url as embed', async () => {
    await shareAsCast('hello', 'https://example.com');
    expect(sdk.actions.composeCast).toHaveBeenCalledWith({ text: 'hello', embeds: ['https://example.com'] });
  });
});"""

_AUTH_TEST = """import { sdk } from '@farcaster/miniapp-sdk';
import { signInWithFarcaster } from '../lib/auth';

describe('authentication', () => {
  it('returns the Quick Auth token', async () => {
    await expect(signInWithFarcaster()).resolves.toBe('test-jwt');
    expect(sdk.quickAuth.getToken).toHaveBeenCalled();
  });

  it('surfaces sign-in failures', async () => {
    (sdk.quickAuth.getToken as any).mockRejectedValueOnce(new Error('rejected'));
    await expect(signInWithFarcaster()).rejects.toThrow('rejected');
  });
});"""


def _e2e_test(framework: str) -> str:
    if framework == "playwright":
        return """import { expect } from '@playwright/test';
import { test } from './fixtures';

test('app loads and renders the main screen', async ({ page }) => {
  await page.goto('/');
  await expect(page.locator('.mini-app')).toBeVisible();
});

test('manifest is served', async ({ request }) => {
  const res = await request.get('/.well-known/farcaster.json');
  expect(res.ok()).toBeTruthy();
});"""
    if framework == "cypress":
        return """describe('Mini App', () => {
  it('loads and renders the main screen', () => {
    cy.visit('/');
    cy.get('.mini-app').should('be.visible');
  });

  it('serves the manifest', () => {
    cy.request('/.well-known/farcaster.json').its('status').should('eq', 200);
  });
});"""
    return ""


def generate_test_suite(p: GenerateTestSuiteParams) -> str:
    fw = p.test_framework
    mock_fn, install, config_name, config_body = _TEST_FRAMEWORKS[fw]
    browser = fw in ("playwright", "cypress")
    types = list(dict.fromkeys(p.test_types))

    sections: list[str | None] = [
        f"# Test Suite ({fw})",
        "## Install:\n" + code_block("bash", install),
        f"## {config_name}:\n" + code_block("ts", config_body),
    ]
    if p.mock_sdk:
        stub = _browser_sdk_stub(fw) if browser else _sdk_mock(mock_fn)
        sections.append("## SDK Mock:\n" + code_block("ts", stub))

    skipped = []
    for kind in types:
        if kind == "e2e":
            if browser:
                sections.append("## End-to-End Tests:\n" + code_block("ts", _e2e_test(fw)))
            else:
                skipped.append("e2e (use playwright or cypress)")
        elif browser:
            skipped.append(f"{kind} (use jest or vitest)")
        elif kind == "unit":
            sections.append("## Unit Tests:\n" + code_block("tsx", _UNIT_TEST))
        elif kind == "integration":
            sections.append("## Integration Tests:\n" + code_block("tsx", _INTEGRATION_TEST))
        elif kind == "sdk":
            sections.append("## SDK Tests:\n" + code_block("ts", _SDK_TEST))

    if p.test_auth and not browser:
        sections.append("## Authentication Tests:\n" + code_block("ts", _AUTH_TEST))
    if skipped:
        sections.append(f"## Not Generated for {fw}:\n" + bullets(skipped))

    sections.append(
        "## Coverage:\n"
        + "\n".join(
            [
                f"{mark(p.mock_sdk)} SDK mocked",
                f"{mark(p.test_auth)} Authentication flows",
                *(f"{CHECK} {kind} tests" for kind in types),
            ]
        )
    )
    return join_blocks(*sections)


# ============================================================================
# farcaster_debug_mini_app
# ============================================================================

_LOG_LEVELS = {"basic": "info", "verbose": "debug", "production": "error"}


def _debug_logger(p: DebugMiniAppParams) -> str:
    level = _LOG_LEVELS[p.debug_level]
    return f"""const LEVELS = ['debug', 'info', 'warn', 'error'] as const;
type Level = (typeof LEVELS)[number];

const threshold = LEVELS.indexOf('{level}');

export const debug = Object.fromEntries(
  LEVELS.map((level) => [
    level,
    (...args: unknown[]) => {{
      if (LEVELS.indexOf(level) >= threshold) console[level]('[mini-app]', ...args);
    }},
  ]),
) as Record<Level, (...args: unknown[]) => void>;"""


SDK_DEBUG = """import { sdk } from '@farcaster/miniapp-sdk';
import { debug } from './debug';

export async function logSdkState() {
  debug.info('In Mini App:', await sdk.isInMiniApp());
  const context = await sdk.context;
  debug.debug('Context:', context);
  debug.debug('Client:', context?.client);
}

// Trace every SDK action call
for (const [name, fn] of Object.entries(sdk.actions)) {
  (sdk.actions as any)[name] = async (...args: unknown[]) => {
    debug.debug(`sdk.actions.${name}`, args);
    return (fn as any)(...args);
  };
}"""

ERROR_REPORTING = """import { debug } from './debug';

function report(error: unknown, source: string) {
  debug.error(source, error);
  navigator.sendBeacon?.(
    '/api/errors',
    JSON.stringify({
      source,
      message: error instanceof Error ? error.message : String(error),
      stack: error instanceof Error ? error.stack : undefined,
      url: location.href,
    }),
  );
}

window.addEventListener('error', (event) => report(event.error, 'window.error'));
window.addEventListener('unhandledrejection', (event) => report(event.reason, 'unhandledrejection'));"""

PERF_MONITORING = """import { onCLS, onINP, onLCP, onTTFB } from 'web-vitals';
import { debug } from './debug';

const log = (metric: { name: string; value: number }) => debug.info(`[perf] ${metric.name}`, metric.value);

onLCP(log);
onINP(log);
onCLS(log);
onTTFB(log);

// Time from navigation start to sdk.actions.ready()
export function markReady() {
  performance.mark('miniapp-ready');
  debug.info('[perf] ready after', Math.round(performance.now()), 'ms');
}"""


def debug_mini_app(p: DebugMiniAppParams) -> str:
    production_note = None
    if p.debug_level == "production":
        production_note = f"{WARN} Production level logs errors only; keep verbose output out of released builds."
    return join_blocks(
        f"# Debug Utilities ({p.debug_level} level)",
        "## Debug Logger (debug.ts):\n" + code_block("ts", _debug_logger(p)),
        production_note,
        "## SDK Debugging:\n" + code_block("ts", SDK_DEBUG) if p.include_sdk_debug else None,
        "## Error Reporting:\n" + code_block("ts", ERROR_REPORTING) if p.error_reporting else None,
        "## Performance Monitoring:\n" + code_block("ts", PERF_MONITORING) if p.performance_monitoring else None,
        "## Enabled:\n"
        + "\n".join(
            [
                f"{CHECK} Log level: {_LOG_LEVELS[p.debug_level]}",
                f"{mark(p.include_sdk_debug)} SDK debugging",
                f"{mark(p.error_reporting)} Error reporting",
                f"{mark(p.performance_monitoring)} Performance monitoring",
            ]
        ),
        "## Debugging Tips:\n"
        + bullets(
            [
                "Use the Farcaster developer tools preview to load your URL",
                "Check that `sdk.actions.ready()` is called, otherwise the splash screen stays up",
                "Inspect the Network tab for failed manifest or image requests",
            ]
        ),
    )


# ============================================================================
# farcaster_optimize_performance
# ============================================================================

_OPTIMIZATIONS = {
    "lazy-loading": (
        "Lazy Loading",
        "tsx",
        """import { lazy, Suspense } from 'react';

const WalletPanel = lazy(() => import('./WalletPanel'));

export function App() {
  return (
    <Suspense fallback={<div className="skeleton" />}>
      <WalletPanel />
    </Suspense>
  );
}""",
    ),
    "code-splitting": (
        "Code Splitting",
        "ts",
        """// vite.config.ts
build: {
  rollupOptions: {
    output: {
      manualChunks: {
        vendor: ['react', 'react-dom'],
        sdk: ['@farcaster/miniapp-sdk'],
        wallet: ['wagmi', 'viem', '@tanstack/react-query'],
      },
    },
  },
},""",
    ),
    "image-optimization": (
        "Image Optimization",
        "html",
        """<!-- Size images for the 424px web view and defer offscreen ones -->
<img
  src="/images/hero-424.webp"
  srcset="/images/hero-424.webp 1x, /images/hero-848.webp 2x"
  width="424"
  height="283"
  loading="lazy"
  decoding="async"
  alt="Hero"
/>""",
    ),
    "caching": (
        "Caching",
        "ts",
        """import { QueryClient } from '@tanstack/react-query';

export const queryClient = new QueryClient({
  defaultOptions: {
    queries: {
      staleTime: 60_000,
      gcTime: 5 * 60_000,
      refetchOnWindowFocus: false,
    },
  },
});

// Static assets: Cache-Control: public, max-age=31536000, immutable""",
    ),
    "bundle-analysis": (
        "Bundle Analysis",
        "ts",
        """// npm install -D rollup-plugin-visualizer
import { visualizer } from 'rollup-plugin-visualizer';

export default defineConfig({
  plugins: [react(), visualizer({ filename: 'dist/stats.html', gzipSize: true })],
});""",
    ),
}


def _budget_check(load_time: float | None, bundle_size: float | None) -> str:
    lines = []
    if bundle_size is not None:
        lines.append(f"const MAX_BUNDLE_KB = {bundle_size:g};")
    if load_time is not None:
        lines.append(f"const MAX_LOAD_MS = {load_time:g};")
    if load_time is not None:
        lines += [
            "",
            "new PerformanceObserver((list) => {",
            "  const lcp = list.getEntries().at(-1)?.startTime ?? 0;",
            "  if (lcp > MAX_LOAD_MS) console.warn(`LCP ${Math.round(lcp)}ms exceeds ${MAX_LOAD_MS}ms budget`);",
            "}).observe({ type: 'largest-contentful-paint', buffered: true });",
        ]
    if bundle_size is not None:
        lines += [
            "",
            "// build step: fail when the main chunk is over budget",
            "// size-limit config: [{ path: 'dist/assets/*.js', limit: `${MAX_BUNDLE_KB} KB` }]",
        ]
    return "\n".join(lines)


def optimize_performance(p: OptimizePerformanceParams) -> str:
    sections: list[str | None] = ["# Performance Optimization"]
    selected = list(dict.fromkeys(p.optimizations))
    sections.append("## Optimizations Applied:\n" + ("\n".join(f"{CHECK} {o}" for o in selected) or "None"))
    for key in selected:
        title, lang, code = _OPTIMIZATIONS[key]
        sections.append(f"## {title}:\n" + code_block(lang, code))

    metrics = p.target_metrics
    if metrics is not None and (metrics.load_time is not None or metrics.bundle_size is not None):
        targets = []
        if metrics.load_time is not None:
            targets.append(f"Load time: {metrics.load_time:g} ms")
        if metrics.bundle_size is not None:
            targets.append(f"Bundle size: {metrics.bundle_size:g} KB")
        sections.append(
            "## Target Metrics:\n"
            + bullets(targets)
            + "\n\n"
            + code_block("ts", _budget_check(metrics.load_time, metrics.bundle_size))
        )

    sections.append(
        "## Best Practices:\n"
        + bullets(
            [
                "Call `sdk.actions.ready()` as soon as the first screen renders",
                "Avoid layout shift while data loads by using skeletons",
                "Preload the splash and hero images",
            ]
        )
    )
    return join_blocks(*sections)


# ============================================================================
# farcaster_generate_error_boundary
# ============================================================================

_FALLBACKS = {
    "simple": "<div className=\"error-fallback\">Something went wrong.</div>",
    "detailed": """<div className="error-fallback">
          <h2>Something went wrong</h2>
          <pre>{this.state.error?.message}</pre>
          <details>
            <summary>Stack trace</summary>
            <pre>{this.state.error?.stack}</pre>
          </details>
        </div>""",
    "retry": """<div className="error-fallback">
          <h2>Something went wrong</h2>
          <button onClick={this.reset}>Try again</button>
        </div>""",
    "custom": "this.props.fallback ?? <div className=\"error-fallback\">Something went wrong.</div>",
}

REPORT_FN = """function reportError(error: Error, info?: unknown) {
  fetch('/api/errors', {
    method: 'POST',
    headers: { 'Content-Type': 'application/json' },
    body: JSON.stringify({ message: error.message, stack: error.stack, info }),
  }).catch(() => undefined);
}
"""


def _react_boundary(p: GenerateErrorBoundaryParams) -> str:
    report_fn = REPORT_FN + "\n" if p.include_reporting else ""
    report_call = "\n    reportError(error, info.componentStack);" if p.include_reporting else ""
    fallback_prop = "  fallback?: ReactNode;\n" if p.fallback_ui == "custom" else ""
    fallback = _FALLBACKS[p.fallback_ui]
    return f"""import {{ Component, type ErrorInfo, type ReactNode }} from 'react';

{report_fn}type Props = {{
  children: ReactNode;
{fallback_prop}}};

type State = {{ error: Error | null }};

export class ErrorBoundary extends Component<Props, State> {{
  state: State = {{ error: null }};

  static getDerivedStateFromError(error: Error): State {{
    return {{ error }};
  }}

  componentDidCatch(error: Error, info: ErrorInfo) {{
    console.error('ErrorBoundary caught:', error);{report_call}
  }}

  reset = () => this.setState({{ error: null }});

  render() {{
    if (this.state.error) {{
      return (
        {fallback}
      );
    }}
    return this.props.children;
  }}
}}"""


def _vue_boundary(p: GenerateErrorBoundaryParams) -> str:
    report = "\n  reportError(err, info);" if p.include_reporting else ""
    retry = '\n    <button @click="error = null">Try again</button>' if p.fallback_ui == "retry" else ""
    detail = "\n    <pre>{{ error.message }}</pre>" if p.fallback_ui == "detailed" else ""
    slot = '<slot name="fallback" :error="error">' if p.fallback_ui == "custom" else ""
    slot_end = "</slot>" if slot else ""
    report_fn = "\n" + REPORT_FN if p.include_reporting else ""
    return f"""<script setup lang="ts">
import {{ onErrorCaptured, ref }} from 'vue';
{report_fn}
const error = ref<Error | null>(null);

onErrorCaptured((err, _instance, info) => {{
  error.value = err;
  console.error('ErrorBoundary caught:', err);{report}
  return false;
}});
</script>

<template>
  <div v-if="error" class="error-fallback">{slot}
    <h2>Something went wrong</h2>{detail}{retry}{slot_end}
  </div>
  <slot v-else />
</template>"""


def _vanilla_boundary(p: GenerateErrorBoundaryParams) -> str:
    report = "\n  reportError(error);" if p.include_reporting else ""
    retry = "<button onclick=\"location.reload()\">Try again</button>" if p.fallback_ui == "retry" else ""
    detail = "<pre>${error.message}</pre>" if p.fallback_ui == "detailed" else ""
    report_fn = REPORT_FN + "\n" if p.include_reporting else ""
    return f"""{report_fn}export function renderFallback(root: HTMLElement, error: Error) {{
  console.error('Unhandled error:', error);{report}
  root.innerHTML = `<div class="error-fallback"><h2>Something went wrong</h2>{detail}{retry}</div>`;
}}

const root = document.querySelector<HTMLElement>('#app')!;
window.addEventListener('error', (event) => renderFallback(root, event.error));
window.addEventListener('unhandledrejection', (event) => renderFallback(root, event.reason));"""


ERROR_CSS = """.error-fallback {
  padding: 24px;
  text-align: center;
}

.error-fallback button {
  min-height: 44px;
  padding: 0 20px;
  background: #7c65c1;
  color: white;
  border: none;
  border-radius: 6px;
}"""


def generate_error_boundary(p: GenerateErrorBoundaryParams) -> str:
    if p.framework == "react":
        code, lang = _react_boundary(p), "tsx"
        usage = code_block("tsx", "<ErrorBoundary>\n  <App />\n</ErrorBoundary>")
    elif p.framework == "vue":
        code, lang = _vue_boundary(p), "vue"
        usage = code_block("vue", "<ErrorBoundary>\n  <App />\n</ErrorBoundary>")
    else:
        code, lang = _vanilla_boundary(p), "ts"
        usage = None

    return join_blocks(
        f"# Error Boundary ({p.framework})",
        "## Error Boundary:\n" + code_block(lang, code),
        "## Usage:\n" + usage if usage else None,
        "## Styles:\n" + code_block("css", ERROR_CSS),
        "## Features:\n"
        + "\n".join(
            [
                f"{CHECK} Fallback UI: {p.fallback_ui}",
                f"{mark(p.include_reporting)} Error reporting",
            ]
        ),
    )


DEVELOPMENT_HANDLERS: dict[str, Callable[[Any], str]] = {
    "farcaster_start_dev_server": start_dev_server,
    "farcaster_generate_test_suite": generate_test_suite,
    "farcaster_debug_mini_app": debug_mini_app,
    "farcaster_optimize_performance": optimize_performance,
    "farcaster_generate_error_boundary": generate_error_boundary,
}


def handle_development_tool(name: str, params: Any) -> str:
    """Route a development tool to its handler."""
    handler = DEVELOPMENT_HANDLERS.get(name)
    if handler is None:
        raise UnknownToolInDomainException(name, "development")
    return handler(params)
