# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Project setup handlers: scaffolding, manifests and tooling."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from ...core.exceptions import UnknownToolInDomainException
from ..params import (
    CreateMiniAppParams,
    GenerateManifestParams,
    SetupDevEnvironmentParams,
    ValidateManifestParams,
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
    slugify,
    to_json,
)

logger = logging.getLogger(__name__)

MANIFEST_PATH = "/.well-known/farcaster.json"


# ============================================================================
# farcaster_create_mini_app
# ============================================================================


def _package_json(p: CreateMiniAppParams) -> dict[str, Any]:
    next_js = p.framework == "next"
    dependencies: dict[str, str] = {"@farcaster/miniapp-sdk": "^0.1.0"}
    if p.include_wallet:
        dependencies.update(
            {
                "@farcaster/miniapp-wagmi-connector": "^1.0.0",
                "wagmi": "^2.0.0",
                "viem": "^2.0.0",
                "@tanstack/react-query": "^5.0.0",
            }
        )
    if p.framework in ("react", "next"):
        dependencies.update({"react": "^18.0.0", "react-dom": "^18.0.0"})
    if next_js:
        dependencies["next"] = "^14.0.0"
    if p.framework == "vue":
        dependencies["vue"] = "^3.0.0"

    dev_dependencies = {"typescript": "^5.0.0", "eslint": "^8.0.0", "prettier": "^3.0.0"}
    if not next_js:
        dev_dependencies["vite"] = "^5.0.0"
    if p.framework in ("react", "next"):
        dev_dependencies.update({"@types/react": "^18.0.0", "@types/react-dom": "^18.0.0"})
    if p.framework == "react":
        dev_dependencies["@vitejs/plugin-react"] = "^4.0.0"
    if p.framework == "vue":
        dev_dependencies["@vitejs/plugin-vue"] = "^5.0.0"

    return {
        "name": slugify(p.name),
        "version": "0.1.0",
        "private": True,
        "description": f"Farcaster Mini App: {p.name}",
        "type": "module",
        "scripts": {
            "dev": "next dev" if next_js else "vite dev",
            "build": "next build" if next_js else "vite build",
            "start": "next start" if next_js else "vite preview",
            "lint": "eslint src --ext .ts,.tsx,.js,.jsx,.vue",
            "test": "vitest",
        },
        "dependencies": dependencies,
        "devDependencies": dev_dependencies,
    }


def _index_html(p: CreateMiniAppParams, entry: str) -> str:
    embed = {
        "version": "1",
        "imageUrl": f"{p.home_url}/preview.png",
        "button": {
            "title": f"Open {p.name}",
            "action": {"type": "launch_miniapp", "name": p.name, "url": p.home_url},
        },
    }
    embed_json = meta_content(embed)
    return f"""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{p.name}</title>

    <!-- Mini App embed metadata -->
    <meta name="fc:miniapp" content='{embed_json}' />
    <meta name="fc:frame" content='{embed_json}' />
  </head>
  <body>
    <div id="root"></div>
    <script type="module" src="{entry}"></script>
  </body>
</html>"""


def _react_main(p: CreateMiniAppParams) -> str:
    lines = [
        "import React from 'react';",
        "import ReactDOM from 'react-dom/client';",
    ]
    if p.include_wallet:
        lines += [
            "import { WagmiProvider } from 'wagmi';",
            "import { QueryClient, QueryClientProvider } from '@tanstack/react-query';",
            "import { config } from './config/wagmi';",
        ]
    lines += ["import App from './App';", "import './index.css';", ""]
    if p.include_wallet:
        lines += ["const queryClient = new QueryClient();", ""]
        tree = """    <WagmiProvider config={config}>
      <QueryClientProvider client={queryClient}>
        <App />
      </QueryClientProvider>
    </WagmiProvider>"""
    else:
        tree = "    <App />"
    lines += [
        "ReactDOM.createRoot(document.getElementById('root')!).render(",
        "  <React.StrictMode>",
        tree,
        "  </React.StrictMode>",
        ");",
    ]
    return "\n".join(lines)


def _react_app(p: CreateMiniAppParams) -> str:
    imports = ["import { useEffect, useState } from 'react';", "import { sdk } from '@farcaster/miniapp-sdk';"]
    if p.include_wallet:
        imports.append("import { useAccount, useConnect, useDisconnect } from 'wagmi';")

    state = []
    if p.include_auth:
        state.append("  const [user, setUser] = useState<{ fid: number; username?: string } | null>(null);")
    if p.include_wallet:
        state += [
            "  const { isConnected, address } = useAccount();",
            "  const { connect, connectors } = useConnect();",
            "  const { disconnect } = useDisconnect();",
        ]

    effect = [
        "  useEffect(() => {",
        "    const init = async () => {",
    ]
    if p.include_auth:
        effect += [
            "      const context = await sdk.context;",
            "      if (context?.user) setUser(context.user);",
        ]
    effect += [
        "      // Hide the splash screen once the UI is ready",
        "      await sdk.actions.ready();",
        "    };",
        "    init();",
        "  }, []);",
    ]

    body = [
        "  return (",
        '    <div className="app">',
        '      <header className="app-header">',
        f"        <h1>{p.name}</h1>",
    ]
    if p.include_auth:
        body.append("        {user && <p>Welcome, @{user.username ?? user.fid}!</p>}")
    body += ["      </header>", '      <main className="app-main">']
    if p.include_wallet:
        body += [
            '        <div className="wallet-section">',
            "          {isConnected ? (",
            "            <div>",
            "              <p>Connected: {address}</p>",
            "              <button onClick={() => disconnect()}>Disconnect</button>",
            "            </div>",
            "          ) : (",
            "            <button onClick={() => connect({ connector: connectors[0] })}>Connect Wallet</button>",
            "          )}",
            "        </div>",
        ]
    body += [
        '        <div className="content">',
        "          <p>Your Mini App content goes here!</p>",
        "        </div>",
        "      </main>",
        "    </div>",
        "  );",
    ]

    return "\n".join(
        [*imports, "", "function App() {", *state, "", *effect, "", *body, "}", "", "export default App;"]
    )


def _next_page(p: CreateMiniAppParams) -> str:
    app = _react_app(p).replace("function App()", "export default function Page()")
    return "'use client';\n\n" + app.removesuffix("\n\nexport default App;")


def _vue_main(p: CreateMiniAppParams) -> str:
    return """import { createApp } from 'vue';
import { sdk } from '@farcaster/miniapp-sdk';
import App from './App.vue';
import './index.css';

createApp(App).mount('#root');
sdk.actions.ready();"""


def _vue_app(p: CreateMiniAppParams) -> str:
    script = ["import { ref, onMounted } from 'vue';", "import { sdk } from '@farcaster/miniapp-sdk';", ""]
    if p.include_auth:
        script += [
            "const user = ref<{ fid: number; username?: string } | null>(null);",
            "",
            "onMounted(async () => {",
            "  const context = await sdk.context;",
            "  user.value = context?.user ?? null;",
            "});",
        ]
    template = [
        '  <div class="app">',
        '    <header class="app-header">',
        f"      <h1>{p.name}</h1>",
    ]
    if p.include_auth:
        template.append('      <p v-if="user">Welcome, @{{ user.username ?? user.fid }}!</p>')
    template += [
        "    </header>",
        '    <main class="app-main">',
        "      <p>Your Mini App content goes here!</p>",
        "    </main>",
        "  </div>",
    ]
    return "\n".join(['<script setup lang="ts">', *script, "</script>", "", "<template>", *template, "</template>"])


def _vanilla_main(p: CreateMiniAppParams) -> str:
    auth = ""
    if p.include_auth:
        auth = """
  const context = await sdk.context;
  if (context?.user) {
    document.querySelector('#greeting')!.textContent = `Welcome, @${context.user.username ?? context.user.fid}!`;
  }
"""
    return f"""import {{ sdk }} from '@farcaster/miniapp-sdk';
import './index.css';

document.querySelector<HTMLDivElement>('#root')!.innerHTML = `
  <div class="app">
    <header class="app-header">
      <h1>{p.name}</h1>
      <p id="greeting"></p>
    </header>
    <main class="app-main">
      <p>Your Mini App content goes here!</p>
    </main>
  </div>
`;

async function init() {{{auth}
  await sdk.actions.ready();
}}

init();"""


INDEX_CSS = """body {
  margin: 0;
  padding: 0;
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', 'Roboto', sans-serif;
  background-color: #f5f5f5;
}

.app {
  min-height: 100vh;
  max-width: 424px;
  margin: 0 auto;
  background: white;
}

.app-header {
  padding: 20px;
  border-bottom: 1px solid #eee;
  text-align: center;
}

.app-main {
  padding: 20px;
}

.wallet-section {
  margin-bottom: 20px;
  padding: 15px;
  background: #f9f9f9;
  border-radius: 8px;
}

.wallet-section button {
  background: #7c65c1;
  color: white;
  border: none;
  padding: 12px 24px;
  border-radius: 6px;
  cursor: pointer;
  font-size: 16px;
  min-height: 44px;
}

.content {
  text-align: center;
  color: #666;
}"""


WAGMI_CONFIG = """import { http, createConfig } from 'wagmi';
import { base, mainnet } from 'wagmi/chains';
import { farcasterMiniApp } from '@farcaster/miniapp-wagmi-connector';

export const config = createConfig({
  chains: [base, mainnet],
  transports: {
    [base.id]: http(),
    [mainnet.id]: http(),
  },
  connectors: [farcasterMiniApp()],
});"""


def _vite_config(framework: str) -> str:
    plugin = {"react": ("react", "@vitejs/plugin-react"), "vue": ("vue", "@vitejs/plugin-vue")}.get(framework)
    imports = "import { defineConfig } from 'vite';"
    plugins = "[]"
    if plugin:
        imports += f"\nimport {plugin[0]} from '{plugin[1]}';"
        plugins = f"[{plugin[0]}()]"
    return f"""{imports}

export default defineConfig({{
  plugins: {plugins},
  server: {{
    port: 3000,
    host: true,
  }},
  build: {{
    outDir: 'dist',
    sourcemap: true,
  }},
}});"""


def create_mini_app(p: CreateMiniAppParams) -> str:
    """Scaffold a project for the chosen framework."""
    files: list[tuple[str, str, str]] = [("package.json", "json", to_json(_package_json(p)))]

    if p.framework == "next":
        files += [
            ("app/page.tsx", "tsx", _next_page(p)),
            ("app/globals.css", "css", INDEX_CSS),
        ]
    elif p.framework == "react":
        files += [
            ("index.html", "html", _index_html(p, "/src/main.tsx")),
            ("src/main.tsx", "tsx", _react_main(p)),
            ("src/App.tsx", "tsx", _react_app(p)),
            *([("src/config/wagmi.ts", "ts", WAGMI_CONFIG)] if p.include_wallet else []),
            ("src/index.css", "css", INDEX_CSS),
            ("vite.config.ts", "ts", _vite_config("react")),
        ]
    elif p.framework == "vue":
        files += [
            ("index.html", "html", _index_html(p, "/src/main.ts")),
            ("src/main.ts", "ts", _vue_main(p)),
            ("src/App.vue", "vue", _vue_app(p)),
            ("src/index.css", "css", INDEX_CSS),
            ("vite.config.ts", "ts", _vite_config("vue")),
        ]
    else:
        files += [
            ("index.html", "html", _index_html(p, "/src/main.ts")),
            ("src/main.ts", "ts", _vanilla_main(p)),
            ("src/index.css", "css", INDEX_CSS),
            ("vite.config.ts", "ts", _vite_config("vanilla")),
        ]

    file_sections = "\n\n".join(f"### {path}\n{code_block(lang, body)}" for path, lang, body in files)

    next_steps = numbered(
        [
            "Install dependencies: `npm install`",
            "Start development server: `npm run dev`",
            f"Publish a manifest at `{p.home_url.rstrip('/')}{MANIFEST_PATH}`",
            "Preview in the Farcaster developer tools",
            "Deploy to production over HTTPS",
        ]
    )
    features = "\n".join(
        [
            f"{mark(p.include_auth)} Farcaster Authentication" + ("" if p.include_auth else " (not included)"),
            f"{mark(p.include_wallet)} Wallet Integration" + ("" if p.include_wallet else " (not included)"),
            f"{CHECK} Mobile-optimized layout",
            f"{CHECK} TypeScript support",
            f"{CHECK} Development tooling",
        ]
    )

    return join_blocks(
        f"# {p.name} Mini App Project Created Successfully!",
        f"**Framework:** {p.framework}\n**Home URL:** {p.home_url}",
        "## Files Generated:",
        file_sections,
        f"## Next Steps:\n\n{next_steps}",
        f"## Features Included:\n{features}",
    )


# ============================================================================
# farcaster_generate_manifest
# ============================================================================


def build_manifest(p: GenerateManifestParams) -> dict[str, Any]:
    frame: dict[str, Any] = {
        "version": "1",
        "name": p.name,
        "iconUrl": p.icon_url,
        "homeUrl": p.home_url,
    }
    if p.image_url:
        frame["imageUrl"] = p.image_url
    frame["buttonTitle"] = p.button_title
    if p.description:
        metadata: dict[str, Any] = {"description": p.description}
        if p.categories:
            metadata["categories"] = list(p.categories)
        frame["metadata"] = metadata

    return {
        "accountAssociation": {
            "header": "Account association will be generated during deployment",
            "payload": "Domain ownership proof payload",
            "signature": "Cryptographic signature proving domain ownership",
        },
        "frame": frame,
    }


def generate_manifest(p: GenerateManifestParams) -> str:
    manifest = build_manifest(p)
    steps = "\n".join(
        [
            f"1. {CHECK} Create manifest file",
            f"2. {PENDING} Generate account association (requires domain setup)",
            f"3. {PENDING} Deploy to hosting platform",
            f"4. {PENDING} Verify manifest accessibility",
            f"5. {PENDING} Test in Farcaster client",
        ]
    )
    return join_blocks(
        "# Farcaster Mini App Manifest Generated",
        f"## Manifest Content ({MANIFEST_PATH}):",
        code_block("json", to_json(manifest)),
        """## Deployment Instructions:

1. **Self-Hosted**: Place this file at `https://yourdomain.com/.well-known/farcaster.json`

2. **Farcaster-Hosted**:
   - Go to https://farcaster.xyz/~/settings/developer-tools
   - Create a new hosted manifest
   - Upload your manifest content

3. **Verification**:
   - Ensure HTTPS is enabled
   - Test manifest accessibility
   - Generate account association signature""",
        f"## Required Steps:\n\n{steps}",
        "## Account Association:\nThe account association proves you own the domain. Generate it with "
        "Farcaster's developer tools or sign the domain payload with your custody address.",
    )


# ============================================================================
# farcaster_validate_manifest
# ============================================================================


@dataclass
class ManifestReport:
    """Outcome of a manifest validation pass."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    checks: dict[str, bool] = field(
        default_factory=lambda: {
            "Manifest Accessible": False,
            "HTTPS Required": False,
            "Account Association": False,
            "Frame Structure": False,
            "Icon Accessible": False,
            "Home URL Valid": False,
        }
    )

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _check_url(report: ManifestReport, url: str) -> None:
    secure = url.startswith("https://")
    report.checks["Manifest Accessible"] = secure
    report.checks["HTTPS Required"] = secure
    if not secure:
        report.errors.append("Manifest URL must use HTTPS")
    if MANIFEST_PATH not in url:
        report.errors.append(f"Manifest must be served at {MANIFEST_PATH}")


def _check_content(report: ManifestReport, content: str) -> None:
    try:
        manifest = json.loads(content)
    except json.JSONDecodeError as e:
        report.errors.append(f"Invalid JSON format: {e.msg} (line {e.lineno})")
        return
    if not isinstance(manifest, dict):
        report.errors.append("Manifest must be a JSON object")
        return

    if not manifest.get("accountAssociation"):
        report.errors.append("Missing accountAssociation")
    else:
        report.checks["Account Association"] = True

    frame = manifest["frame"] if "frame" in manifest else manifest.get("miniapp")
    if not isinstance(frame, dict):
        report.errors.append("Missing frame object")
        return
    report.checks["Frame Structure"] = True

    if not frame.get("name"):
        report.errors.append("Missing frame.name")

    icon_url = frame.get("iconUrl")
    if not icon_url:
        report.errors.append("Missing frame.iconUrl")
    else:
        report.checks["Icon Accessible"] = str(icon_url).startswith("https://")
        if not report.checks["Icon Accessible"]:
            report.warnings.append("frame.iconUrl should use HTTPS")

    home_url = frame.get("homeUrl")
    if not home_url:
        report.errors.append("Missing frame.homeUrl")
    else:
        report.checks["Home URL Valid"] = str(home_url).startswith("https://")
        if not report.checks["Home URL Valid"]:
            report.warnings.append("frame.homeUrl should use HTTPS")

    if not frame.get("imageUrl"):
        report.warnings.append("No frame.imageUrl set; feeds will show a generic preview")


def inspect_manifest(manifest_url: str | None, manifest_content: str | None) -> ManifestReport:
    """Run URL and content checks without fetching anything."""
    report = ManifestReport()
    if manifest_url:
        _check_url(report, manifest_url)
    if manifest_content:
        _check_content(report, manifest_content)
    if not manifest_url and not manifest_content:
        report.warnings.append("Nothing to validate: provide manifestUrl and/or manifestContent")
    return report


def validate_manifest(p: ValidateManifestParams) -> str:
    report = inspect_manifest(p.manifest_url, p.manifest_content)
    logger.debug(f"Manifest validation: {len(report.errors)} errors, {len(report.warnings)} warnings")
    status = f"{CHECK} VALID" if report.is_valid else f"{CROSS} INVALID"
    checks = "\n".join(f"- {name}: {mark(ok)}" for name, ok in report.checks.items())

    errors = f"## {CROSS} Errors:\n{bullets(report.errors)}" if report.errors else None
    warnings = f"## {WARN} Warnings:\n{bullets(report.warnings)}" if report.warnings else None
    if report.is_valid:
        next_step = f"{CHECK} Your manifest is valid! You can proceed with deployment."
    else:
        next_step = f"{CROSS} Please fix the errors above before deploying your Mini App."

    return join_blocks(
        "# Manifest Validation Results",
        f"## Overall Status: {status}",
        f"## Validation Checks:\n{checks}",
        errors,
        warnings,
        f"## Next Steps:\n{next_step}",
    )


# ============================================================================
# farcaster_setup_dev_environment
# ============================================================================

TSCONFIG = {
    "compilerOptions": {
        "target": "ES2020",
        "useDefineForClassFields": True,
        "lib": ["ES2020", "DOM", "DOM.Iterable"],
        "module": "ESNext",
        "skipLibCheck": True,
        "moduleResolution": "bundler",
        "allowImportingTsExtensions": True,
        "resolveJsonModule": True,
        "isolatedModules": True,
        "noEmit": True,
        "jsx": "react-jsx",
        "strict": True,
        "noUnusedLocals": True,
        "noUnusedParameters": True,
        "noFallthroughCasesInSwitch": True,
    },
    "include": ["src"],
}

ESLINT_CONFIG = {
    "extends": [
        "eslint:recommended",
        "plugin:@typescript-eslint/recommended",
        "plugin:react/recommended",
        "plugin:react-hooks/recommended",
    ],
    "parser": "@typescript-eslint/parser",
    "plugins": ["@typescript-eslint", "react", "react-hooks"],
    "rules": {
        "react/react-in-jsx-scope": "off",
        "@typescript-eslint/no-unused-vars": "error",
        "react-hooks/rules-of-hooks": "error",
        "react-hooks/exhaustive-deps": "warn",
    },
    "settings": {"react": {"version": "detect"}},
}


def setup_dev_environment(p: SetupDevEnvironmentParams) -> str:
    pm = p.package_manager
    add = "npm install" if pm == "npm" else f"{pm} add"
    dev_flag = "--save-dev" if pm == "npm" else "-D"

    dev_deps = []
    if p.typescript:
        dev_deps += ["typescript", "@types/react", "@types/react-dom"]
    if p.eslint:
        dev_deps += [
            "eslint",
            "@typescript-eslint/parser",
            "@typescript-eslint/eslint-plugin",
            "eslint-plugin-react",
            "eslint-plugin-react-hooks",
        ]

    commands = [f"{add} @farcaster/miniapp-sdk wagmi viem @tanstack/react-query"]
    if dev_deps:
        commands.append(f"{add} {dev_flag} {' '.join(dev_deps)}")
    commands += [
        f"{pm} run dev     # Start development server",
        f"{pm} run build   # Build for production",
    ]
    if p.eslint:
        commands.append(f"{pm} run lint    # Run linting")

    return join_blocks(
        "# Development Environment Setup",
        f"## Package Manager: {pm}",
        "## Installation Commands:\n" + code_block("bash", "\n".join(commands)),
        "## tsconfig.json:\n" + code_block("json", to_json(TSCONFIG)) if p.typescript else None,
        "## .eslintrc.json:\n" + code_block("json", to_json(ESLINT_CONFIG)) if p.eslint else None,
        "## Environment Variables (.env):\n"
        + code_block(
            "env",
            "VITE_APP_NAME=Your Mini App\nVITE_HOME_URL=https://yourapp.com\nVITE_CHAIN_ID=8453\nNODE_ENV=development",
        ),
        f"""## Development Workflow:

1. **Start Development Server**: `{pm} run dev`
2. **Expose over HTTPS** for testing in a client: `ngrok http 3000` or `cloudflared tunnel --url http://localhost:3000`
3. **Testing in Farcaster**:
   - Enable Developer Mode in Farcaster
   - Open the Mini App preview tool with your tunnel URL
   - Validate the manifest before sharing""",
        "## Git Setup:\n"
        + code_block(
            "bash",
            'git init\nprintf "node_modules/\\ndist/\\n.env.local\\n" > .gitignore\n'
            'git add .\ngit commit -m "Initial Farcaster Mini App setup"',
        ),
    )


PROJECT_SETUP_HANDLERS: dict[str, Callable[[Any], str]] = {
    "farcaster_create_mini_app": create_mini_app,
    "farcaster_generate_manifest": generate_manifest,
    "farcaster_validate_manifest": validate_manifest,
    "farcaster_setup_dev_environment": setup_dev_environment,
}


def handle_project_setup_tool(name: str, params: Any) -> str:
    """Route a project setup tool to its handler."""
    handler = PROJECT_SETUP_HANDLERS.get(name)
    if handler is None:
        raise UnknownToolInDomainException(name, "project setup")
    return handler(params)
