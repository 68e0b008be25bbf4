"""Tests for farcaster_dev_mcp.mcp.handlers.development."""

from __future__ import annotations

import pytest

from farcaster_dev_mcp.core.exceptions import UnknownToolInDomainException
from farcaster_dev_mcp.mcp.handlers.development import (
    debug_mini_app,
    generate_error_boundary,
    generate_test_suite,
    handle_development_tool,
    optimize_performance,
    start_dev_server,
)
from farcaster_dev_mcp.mcp.params import (
    DebugMiniAppParams,
    GenerateErrorBoundaryParams,
    GenerateTestSuiteParams,
    OptimizePerformanceParams,
    StartDevServerParams,
)

# ============================================================================
# start_dev_server
# ============================================================================


class TestStartDevServer:
    """Tests for dev server configuration."""

    def test_defaults(self):
        text = start_dev_server(StartDevServerParams())

        assert "port: 3000," in text
        assert "localhost-key.pem" in text
        assert '"dev": "vite --port 3000 --https"' in text
        assert "https://localhost:3000" in text
        assert "Public Tunnel" not in text
        assert "overlay: true" in text

    def test_plain_http_with_tunnel(self):
        text = start_dev_server(StartDevServerParams(port=5173, https=False, tunnel=True, hotReload=False))

        assert "HTTPS disabled - some Mini App features may not work" in text
        assert "readFileSync(resolve" not in text
        assert '"tunnel": "ngrok http 5173"' in text
        assert "## 3. Public Tunnel (for testing)" in text
        assert "hmr: false," in text
        assert "VITE_APP_URL=http://localhost:5173" in text


# ============================================================================
# generate_test_suite
# ============================================================================


class TestGenerateTestSuite:
    """Tests for test suite generation."""

    def test_jest_defaults(self):
        text = generate_test_suite(GenerateTestSuiteParams(testFramework="jest"))

        assert "## jest.config.ts:" in text
        assert "setupFilesAfterEnv" in text
        assert "jest.mock('@farcaster/miniapp-sdk'" in text
        assert "## Unit Tests:" in text
        assert "## Integration Tests:" in text
        assert "## Authentication Tests:" in text

    def test_vitest_mock(self):
        text = generate_test_suite(GenerateTestSuiteParams(testFramework="vitest", testTypes=["sdk"]))

        assert "import { vi } from 'vitest';" in text
        assert "vi.fn()" in text
        assert "## SDK Tests:" in text

    def test_e2e_requires_browser_runner(self):
        text = generate_test_suite(GenerateTestSuiteParams(testFramework="vitest", testTypes=["e2e"]))

        assert "## Not Generated for vitest:" in text
        assert "e2e (use playwright or cypress)" in text

    def test_playwright(self):
        text = generate_test_suite(GenerateTestSuiteParams(testFramework="playwright", testTypes=["unit", "e2e"]))

        assert "## End-to-End Tests:" in text
        assert "addInitScript" in text
        assert "unit (use jest or vitest)" in text
        assert "## Authentication Tests:" not in text

    def test_cypress_without_mock(self):
        text = generate_test_suite(GenerateTestSuiteParams(testFramework="cypress", testTypes=["e2e"], mockSDK=False))

        assert "cy.request('/.well-known/farcaster.json')" in text
        assert "## SDK Mock:" not in text


# ============================================================================
# debug_mini_app
# ============================================================================


class TestDebugMiniApp:
    """Tests for debug utilities."""

    @pytest.mark.parametrize("level,threshold", [("basic", "info"), ("verbose", "debug"), ("production", "error")])
    def test_log_level(self, level, threshold):
        text = debug_mini_app(DebugMiniAppParams(debugLevel=level))

        assert f"const threshold = LEVELS.indexOf('{threshold}');" in text
        assert f"Log level: {threshold}" in text

    def test_production_note(self):
        assert "Production level logs errors only" in debug_mini_app(DebugMiniAppParams(debugLevel="production"))
        assert "Production level" not in debug_mini_app(DebugMiniAppParams(debugLevel="basic"))

    def test_sections(self):
        text = debug_mini_app(
            DebugMiniAppParams(
                debugLevel="verbose", includeSDKDebug=False, errorReporting=False, performanceMonitoring=True
            )
        )

        assert "## SDK Debugging:" not in text
        assert "## Error Reporting:" not in text
        assert "## Performance Monitoring:" in text
        assert "web-vitals" in text


# ============================================================================
# optimize_performance
# ============================================================================


class TestOptimizePerformance:
    """Tests for performance recipes."""

    def test_defaults(self):
        text = optimize_performance(OptimizePerformanceParams())

        assert "## Lazy Loading:" in text
        assert "## Image Optimization:" in text
        assert "## Caching:" not in text
        assert "Target Metrics" not in text

    def test_target_metrics(self):
        text = optimize_performance(
            OptimizePerformanceParams.model_validate(
                {"optimizations": ["caching"], "targetMetrics": {"loadTime": 2500, "bundleSize": 250.5}}
            )
        )

        assert "- Load time: 2500 ms" in text
        assert "- Bundle size: 250.5 KB" in text
        assert "const MAX_LOAD_MS = 2500;" in text
        assert "const MAX_BUNDLE_KB = 250.5;" in text

    def test_empty_metrics_ignored(self):
        text = optimize_performance(OptimizePerformanceParams.model_validate({"targetMetrics": {}}))
        assert "Target Metrics" not in text

    def test_no_optimizations(self):
        assert "## Optimizations Applied:\nNone" in optimize_performance(OptimizePerformanceParams(optimizations=[]))


# ============================================================================
# generate_error_boundary
# ============================================================================


class TestGenerateErrorBoundary:
    """Tests for error boundary generation."""

    def test_react_retry(self):
        text = generate_error_boundary(GenerateErrorBoundaryParams(framework="react"))

        assert "export class ErrorBoundary extends Component<Props, State>" in text
        assert "onClick={this.reset}" in text
        assert "reportError(error, info.componentStack);" in text
        assert "Fallback UI: retry" in text

    def test_react_custom_without_reporting(self):
        text = generate_error_boundary(
            GenerateErrorBoundaryParams(framework="react", fallbackUI="custom", includeReporting=False)
        )

        assert "fallback?: ReactNode;" in text
        assert "this.props.fallback" in text
        assert "reportError" not in text

    def test_vue_detailed(self):
        text = generate_error_boundary(GenerateErrorBoundaryParams(framework="vue", fallbackUI="detailed"))

        assert "onErrorCaptured" in text
        assert "<pre>{{ error.message }}</pre>" in text

    def test_vanilla(self):
        text = generate_error_boundary(GenerateErrorBoundaryParams(framework="vanilla", fallbackUI="simple"))

        assert "export function renderFallback" in text
        assert "## Usage:" not in text
        assert "location.reload()" not in text


class TestDevelopmentRouting:
    def test_unknown_tool(self):
        with pytest.raises(UnknownToolInDomainException, match="Unknown development tool"):
            handle_development_tool("farcaster_nope", StartDevServerParams())
