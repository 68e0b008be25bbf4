# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Tool registry and router.

The registry maps every ToolName to its descriptor, domain, parameter model
and handler. ``dispatch`` is the single recovery point for tool calls: it
binds arguments, runs the handler and turns every failure into an error
result, so nothing raised by a tool ever reaches the transport.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from mcp.types import CallToolResult, Tool
from pydantic import ValidationError

from ..core.exceptions import (
    ConfigException,
    FarcasterMCPException,
    UnknownToolException,
    ValidationException,
)
from ..core.logging import ToolCallLogger, correlation_context, tool_logger
from ..core.response import error_result, text_result
from ..knowledge import KnowledgeStore
from . import params as P
from .handlers import (
    AUTH_HANDLERS,
    DEVELOPMENT_HANDLERS,
    KNOWLEDGE_HANDLERS,
    PROJECT_SETUP_HANDLERS,
    PUBLISHING_HANDLERS,
    SDK_HANDLERS,
    WALLET_HANDLERS,
    handle_auth_tool,
    handle_development_tool,
    handle_knowledge_tool,
    handle_project_setup_tool,
    handle_publishing_tool,
    handle_sdk_tool,
    handle_wallet_tool,
)
from .names import ToolDomain, ToolName
from .tools import (
    AUTH_TOOLS,
    DEVELOPMENT_TOOLS,
    KNOWLEDGE_TOOLS,
    PROJECT_SETUP_TOOLS,
    PUBLISHING_TOOLS,
    SDK_TOOLS,
    WALLET_TOOLS,
)

logger = logging.getLogger(__name__)

DomainRouter = Callable[[str, Any], str]

PARAMS_MODELS: dict[ToolName, type[P.ToolParams]] = {
    ToolName.CREATE_MINI_APP: P.CreateMiniAppParams,
    ToolName.GENERATE_MANIFEST: P.GenerateManifestParams,
    ToolName.VALIDATE_MANIFEST: P.ValidateManifestParams,
    ToolName.SETUP_DEV_ENVIRONMENT: P.SetupDevEnvironmentParams,
    ToolName.IMPLEMENT_SIWF: P.ImplementSiwfParams,
    ToolName.GENERATE_AUTH_FLOW: P.GenerateAuthFlowParams,
    ToolName.VALIDATE_USER: P.ValidateUserParams,
    ToolName.GET_USER_PROFILE: P.GetUserProfileParams,
    ToolName.SETUP_WALLET_INTEGRATION: P.SetupWalletIntegrationParams,
    ToolName.GENERATE_TRANSACTION: P.GenerateTransactionParams,
    ToolName.CONFIGURE_CHAINS: P.ConfigureChainsParams,
    ToolName.HANDLE_WALLET_EVENTS: P.HandleWalletEventsParams,
    ToolName.INITIALIZE_SDK: P.InitializeSdkParams,
    ToolName.HANDLE_SDK_EVENTS: P.HandleSdkEventsParams,
    ToolName.IMPLEMENT_NOTIFICATIONS: P.ImplementNotificationsParams,
    ToolName.GENERATE_NAVIGATION: P.GenerateNavigationParams,
    ToolName.IMPLEMENT_SHARING: P.ImplementSharingParams,
    ToolName.START_DEV_SERVER: P.StartDevServerParams,
    ToolName.GENERATE_TEST_SUITE: P.GenerateTestSuiteParams,
    ToolName.DEBUG_MINI_APP: P.DebugMiniAppParams,
    ToolName.OPTIMIZE_PERFORMANCE: P.OptimizePerformanceParams,
    ToolName.GENERATE_ERROR_BOUNDARY: P.GenerateErrorBoundaryParams,
    ToolName.PUBLISH_MINI_APP: P.PublishMiniAppParams,
    ToolName.GENERATE_SHARE_LINK: P.GenerateShareLinkParams,
    ToolName.SETUP_ANALYTICS: P.SetupAnalyticsParams,
    ToolName.GENERATE_DEPLOYMENT_SCRIPT: P.GenerateDeploymentScriptParams,
    ToolName.VALIDATE_DEPLOYMENT: P.ValidateDeploymentParams,
    ToolName.GET_KNOWLEDGE: P.GetKnowledgeParams,
    ToolName.SEARCH_KNOWLEDGE: P.SearchKnowledgeParams,
    ToolName.LIST_TOPICS: P.ListTopicsParams,
}


@dataclass(frozen=True)
class ToolEntry:
    """Everything the router needs to serve one tool."""

    name: ToolName
    tool: Tool
    domain: ToolDomain
    params_model: type[P.ToolParams]
    handler: DomainRouter

    def invoke(self, arguments: Mapping[str, Any] | None) -> str:
        return self.handler(self.name.value, bind_arguments(self.params_model, arguments))


def bind_arguments(model: type[P.ToolParams], arguments: Mapping[str, Any] | None) -> P.ToolParams:
    """Validate raw MCP arguments into ``model``.

    Defaults are applied and unknown keys dropped. The first validation
    error is reported, named by the client-facing (camelCase) field.

    Raises:
        ValidationException: If a required argument is missing or a value
            has the wrong type or is outside its enumeration.
    """
    try:
        return model.model_validate(arguments if arguments is not None else {})
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(part) for part in err["loc"])
        if not field:
            raise ValidationException(f"Invalid arguments: {err['msg']}") from e
        if err["type"] == "missing":
            raise ValidationException(f"Missing required argument: {field}", field=field) from e
        raise ValidationException(
            f"Invalid value for '{field}': {err['msg']}",
            field=field,
            value=err.get("input"),
        ) from e


def _loggable(arguments: Any) -> dict[str, Any]:
    return dict(arguments) if isinstance(arguments, Mapping) else {}


class ToolRegistry:
    """Exact-match routing table over the tool catalog."""

    def __init__(self, entries: Iterable[ToolEntry], call_logger: ToolCallLogger | None = None):
        self._entries: dict[str, ToolEntry] = {}
        for entry in entries:
            if entry.name.value in self._entries:
                raise ConfigException(f"Duplicate tool registration: {entry.name.value}")
            self._entries[entry.name.value] = entry
        self.call_logger = call_logger or tool_logger

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    @property
    def names(self) -> list[str]:
        return list(self._entries)

    def get(self, name: str) -> ToolEntry | None:
        return self._entries.get(name)

    def list_tools(self) -> list[Tool]:
        """The tool catalog, in registration order."""
        return [entry.tool for entry in self._entries.values()]

    def dispatch(self, name: str, arguments: Mapping[str, Any] | None = None) -> CallToolResult:
        """Run a tool call and wrap its output.

        Never raises: unknown tools, malformed arguments and handler failures
        all come back as ``isError`` results reading ``Error: <message>``.
        """
        with correlation_context(), self.call_logger.track(name, _loggable(arguments)) as outcome:
            try:
                entry = self._entries.get(name)
                if entry is None:
                    raise UnknownToolException(name)
                text = entry.invoke(arguments)
            except FarcasterMCPException as e:
                outcome["success"] = False
                logger.warning(f"Tool {name} failed: {e.message}")
                return error_result(e.message)
            except Exception as e:  # Intentionally broad: router boundary for unexpected handler errors
                outcome["success"] = False
                logger.exception(f"Unexpected error in tool {name}")
                return error_result(str(e) or e.__class__.__name__)
        return text_result(text)


def _domain_table(
    store: KnowledgeStore,
) -> list[tuple[ToolDomain, list[Tool], Mapping[str, Any], DomainRouter]]:
    return [
        (ToolDomain.PROJECT_SETUP, PROJECT_SETUP_TOOLS, PROJECT_SETUP_HANDLERS, handle_project_setup_tool),
        (ToolDomain.AUTH, AUTH_TOOLS, AUTH_HANDLERS, handle_auth_tool),
        (ToolDomain.WALLET, WALLET_TOOLS, WALLET_HANDLERS, handle_wallet_tool),
        (ToolDomain.SDK, SDK_TOOLS, SDK_HANDLERS, handle_sdk_tool),
        (ToolDomain.DEVELOPMENT, DEVELOPMENT_TOOLS, DEVELOPMENT_HANDLERS, handle_development_tool),
        (ToolDomain.PUBLISHING, PUBLISHING_TOOLS, PUBLISHING_HANDLERS, handle_publishing_tool),
        (ToolDomain.KNOWLEDGE, KNOWLEDGE_TOOLS, KNOWLEDGE_HANDLERS, functools.partial(handle_knowledge_tool, store)),
    ]


def build_registry(store: KnowledgeStore, call_logger: ToolCallLogger | None = None) -> ToolRegistry:
    """Assemble the registry from the per-domain tool and handler tables.

    Raises:
        ConfigException: If a descriptor names a tool outside ToolName, a
            tool has no parameter model or handler, or a ToolName has no
            descriptor.
    """
    entries: list[ToolEntry] = []
    for domain, tools, handlers, router in _domain_table(store):
        for tool in tools:
            name = ToolName.parse(tool.name)
            if name is None:
                raise ConfigException(f"Tool descriptor {tool.name} is not a known tool name")
            if name not in PARAMS_MODELS:
                raise ConfigException(f"No parameter model for {tool.name}")
            if tool.name not in handlers:
                raise ConfigException(f"No {domain.value} handler for {tool.name}")
            entries.append(ToolEntry(name, tool, domain, PARAMS_MODELS[name], router))

    registry = ToolRegistry(entries, call_logger=call_logger)
    missing = [name.value for name in ToolName if name.value not in registry]
    if missing:
        raise ConfigException(f"Tools without descriptors: {', '.join(missing)}")

    logger.debug(f"Tool registry built with {len(registry)} tools")
    return registry
