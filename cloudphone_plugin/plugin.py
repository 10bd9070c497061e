"""Host Plugin Entry.

Registers the CloudPhone tools with an agent host runtime. The host supplies
a logger, its nested configuration and a `register_tool` hook; this module
resolves the plugin config once and hands the host one never-raising
execute callable per tool.

Usage:
    from cloudphone_plugin import plugin

    plugin.register(api)
"""

from collections.abc import Mapping
from typing import Any, Protocol

from cloudphone_config.settings import DEFAULT_BASE_URL, PluginConfig
from cloudphone_tools import ToolExecutor, ToolRegistry, build_registry
from cloudphone_tools.executor import HostExecute

PLUGIN_ID = "cloudphone"

CONFIG_SCHEMA: dict[str, Any] = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "baseUrl": {"type": "string"},
        "token": {"type": "string"},
        "timeout": {"type": "number"},
    },
}


class HostLogger(Protocol):
    def info(self, msg: str, *args: Any) -> None: ...

    def warn(self, msg: str, *args: Any) -> None: ...

    def error(self, msg: str, *args: Any) -> None: ...


class HostApi(Protocol):
    """Subset of the host runtime API used by this plugin."""

    logger: HostLogger
    config: Mapping[str, Any]

    def register_tool(
        self,
        *,
        name: str,
        description: str,
        parameters: dict[str, Any],
        execute: HostExecute,
    ) -> None: ...


def resolve_config(host_config: Mapping[str, Any] | None) -> PluginConfig:
    """Read this plugin's entry from the host configuration.

    Looks up `plugins.entries.cloudphone.config`; any missing level yields
    the empty config (all defaults).
    """
    plugins = (host_config or {}).get("plugins") or {}
    entries = plugins.get("entries") or {}
    entry = entries.get(PLUGIN_ID) or {}
    return PluginConfig.model_validate(entry.get("config") or {})


def register(api: HostApi, registry: ToolRegistry | None = None) -> ToolExecutor:
    """Register every tool with the host.

    Args:
        api: Host runtime API
        registry: Tools to register (defaults to build_registry())

    Returns:
        The executor bound to the resolved config
    """
    config = resolve_config(api.config)
    registry = registry if registry is not None else build_registry()
    executor = ToolExecutor(config)

    api.logger.info(
        f"[{PLUGIN_ID}] loaded, baseUrl={config.base_url or f'(default {DEFAULT_BASE_URL})'}"
    )

    for tool in registry:
        api.register_tool(
            name=tool.name,
            description=tool.description,
            parameters=tool.parameters,
            execute=executor.bind(tool),
        )
        api.logger.info(f"[{PLUGIN_ID}] registered tool: {tool.name}")

    return executor
