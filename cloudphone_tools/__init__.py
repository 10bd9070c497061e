"""Cloudphone Tool System.

Tool interface, ordered registry and the executor adapter that shields the
host runtime from tool failures.
"""

from cloudphone_tools.base import ContentItem, Tool, ToolMetadata, ToolResult
from cloudphone_tools.executor import ToolExecutor
from cloudphone_tools.registry import ToolRegistry

__all__ = [
    "ContentItem",
    "Tool",
    "ToolExecutor",
    "ToolMetadata",
    "ToolResult",
    "ToolRegistry",
    "build_registry",
]


def build_registry(client=None) -> ToolRegistry:
    """Build the default registry: echo, then get_device_connection_link."""
    from cloudphone_tools.adapters.cloudphone import register_cloudphone_tools

    registry = ToolRegistry()
    register_cloudphone_tools(registry, client=client)
    return registry
