"""Tool Registry.

Ordered registry: tools are handed to the host in registration order.
"""

from collections.abc import Iterator

from cloudphone_tools.base import Tool


class ToolRegistry:
    """Tool registry with capability-based lookup."""

    def __init__(self):
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Register a tool."""
        self._tools[tool.name] = tool

    def get(self, name: str) -> Tool | None:
        """Get tool by name."""
        return self._tools.get(name)

    def list_tools(self) -> list[Tool]:
        """All tools in registration order."""
        return list(self._tools.values())

    def names(self) -> list[str]:
        return list(self._tools)

    def filter_by_capability(self, capability: str) -> list[Tool]:
        """Filter tools by capability tag."""
        return [t for t in self._tools.values() if capability in t.metadata.capabilities]

    def __iter__(self) -> Iterator[Tool]:
        return iter(self.list_tools())

    def __len__(self) -> int:
        return len(self._tools)
