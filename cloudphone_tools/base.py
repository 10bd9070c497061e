"""Tool Interface, Metadata & Result Envelope."""

import json
from typing import Any, Literal, Protocol

from pydantic import BaseModel, ConfigDict

from cloudphone_config.settings import PluginConfig


class ToolMetadata(BaseModel):
    """Tool capability metadata."""

    idempotent: bool = False
    capabilities: list[str] = []
    risk_level: str = "low"


class ContentItem(BaseModel):
    """Single item of the content envelope."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Uniform `{content: [...]}` envelope returned by every tool."""

    content: list[ContentItem]


def text_result(text: str) -> ToolResult:
    """Wrap a string as a one-item envelope."""
    return ToolResult(content=[ContentItem(text=text)])


def json_result(payload: Any) -> ToolResult:
    """Wrap a JSON-serializable payload as a one-item envelope."""
    return text_result(json.dumps(payload, ensure_ascii=False))


class Tool(Protocol):
    """Tool interface."""

    name: str
    description: str
    parameters: dict[str, Any]
    metadata: ToolMetadata

    async def execute(
        self, tool_call_id: str, input_data: dict[str, Any], config: PluginConfig
    ) -> ToolResult:
        """Execute tool action."""
        ...
