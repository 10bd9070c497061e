"""Tool Executor Adapter.

Last line of defense between a tool body and the host runtime: every call
returns a well-formed `{content: [...]}` envelope, errors included.
"""

import json
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from cloudphone_config.settings import PluginConfig
from cloudphone_obs.logging import get_logger, mask_secrets
from cloudphone_tools.base import Tool, ToolResult, json_result, text_result

logger = get_logger(__name__)

HostExecute = Callable[[str, dict[str, Any]], Awaitable[dict[str, Any]]]


def _serialize(value: Any) -> str:
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json", by_alias=True)
    return json.dumps(value, ensure_ascii=False, default=str)


def _error_message(error: Exception) -> str:
    return str(error) or type(error).__name__


class ToolExecutor:
    """Runs tools with a fixed plugin config and normalizes their results."""

    def __init__(self, config: PluginConfig):
        self.config = config

    def normalize(self, tool: Tool, result: Any) -> ToolResult:
        """Coerce a raw tool result into the content envelope.

        A result that already carries a non-empty content sequence passes
        through; anything else is serialized into a single text item.
        """
        if isinstance(result, ToolResult) and result.content:
            return result

        if isinstance(result, Mapping) and result.get("content"):
            try:
                return ToolResult.model_validate(result)
            except ValidationError:
                pass

        if result:
            return text_result(_serialize(result))

        return text_result(f"tool {tool.name} returned no valid content")

    async def execute(
        self, tool: Tool, tool_call_id: str, params: dict[str, Any]
    ) -> ToolResult:
        """Execute a tool, never raising.

        Args:
            tool: Tool to run
            tool_call_id: Host invocation id
            params: Tool input (already schema-validated by the host)

        Returns:
            Normalized result, or an `{ok: false, error}` envelope
        """
        try:
            logger.info(
                "tool_execution_started",
                tool=tool.name,
                tool_call_id=tool_call_id,
                params=mask_secrets(_serialize(params)),
            )
            result = await tool.execute(tool_call_id, params, self.config)
            logger.info(
                "tool_execution_completed",
                tool=tool.name,
                tool_call_id=tool_call_id,
                result=mask_secrets(_serialize(result)),
            )
            return self.normalize(tool, result)
        except Exception as e:
            message = _error_message(e)
            logger.error(
                "tool_execution_failed",
                tool=tool.name,
                tool_call_id=tool_call_id,
                error=message,
            )
            return json_result({"ok": False, "error": message})

    def bind(self, tool: Tool) -> HostExecute:
        """Build the `execute(id, params)` callable handed to the host."""

        async def execute(tool_call_id: str, params: dict[str, Any]) -> dict[str, Any]:
            result = await self.execute(tool, tool_call_id, params)
            return result.model_dump()

        return execute
