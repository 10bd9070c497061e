"""Echo Tool.

Diagnostic tool: returns its input unchanged so the tool call chain can be
verified end to end.
"""

from typing import Any

from cloudphone_config.settings import PluginConfig
from cloudphone_tools.base import ToolMetadata, ToolResult, text_result
from cloudphone_tools.adapters.cloudphone.schemas import EchoInput


class EchoTool:
    """Tool echoing text back as a single content item."""

    name = "echo"
    description = "Return the input text unchanged. Used to verify that tool calls work."
    parameters = EchoInput.model_json_schema()

    metadata = ToolMetadata(
        idempotent=True,
        capabilities=["diagnostics"],
        risk_level="low",
    )

    async def execute(
        self, tool_call_id: str, input_data: dict[str, Any], config: PluginConfig
    ) -> ToolResult:
        input_obj = EchoInput(**input_data)
        return text_result(input_obj.text)
