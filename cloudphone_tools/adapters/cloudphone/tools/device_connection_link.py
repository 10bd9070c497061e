"""CloudPhone Get Device Connection Link Tool.

Look up the SSH connection link of a device.

API: GET {baseUrl}/webide/api/autojs-stream/device-connection-link/{deviceId}
Auth: Bearer Token
"""

from typing import Any

from cloudphone_config.settings import PluginConfig
from cloudphone_tools.base import ToolMetadata, ToolResult, json_result
from cloudphone_tools.adapters.cloudphone.client import CloudphoneClientWrapper
from cloudphone_tools.adapters.cloudphone.schemas import DeviceConnectionLinkInput


class GetDeviceConnectionLinkTool:
    """Tool for getting the SSH connection link of a CloudPhone device.

    Capabilities:
    - SSH command for Linux/Windows and macOS clients
    - SSH password
    - Link expiry (unix seconds and ISO-8601)

    Use Cases:
    - "Give me the SSH command for device 7593283098889067310"
    - "When does the connection link of this device expire?"
    """

    name = "get_device_connection_link"
    description = (
        "Look up the SSH connection link of a device. Returns the SSH command "
        "(host:port) and when the link expires. Requires a device ID."
    )
    parameters = DeviceConnectionLinkInput.model_json_schema()

    metadata = ToolMetadata(
        idempotent=True,
        capabilities=["cloudphone.devices.read"],
        risk_level="low",
    )

    def __init__(self, client: CloudphoneClientWrapper | None = None):
        """Initialize GetDeviceConnectionLinkTool.

        Args:
            client: Optional CloudphoneClientWrapper (creates new if None)
        """
        self.client = client or CloudphoneClientWrapper()

    async def execute(
        self, tool_call_id: str, input_data: dict[str, Any], config: PluginConfig
    ) -> ToolResult:
        """Execute device connection link lookup.

        Args:
            tool_call_id: Host invocation id
            input_data: Tool input matching DeviceConnectionLinkInput schema
            config: Plugin configuration for this call

        Returns:
            Envelope whose text is the JSON-serialized lookup result
        """
        input_obj = DeviceConnectionLinkInput(**input_data)

        result = await self.client.get_device_connection_link(input_obj.device_id, config)

        return json_result(result.model_dump(mode="json"))
