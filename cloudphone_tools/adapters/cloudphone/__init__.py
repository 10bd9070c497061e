"""CloudPhone adapter.

Provides tools for the CloudPhone device API:
- Echo (diagnostics)
- Get device connection link

Usage:
    from cloudphone_tools.adapters.cloudphone import register_cloudphone_tools
    from cloudphone_tools.registry import ToolRegistry

    registry = ToolRegistry()
    register_cloudphone_tools(registry)
"""

from .client import CloudphoneClientWrapper
from .schemas import (
    DeviceConnectionLink,
    DeviceConnectionLinkData,
    DeviceConnectionLinkFailure,
    DeviceConnectionLinkInput,
    DeviceConnectionLinkResponse,
    DeviceConnectionLinkResult,
    EchoInput,
    EmptyDataFailure,
    HttpStatusFailure,
    TransportFailure,
    UpstreamFailure,
)
from .tools import EchoTool, GetDeviceConnectionLinkTool

__all__ = [
    # Client
    "CloudphoneClientWrapper",
    # Schemas
    "EchoInput",
    "DeviceConnectionLinkInput",
    "DeviceConnectionLinkData",
    "DeviceConnectionLinkResponse",
    "DeviceConnectionLink",
    "DeviceConnectionLinkFailure",
    "DeviceConnectionLinkResult",
    "HttpStatusFailure",
    "TransportFailure",
    "UpstreamFailure",
    "EmptyDataFailure",
    # Tools
    "EchoTool",
    "GetDeviceConnectionLinkTool",
]


def register_cloudphone_tools(registry, client: CloudphoneClientWrapper | None = None) -> None:
    """Register all CloudPhone tools with the tool registry, echo first.

    Args:
        registry: ToolRegistry instance
        client: Optional shared CloudphoneClientWrapper
    """
    registry.register(EchoTool())
    registry.register(GetDeviceConnectionLinkTool(client=client))
