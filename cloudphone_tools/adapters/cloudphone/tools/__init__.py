"""CloudPhone tools package.

Exports all CloudPhone tools for easy importing.
"""

from .echo import EchoTool
from .device_connection_link import GetDeviceConnectionLinkTool

__all__ = [
    "EchoTool",
    "GetDeviceConnectionLinkTool",
]
