"""
Cloudphone Agent Plugin.

Registers the `echo` and `get_device_connection_link` tools with an agent
host runtime.
"""

from cloudphone_plugin.plugin import (
    CONFIG_SCHEMA,
    PLUGIN_ID,
    HostApi,
    register,
    resolve_config,
)

__all__ = ["CONFIG_SCHEMA", "PLUGIN_ID", "HostApi", "register", "resolve_config"]
