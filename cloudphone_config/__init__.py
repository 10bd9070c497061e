"""
Cloudphone Plugin Configuration Package.

Provides Pydantic Settings loaded from environment variables and the
host-injected plugin configuration model.
"""

from cloudphone_config.settings import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_MS,
    PluginConfig,
    Settings,
)

__all__ = ["DEFAULT_BASE_URL", "DEFAULT_TIMEOUT_MS", "PluginConfig", "Settings"]
