"""
Plugin Settings (Pydantic Settings).

Two sources of configuration:
- PluginConfig: injected by the host runtime under the "cloudphone" entry
  and read once at registration time.
- Settings: environment variables (.env file or system env), used by the
  diagnostic CLI and for logging setup.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://cptest.yaltc.cn"
DEFAULT_TIMEOUT_MS = 5000


class PluginConfig(BaseModel):
    """Host-supplied plugin configuration.

    All fields are optional; defaults are applied per call by the client.
    The host schema names the timeout `timeout` (milliseconds), `timeoutMs`
    is accepted as well.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    base_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("baseUrl", "base_url"),
        description="CloudPhone API base URL",
    )
    token: str | None = Field(default=None, description="Bearer token")
    timeout_ms: float | None = Field(
        default=None,
        validation_alias=AliasChoices("timeoutMs", "timeout", "timeout_ms"),
        description="Request timeout in milliseconds",
    )

    @property
    def effective_base_url(self) -> str:
        return (self.base_url or DEFAULT_BASE_URL).rstrip("/")

    @property
    def effective_timeout_ms(self) -> float:
        return self.timeout_ms if self.timeout_ms is not None else DEFAULT_TIMEOUT_MS


class Settings(BaseSettings):
    """
    Settings loaded from environment variables.

    Only the CLI reads these; a host-loaded plugin takes its configuration
    from the host.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================================================
    # CLOUDPHONE API
    # ========================================================================
    CLOUDPHONE_BASE_URL: str = Field(default=DEFAULT_BASE_URL)
    CLOUDPHONE_TOKEN: str = Field(default="", description="Bearer token for the CloudPhone API")
    CLOUDPHONE_TIMEOUT_MS: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)

    # ========================================================================
    # LOGGING
    # ========================================================================
    LOG_LEVEL: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    LOG_FORMAT: str = Field(default="json", pattern="^(json|text)$")

    def to_plugin_config(self) -> PluginConfig:
        """Build the per-call plugin config from environment settings."""
        return PluginConfig(
            base_url=self.CLOUDPHONE_BASE_URL,
            token=self.CLOUDPHONE_TOKEN or None,
            timeout_ms=self.CLOUDPHONE_TIMEOUT_MS,
        )
