"""CloudPhone adapter Pydantic schemas.

Input schemas for the tools, the upstream response shape, and the result
variants of a device connection link lookup. Result models serialize with
the upstream camelCase keys.
"""

from datetime import datetime, timedelta, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field


# ============================================================================
# TOOL INPUT SCHEMAS
# ============================================================================


class EchoInput(BaseModel):
    """Input schema for EchoTool."""

    text: str = Field(..., description="Text to echo back unchanged")


class DeviceConnectionLinkInput(BaseModel):
    """Input schema for GetDeviceConnectionLinkTool."""

    model_config = ConfigDict(populate_by_name=True)

    device_id: str = Field(
        ...,
        alias="deviceId",
        min_length=1,
        description="Device ID, e.g. 7593283098889067310",
    )


# ============================================================================
# UPSTREAM RESPONSE SCHEMAS
# ============================================================================


class DeviceConnectionLinkData(BaseModel):
    """`data` payload of a successful lookup."""

    model_config = ConfigDict(extra="ignore")

    deviceId: str | int
    sshCommand: str | None = None
    macSshCommand: str | None = None
    sshPwd: str | None = None
    expireTime: int | float = Field(..., description="Link expiry, unix seconds")


class DeviceConnectionLinkResponse(BaseModel):
    """Body of GET /webide/api/autojs-stream/device-connection-link/{deviceId}."""

    model_config = ConfigDict(extra="ignore")

    code: str | int | None = None
    message: str | None = None
    traceId: str | None = None
    success: bool = False
    data: DeviceConnectionLinkData | None = None


# ============================================================================
# RESULT VARIANTS
# ============================================================================


class HttpStatusFailure(BaseModel):
    """Upstream answered with a non-2xx status."""

    ok: Literal[False] = False
    httpStatus: int
    message: str


class TransportFailure(BaseModel):
    """Request never produced a usable response (network, timeout, bad body)."""

    ok: Literal[False] = False
    message: str


class UpstreamFailure(BaseModel):
    """Upstream reported `success: false` or a code other than "1"."""

    ok: Literal[False] = False
    code: str | int | None = None
    message: str | None = None
    traceId: str | None = None


class EmptyDataFailure(BaseModel):
    """Successful code but no `data` payload."""

    ok: Literal[False] = False
    message: str = "empty response data"
    traceId: str | None = None


class DeviceConnectionLink(BaseModel):
    """Successful lookup."""

    ok: Literal[True] = True
    deviceId: str | int
    sshCommand: str | None = None
    macSshCommand: str | None = None
    sshPwd: str | None = None
    expireTime: int | float
    traceId: str | None = None

    @computed_field
    @property
    def expireAt(self) -> str:
        """ISO-8601 UTC expiry with millisecond precision."""
        expire_ms = round(self.expireTime * 1000)
        expire_at = datetime.fromtimestamp(expire_ms // 1000, tz=timezone.utc) + timedelta(
            milliseconds=expire_ms % 1000
        )
        return expire_at.isoformat(timespec="milliseconds").replace("+00:00", "Z")


DeviceConnectionLinkFailure = (
    HttpStatusFailure | TransportFailure | UpstreamFailure | EmptyDataFailure
)
DeviceConnectionLinkResult = DeviceConnectionLink | DeviceConnectionLinkFailure
