"""CloudPhone API client wrapper.

One GET per call with a hard timeout and no retries. Every outcome is
returned as a DeviceConnectionLinkResult variant; nothing is raised for
network, HTTP or upstream failures.
"""

import asyncio
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from cloudphone_config.settings import PluginConfig
from cloudphone_obs.logging import get_logger

from .schemas import (
    DeviceConnectionLink,
    DeviceConnectionLinkResponse,
    DeviceConnectionLinkResult,
    EmptyDataFailure,
    HttpStatusFailure,
    TransportFailure,
    UpstreamFailure,
)

logger = get_logger(__name__)

DEVICE_CONNECTION_LINK_PATH = "/webide/api/autojs-stream/device-connection-link/{device_id}"
SUCCESS_CODE = "1"


class CloudphoneClientWrapper:
    """CloudPhone API client.

    Provides:
    - Bearer token authentication (when a token is configured)
    - Per-call timeout that cancels the in-flight request
    - Mapping of every outcome to a structured result
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        """Initialize CloudPhone client.

        Args:
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self._transport = transport

    def _get_headers(self, config: PluginConfig) -> dict[str, str]:
        """Get request headers with authentication."""
        headers = {"Content-Type": "application/json"}
        if config.token:
            headers["Authorization"] = f"Bearer {config.token}"
        return headers

    def device_connection_link_url(self, device_id: str, config: PluginConfig) -> str:
        path = DEVICE_CONNECTION_LINK_PATH.format(device_id=quote(device_id, safe=""))
        return f"{config.effective_base_url}{path}"

    async def _get(self, url: str, config: PluginConfig) -> httpx.Response:
        timeout_seconds = config.effective_timeout_ms / 1000
        async with httpx.AsyncClient(
            timeout=timeout_seconds, transport=self._transport
        ) as client:
            return await asyncio.wait_for(
                client.get(url, headers=self._get_headers(config)),
                timeout=timeout_seconds,
            )

    async def get_device_connection_link(
        self, device_id: str, config: PluginConfig
    ) -> DeviceConnectionLinkResult:
        """Look up the SSH connection link of a device.

        Args:
            device_id: CloudPhone device ID
            config: Plugin configuration for this call

        Returns:
            DeviceConnectionLink on success, otherwise one of the failure
            variants
        """
        url = self.device_connection_link_url(device_id, config)

        try:
            response = await self._get(url, config)
            if not response.is_success:
                logger.warning(
                    "cloudphone_http_error",
                    device_id=device_id,
                    status_code=response.status_code,
                )
                return HttpStatusFailure(
                    httpStatus=response.status_code,
                    message=f"HTTP error: {response.status_code} {response.reason_phrase}".rstrip(),
                )
            body = DeviceConnectionLinkResponse.model_validate(response.json())
        except asyncio.TimeoutError:
            return self._transport_failure(
                device_id,
                f"timed out after {config.effective_timeout_ms:g}ms",
            )
        except ValidationError as e:
            return self._transport_failure(
                device_id, f"invalid response body: {e.error_count()} validation error(s)"
            )
        except (httpx.HTTPError, ValueError) as e:
            return self._transport_failure(device_id, str(e) or type(e).__name__)

        if not body.success or body.code != SUCCESS_CODE:
            logger.warning(
                "cloudphone_upstream_error",
                device_id=device_id,
                code=body.code,
                trace_id=body.traceId,
            )
            return UpstreamFailure(code=body.code, message=body.message, traceId=body.traceId)

        if body.data is None:
            return EmptyDataFailure(traceId=body.traceId)

        return DeviceConnectionLink(
            deviceId=body.data.deviceId,
            sshCommand=body.data.sshCommand,
            macSshCommand=body.data.macSshCommand,
            sshPwd=body.data.sshPwd,
            expireTime=body.data.expireTime,
            traceId=body.traceId,
        )

    def _transport_failure(self, device_id: str, reason: str) -> TransportFailure:
        logger.warning("cloudphone_request_failed", device_id=device_id, error=reason)
        return TransportFailure(message=f"request failed: {reason}")
