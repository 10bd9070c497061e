"""Pytest fixtures.

Simulated CloudPhone upstreams are built on httpx.MockTransport; every
request the client sends is recorded in `captured_requests`.
"""

import inspect

import httpx
import pytest

from cloudphone_config.settings import PluginConfig
from cloudphone_tools.adapters.cloudphone import CloudphoneClientWrapper

from tests.upstream import BASE_URL, SUCCESS_BODY


@pytest.fixture
def plugin_config():
    """Plugin config pointing at the simulated upstream."""
    return PluginConfig(baseUrl=BASE_URL, token="test-token", timeoutMs=1000)


@pytest.fixture
def captured_requests():
    """Requests seen by the simulated upstream."""
    return []


@pytest.fixture
def make_client(captured_requests):
    """Build a CloudphoneClientWrapper backed by a request handler.

    The handler may be sync or async and returns an httpx.Response (or
    raises to simulate transport errors).
    """

    def _make(handler):
        async def _record(request: httpx.Request) -> httpx.Response:
            captured_requests.append(request)
            response = handler(request)
            if inspect.isawaitable(response):
                response = await response
            return response

        return CloudphoneClientWrapper(transport=httpx.MockTransport(_record))

    return _make


@pytest.fixture
def success_client(make_client):
    """Client whose upstream always answers with SUCCESS_BODY."""
    return make_client(lambda request: httpx.Response(200, json=SUCCESS_BODY))
