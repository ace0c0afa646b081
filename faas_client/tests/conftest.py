import pytest
import pytest_asyncio
import respx

from faas_client.client import GatewayClient
from faas_client.core.config import ClientConfig

GATEWAY_URL = "http://localhost:8080"

FUNCTION_ECHOIT = {
    "name": "func_echoit",
    "image": "functions/alpine:health@sha256:52e6e83add2caafc014d9f14984781c91d0d36c7d13829a7ccec480f2e395d19",
    "invocationCount": 12,
    "replicas": 1,
    "envProcess": "cat",
}


@pytest.fixture
def gateway_mock():
    """respx router standing in for the gateway."""
    with respx.mock(base_url=GATEWAY_URL, assert_all_called=False) as router:
        yield router


@pytest_asyncio.fixture
async def gateway(gateway_mock):
    """GatewayClient pointed at the mocked gateway."""
    async with GatewayClient(ClientConfig(base_endpoint=GATEWAY_URL)) as client:
        yield client
