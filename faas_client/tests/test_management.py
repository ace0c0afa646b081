import json

import httpx
import pytest

from faas_client.core.exceptions import GatewayError, InvalidArgumentError
from faas_client.models import DeployOptions, FunctionDescriptor

from .conftest import FUNCTION_ECHOIT


@pytest.mark.asyncio
async def test_deploy_defaults_network(gateway, gateway_mock):
    route = gateway_mock.post(
        "/system/functions",
        json={"service": "test-func", "image": "hello-serverless", "network": "func_functions"},
    ).mock(return_value=httpx.Response(200))

    result = await gateway.deploy("test-func", "hello-serverless")

    assert route.called
    assert result.status_code == 200
    assert result.body is None


@pytest.mark.asyncio
async def test_deploy_explicit_network_overrides_default(gateway, gateway_mock):
    route = gateway_mock.post("/system/functions").mock(return_value=httpx.Response(200))

    await gateway.deploy("test-func", "hello-serverless", DeployOptions(network="custom"))
    await gateway.deploy("test-func", "hello-serverless", network="other")

    bodies = [json.loads(call.request.content) for call in route.calls]
    assert bodies[0]["network"] == "custom"
    assert bodies[1]["network"] == "other"


@pytest.mark.asyncio
async def test_deploy_accepts_options_mapping(gateway, gateway_mock):
    route = gateway_mock.post("/system/functions").mock(return_value=httpx.Response(200))

    await gateway.deploy("test-func", "hello-serverless", {"network": "mapped"})

    assert json.loads(route.calls.last.request.content)["network"] == "mapped"


@pytest.mark.asyncio
@pytest.mark.parametrize("name,image", [("", "hello-serverless"), ("test-func", ""), ("a/b", "img")])
async def test_deploy_rejects_bad_arguments_without_request(gateway, gateway_mock, name, image):
    route = gateway_mock.post("/system/functions").mock(return_value=httpx.Response(200))

    with pytest.raises(InvalidArgumentError):
        await gateway.deploy(name, image)

    assert not route.called


@pytest.mark.asyncio
async def test_list_returns_raw_json_array(gateway, gateway_mock):
    gateway_mock.get("/system/functions").mock(
        return_value=httpx.Response(200, json=[FUNCTION_ECHOIT])
    )

    result = await gateway.list()

    assert result.status_code == 200
    assert result.body[0]["name"] == "func_echoit"
    assert result.headers["content-type"] == "application/json"


@pytest.mark.asyncio
async def test_list_descriptors_keeps_unknown_fields(gateway, gateway_mock):
    gateway_mock.get("/system/functions").mock(
        return_value=httpx.Response(200, json=[dict(FUNCTION_ECHOIT, labels={"team": "a"})])
    )

    descriptors = await gateway.list_descriptors()

    assert len(descriptors) == 1
    assert isinstance(descriptors[0], FunctionDescriptor)
    assert descriptors[0].invocation_count == 12
    assert descriptors[0].env_process == "cat"
    assert descriptors[0].labels == {"team": "a"}


@pytest.mark.asyncio
async def test_list_descriptors_rejects_non_array(gateway, gateway_mock):
    gateway_mock.get("/system/functions").mock(
        return_value=httpx.Response(200, json={"error": "upstream"})
    )

    with pytest.raises(GatewayError) as exc_info:
        await gateway.list_descriptors()

    assert exc_info.value.status_code == 200
    assert exc_info.value.body == {"error": "upstream"}
    assert exc_info.value.url == "/system/functions"


@pytest.mark.asyncio
async def test_inspect_returns_descriptor(gateway, gateway_mock):
    gateway_mock.get("/system/function/func_echoit").mock(
        return_value=httpx.Response(200, json=FUNCTION_ECHOIT)
    )

    result = await gateway.inspect("func_echoit")

    assert result.status_code == 200
    assert result.body["name"] == "func_echoit"


@pytest.mark.asyncio
async def test_inspect_empty_name_sends_nothing(gateway, gateway_mock):
    route = gateway_mock.route().mock(return_value=httpx.Response(200))

    with pytest.raises(InvalidArgumentError, match="function name is required"):
        await gateway.inspect("")

    assert not route.called


@pytest.mark.asyncio
async def test_inspect_not_found_raises_gateway_error(gateway, gateway_mock):
    gateway_mock.get("/system/function/missing").mock(
        return_value=httpx.Response(404, text="function not found")
    )

    with pytest.raises(GatewayError) as exc_info:
        await gateway.inspect("missing")

    assert exc_info.value.status_code == 404
    assert exc_info.value.body == "function not found"


@pytest.mark.asyncio
async def test_remove_sends_function_name_body(gateway, gateway_mock):
    route = gateway_mock.delete("/system/functions", json={"functionName": "test-func"}).mock(
        return_value=httpx.Response(200)
    )

    result = await gateway.remove("test-func")

    assert route.called
    assert result.status_code == 200


@pytest.mark.asyncio
async def test_remove_empty_name_rejected(gateway, gateway_mock):
    route = gateway_mock.route().mock(return_value=httpx.Response(200))

    with pytest.raises(InvalidArgumentError):
        await gateway.remove("  ")

    assert not route.called
