"""
Where: faas_client/tests/test_package_exports.py
What: Guard tests for package-level exports.
Why: Prevent regressions when editing package __init__.py files.
"""


def test_top_level_re_exports() -> None:
    from faas_client import GatewayClient, GatewayError, InvalidArgumentError, TransportError

    assert GatewayClient.__name__ == "GatewayClient"
    assert issubclass(InvalidArgumentError, ValueError)
    assert not issubclass(GatewayError, TransportError)


def test_models_package_re_exports() -> None:
    from faas_client.models import DEFAULT_NETWORK, InvokeOptions

    assert DEFAULT_NETWORK == "func_functions"
    assert InvokeOptions().is_async is False
