"""
Gateway Client

Maps each gateway endpoint to one coroutine. Every call sends exactly one
HTTP request through the shared httpx.AsyncClient and either returns an
InvocationResult or raises InvalidArgumentError, TransportError or
GatewayError. Nothing is retried.
"""

import json
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

import httpx

from .compose import compose as run_compose
from .core.config import ClientConfig
from .core.exceptions import (
    GatewayError,
    InvalidArgumentError,
    TransportError,
    TransportTimeoutError,
)
from .core.function_name import function_path, validate_function_name
from .core.http_client import HttpClientFactory
from .models.function import DeployRequest, FunctionDescriptor, RemoveRequest
from .models.options import CALLBACK_HEADER, DeployOptions, InvokeOptions, coerce_options
from .models.result import InvocationResult

logger = logging.getLogger("faas_client.client")

FUNCTIONS_PATH = "/system/functions"
FUNCTION_INFO_PREFIX = "/system/function"
SYNC_PREFIX = "/function"
ASYNC_PREFIX = "/async-function"

Decoder = Callable[[httpx.Response], Any]


def _decode_json(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _decode_text(response: httpx.Response) -> str:
    return response.content.decode("utf-8", errors="replace")


def _decode_bytes(response: httpx.Response) -> bytes:
    return response.content


def _response_decoder(options: InvokeOptions) -> Decoder:
    if options.is_binary_response:
        return _decode_bytes
    if options.is_json:
        return _decode_json
    return _decode_text


def _encode_body(data: Any, options: InvokeOptions, headers: httpx.Headers) -> Dict[str, Any]:
    """Build the httpx content kwargs for an invoke body."""
    if data is None:
        return {}
    if options.is_json:
        headers.setdefault("Content-Type", "application/json")
        # bytes are taken as an already-encoded JSON document
        if isinstance(data, (bytes, bytearray)):
            return {"content": bytes(data)}
        try:
            encoded = json.dumps(data)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"data is not JSON serializable: {exc}", "data") from exc
        return {"content": encoded.encode("utf-8")}
    if isinstance(data, str):
        return {"content": data.encode("utf-8")}
    if isinstance(data, (bytes, bytearray)):
        return {"content": bytes(data)}
    raise InvalidArgumentError(
        f"raw request body must be str or bytes, got {type(data).__name__} (use is_json)",
        argument="data",
    )


class GatewayClient:
    """
    HTTP client for a serverless-function gateway.

    One instance can be shared by many concurrent coroutines; it holds only
    immutable configuration and the httpx connection pool.
    """

    def __init__(self, config: ClientConfig, client: Optional[httpx.AsyncClient] = None):
        """
        Args:
            config: Immutable connection configuration
            client: Optional pre-built httpx.AsyncClient (not closed by aclose)
        """
        self._config = config
        self._owns_client = client is None
        if client is None:
            client = HttpClientFactory(config).create_async_client()
        self.client = client

    @classmethod
    def from_url(cls, gateway: str, **transport_options: Any) -> "GatewayClient":
        """Build a client for `gateway` with TransportOptions keyword overrides."""
        return cls(ClientConfig.create(gateway, **transport_options))

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_endpoint(self) -> str:
        return self._config.base_endpoint

    async def __aenter__(self) -> "GatewayClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    # ===========================================
    # Management endpoints
    # ===========================================

    async def list(self) -> InvocationResult:
        """Get the list of deployed functions (raw JSON array)."""
        return await self._send("GET", FUNCTIONS_PATH, decode=_decode_json)

    async def list_descriptors(self) -> List[FunctionDescriptor]:
        """Get the list of deployed functions as FunctionDescriptor models."""
        result = await self.list()
        if not isinstance(result.body, list):
            raise GatewayError(result.status_code, result.body, result.headers, FUNCTIONS_PATH)
        return FunctionDescriptor.from_list(result.body)

    async def inspect(self, name: str) -> InvocationResult:
        """Get a single function's descriptor (raw JSON object)."""
        path = function_path(FUNCTION_INFO_PREFIX, name)
        return await self._send("GET", path, decode=_decode_json, function_name=name)

    async def deploy(
        self,
        name: str,
        image: str,
        options: Optional[DeployOptions] = None,
        *,
        network: Optional[str] = None,
    ) -> InvocationResult:
        """
        Deploy a function.

        Args:
            name: Name for the function
            image: Image to use
            options: DeployOptions (or mapping); `network` defaults to func_functions
            network: Shortcut overriding options.network
        """
        validate_function_name(name)
        if not isinstance(image, str) or not image.strip():
            raise InvalidArgumentError("image is required", argument="image")
        overrides = {"network": network} if network is not None else {}
        deploy_options = coerce_options(DeployOptions, options, **overrides)

        body = DeployRequest(service=name, image=image, network=deploy_options.network)
        return await self._send(
            "POST",
            FUNCTIONS_PATH,
            decode=_decode_json,
            function_name=name,
            json=body.model_dump(),
        )

    async def remove(self, name: str) -> InvocationResult:
        """Remove a function."""
        validate_function_name(name)
        body = RemoveRequest(function_name=name)
        return await self._send(
            "DELETE",
            FUNCTIONS_PATH,
            decode=_decode_json,
            function_name=name,
            json=body.model_dump(by_alias=True),
        )

    # ===========================================
    # Invocation
    # ===========================================

    async def invoke(
        self,
        name: str,
        data: Any = None,
        options: Optional[InvokeOptions] = None,
        **option_kwargs: Any,
    ) -> InvocationResult:
        """
        Invoke a function.

        Without a callback_url the call is synchronous (POST /function/{name});
        with one it targets /async-function/{name} and the gateway delivers
        the result to the callback later.

        Text responses are decoded as UTF-8 with invalid bytes replaced by
        U+FFFD, so chaining them is lossy for non-UTF-8 output. Use
        is_binary_response for byte-exact results.

        Args:
            name: Function name
            data: Request body; str/bytes sent raw, anything JSON-serializable with
                is_json (bytes are sent as-is, already encoded)
            options: InvokeOptions (or mapping)
            **option_kwargs: InvokeOptions fields overriding `options`
        """
        invoke_options = coerce_options(InvokeOptions, options, **option_kwargs)
        prefix = ASYNC_PREFIX if invoke_options.is_async else SYNC_PREFIX
        path = function_path(prefix, name)

        headers = httpx.Headers(invoke_options.headers)
        if invoke_options.is_async:
            existing = headers.get(CALLBACK_HEADER)
            if existing is not None and existing != invoke_options.callback_url:
                logger.warning(
                    f"Overwriting caller-supplied {CALLBACK_HEADER} header",
                    extra={"function_name": name, "dropped_value": existing},
                )
            headers[CALLBACK_HEADER] = invoke_options.callback_url

        request_kwargs = _encode_body(data, invoke_options, headers)
        request_kwargs["headers"] = headers
        if invoke_options.timeout is not None:
            request_kwargs["timeout"] = invoke_options.timeout

        return await self._send(
            "POST",
            path,
            decode=_response_decoder(invoke_options),
            function_name=name,
            **request_kwargs,
        )

    async def compose(
        self,
        initial: Any,
        function_names: Sequence[str],
        options: Optional[InvokeOptions] = None,
    ) -> InvocationResult:
        """Chain functions client-side; see faas_client.compose.compose."""
        return await run_compose(self, initial, function_names, options)

    # ===========================================
    # Transport
    # ===========================================

    async def _send(
        self,
        method: str,
        path: str,
        *,
        decode: Decoder,
        function_name: Optional[str] = None,
        **kwargs: Any,
    ) -> InvocationResult:
        logger.debug(f"{method} {path}", extra={"function_name": function_name})

        try:
            response = await self.client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            self._log_failure(method, path, function_name, e)
            raise TransportTimeoutError(e, path) from e
        except httpx.RequestError as e:
            self._log_failure(method, path, function_name, e)
            raise TransportError(e, path) from e
        except httpx.HTTPStatusError as e:
            error_response = e.response
            logger.error(
                f"Gateway returned {error_response.status_code} for {method} {path}",
                extra={
                    "function_name": function_name,
                    "target_path": path,
                    "status_code": error_response.status_code,
                },
            )
            raise GatewayError(
                error_response.status_code,
                decode(error_response),
                dict(error_response.headers),
                path,
            ) from e

        return InvocationResult(
            status_code=response.status_code,
            body=decode(response),
            headers=dict(response.headers),
        )

    @staticmethod
    def _log_failure(
        method: str, path: str, function_name: Optional[str], error: Exception
    ) -> None:
        logger.error(
            f"Gateway request failed: {method} {path}",
            extra={
                "function_name": function_name,
                "target_path": path,
                "error_type": type(error).__name__,
                "error_detail": str(error),
            },
        )
