"""
Client library for a serverless-function gateway.
"""

from .client import GatewayClient
from .compose import compose
from .core import (
    ClientConfig,
    ClientSettings,
    FaasClientError,
    GatewayError,
    InvalidArgumentError,
    TransportError,
    TransportOptions,
    TransportTimeoutError,
)
from .models import DeployOptions, FunctionDescriptor, InvocationResult, InvokeOptions

__all__ = [
    "GatewayClient",
    "compose",
    "ClientConfig",
    "ClientSettings",
    "FaasClientError",
    "GatewayError",
    "InvalidArgumentError",
    "TransportError",
    "TransportOptions",
    "TransportTimeoutError",
    "DeployOptions",
    "FunctionDescriptor",
    "InvocationResult",
    "InvokeOptions",
]
