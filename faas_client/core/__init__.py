"""
Core logic package.

Provides configuration, transport construction, errors and logging.
"""

from .config import BaseAppConfig, ClientConfig, ClientSettings, TransportOptions
from .exceptions import (
    FaasClientError,
    GatewayError,
    InvalidArgumentError,
    TransportError,
    TransportTimeoutError,
)
from .function_name import function_path, validate_function_name
from .http_client import HttpClientFactory

__all__ = [
    "BaseAppConfig",
    "ClientConfig",
    "ClientSettings",
    "TransportOptions",
    "FaasClientError",
    "GatewayError",
    "InvalidArgumentError",
    "TransportError",
    "TransportTimeoutError",
    "function_path",
    "validate_function_name",
    "HttpClientFactory",
]
