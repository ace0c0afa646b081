"""
Custom exception classes.

Represent errors raised by gateway operations. Every operation either
returns an InvocationResult or raises exactly one of:

- InvalidArgumentError: rejected before any network call
- TransportError: no HTTP response was obtained
- GatewayError: the gateway answered with a non-2xx status
"""

from typing import Any, Dict, Optional


class FaasClientError(Exception):
    """Base exception class for gateway client errors."""

    pass


class InvalidArgumentError(FaasClientError, ValueError):
    """Raised when an identifier or payload is unusable."""

    def __init__(self, message: str, argument: Optional[str] = None):
        self.argument = argument
        super().__init__(message)


class TransportError(FaasClientError):
    """Failed to obtain any HTTP response from the gateway."""

    def __init__(self, cause: Exception, url: Optional[str] = None):
        self.cause = cause
        self.url = url
        target = f" ({url})" if url else ""
        super().__init__(f"Gateway unreachable{target}: {cause}")


class TransportTimeoutError(TransportError):
    """Timeout while talking to the gateway."""

    def __init__(self, cause: Exception, url: Optional[str] = None):
        super().__init__(cause, url)
        target = f" ({url})" if url else ""
        self.args = (f"Gateway request timed out{target}: {cause}",)


class GatewayError(FaasClientError):
    """Error response (non-2xx) from the gateway."""

    def __init__(
        self,
        status_code: int,
        body: Any = None,
        headers: Optional[Dict[str, str]] = None,
        url: Optional[str] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.headers = headers or {}
        self.url = url
        super().__init__(f"Gateway error ({status_code}): {body!r}")
