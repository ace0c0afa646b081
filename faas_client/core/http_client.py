import logging

import httpx

from .config import ClientConfig

logger = logging.getLogger(__name__)


class HttpClientFactory:
    """
    HTTP Client Factory for building the gateway transport from a ClientConfig.
    """

    def __init__(self, config: ClientConfig):
        self.config = config

    def create_async_client(self, **kwargs) -> httpx.AsyncClient:
        """
        Create an httpx.AsyncClient bound to the configured gateway.

        Args:
            **kwargs: Additional arguments for httpx.AsyncClient (override config)
        """
        options = self.config.transport_options

        kwargs.setdefault("base_url", self.config.base_endpoint)
        kwargs.setdefault("verify", options.verify)
        kwargs.setdefault("follow_redirects", options.follow_redirects)
        kwargs.setdefault("trust_env", options.trust_env)
        if options.auth is not None:
            kwargs.setdefault("auth", httpx.BasicAuth(*options.auth))
        if options.headers:
            kwargs.setdefault("headers", dict(options.headers))
        if options.cert is not None:
            kwargs.setdefault("cert", options.cert)
        if options.timeout is not None:
            kwargs.setdefault("timeout", options.timeout)

        # Default limits for high throughput (can be overridden by caller)
        if "limits" not in kwargs:
            kwargs["limits"] = httpx.Limits(max_keepalive_connections=20, max_connections=100)

        logger.debug(
            "Creating gateway transport",
            extra={"base_url": str(kwargs["base_url"]), "verify": bool(kwargs["verify"])},
        )
        return httpx.AsyncClient(**kwargs)
