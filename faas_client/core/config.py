"""
Client configuration definition.

ClientConfig is the immutable connection configuration held by a
GatewayClient. ClientSettings loads the same values from environment
variables using pydantic-settings.
"""

from typing import Dict, Optional, Tuple, Union
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import InvalidArgumentError


class _ConfigModel(BaseModel):
    """Base for config models: construction errors surface as InvalidArgumentError."""

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidArgumentError(str(exc), argument="config") from exc


class TransportOptions(_ConfigModel):
    """
    Transport-level overrides passed through to httpx untouched.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    auth: Optional[Tuple[str, str]] = Field(default=None, description="Basic auth (user, pass)")
    headers: Dict[str, str] = Field(default_factory=dict, description="Default request headers")
    verify: Union[bool, str] = Field(default=True, description="TLS verification or CA bundle path")
    cert: Optional[str] = Field(default=None, description="Client certificate path")
    timeout: Optional[float] = Field(default=None, description="Request timeout (seconds)")
    follow_redirects: bool = Field(default=False, description="Follow HTTP redirects")
    trust_env: bool = Field(default=False, description="Honour HTTP(S)_PROXY and friends")


class ClientConfig(_ConfigModel):
    """
    Connection configuration for a GatewayClient.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_endpoint: str = Field(..., description="Gateway base URL")
    transport_options: TransportOptions = Field(default_factory=TransportOptions)

    @field_validator("base_endpoint")
    @classmethod
    def _check_base_endpoint(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("base_endpoint is required")
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"base_endpoint must be an absolute http(s) URL: {value}")
        return value

    @classmethod
    def create(cls, base_endpoint: str, **transport_options) -> "ClientConfig":
        """Build a config from a base URL and TransportOptions keyword arguments."""
        return cls(
            base_endpoint=base_endpoint,
            transport_options=TransportOptions(**transport_options),
        )


class BaseAppConfig(BaseSettings):
    """
    Common application settings.
    """

    LOG_LEVEL: str = Field(default="INFO", description="Log level")
    VERIFY_SSL: bool = Field(default=True, description="Whether to verify SSL certificates")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )


class ClientSettings(BaseAppConfig):
    """
    Gateway client settings read from the environment.
    """

    GATEWAY_URL: str = Field(default="http://127.0.0.1:8080", description="Gateway base URL")
    GATEWAY_USERNAME: Optional[str] = Field(default=None, description="Basic auth username")
    GATEWAY_PASSWORD: Optional[str] = Field(default=None, description="Basic auth password")
    REQUEST_TIMEOUT: Optional[float] = Field(
        default=30.0, description="Request timeout in seconds"
    )

    def to_client_config(self) -> ClientConfig:
        auth = None
        if self.GATEWAY_USERNAME and self.GATEWAY_PASSWORD:
            auth = (self.GATEWAY_USERNAME, self.GATEWAY_PASSWORD)
        return ClientConfig.create(
            self.GATEWAY_URL,
            auth=auth,
            verify=self.VERIFY_SSL,
            timeout=self.REQUEST_TIMEOUT,
        )
