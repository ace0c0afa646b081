"""
Per-call option models.

Replace loose option dictionaries with explicit models that list each
option with its default and are validated when the call is made.
"""

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core.exceptions import InvalidArgumentError

DEFAULT_NETWORK = "func_functions"
CALLBACK_HEADER = "X-Callback-Url"


class InvokeOptions(BaseModel):
    """Options for a single function invocation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    is_json: bool = Field(default=False, description="Send and parse the body as JSON")
    is_binary_response: bool = Field(default=False, description="Return the raw response bytes")
    callback_url: Optional[str] = Field(
        default=None, description="Invoke asynchronously and deliver the result here"
    )
    headers: Dict[str, str] = Field(default_factory=dict, description="Extra request headers")
    timeout: Optional[float] = Field(default=None, gt=0, description="Per-call timeout (seconds)")

    @field_validator("callback_url")
    @classmethod
    def _check_callback_url(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("callback_url must not be empty")
        return value

    @property
    def is_async(self) -> bool:
        return self.callback_url is not None


class DeployOptions(BaseModel):
    """Options for deploying a function."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    network: str = Field(default=DEFAULT_NETWORK, min_length=1, description="Container network")


OptionsInput = Union[BaseModel, Mapping[str, Any], None]


def coerce_options(model: type, options: OptionsInput = None, **overrides: Any) -> Any:
    """
    Turn an options model, a mapping or keyword overrides into `model`.

    Validation problems are reported as InvalidArgumentError.
    """
    if isinstance(options, model) and not overrides:
        return options
    if isinstance(options, BaseModel):
        data = options.model_dump()
    elif options is None:
        data = {}
    elif isinstance(options, Mapping):
        data = dict(options)
    else:
        raise InvalidArgumentError(
            f"options must be {model.__name__} or a mapping, got {type(options).__name__}",
            argument="options",
        )
    data.update(overrides)
    try:
        return model(**data)
    except ValidationError as exc:
        raise InvalidArgumentError(str(exc), argument="options") from exc
