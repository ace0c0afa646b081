"""
Function domain models.

Request bodies sent to the gateway's management endpoints and the
descriptor it returns for deployed functions.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from .options import DEFAULT_NETWORK


class DeployRequest(BaseModel):
    """Body of POST /system/functions."""

    service: str
    image: str
    network: str = DEFAULT_NETWORK


class RemoveRequest(BaseModel):
    """Body of DELETE /system/functions."""

    model_config = ConfigDict(populate_by_name=True)

    function_name: str = Field(..., alias="functionName")


class FunctionDescriptor(BaseModel):
    """
    A deployed function as reported by the gateway.

    Only the common fields are declared; anything else the gateway sends
    is kept as an extra attribute.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str
    image: str = ""
    invocation_count: float = Field(default=0, alias="invocationCount")
    replicas: int = 0
    env_process: str = Field(default="", alias="envProcess")

    @classmethod
    def from_list(cls, data: List[Dict[str, Any]]) -> List["FunctionDescriptor"]:
        return [cls.model_validate(item) for item in data]
