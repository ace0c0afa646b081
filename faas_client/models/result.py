"""
Invocation result models.

Standardizes the output of every gateway operation.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field


class InvocationResult(BaseModel):
    """
    Result of a single gateway call.

    `body` is bytes, text or a decoded JSON value depending on the call.
    """

    status_code: int
    body: Any = None
    headers: Dict[str, str] = Field(default_factory=dict)

    @property
    def success(self) -> bool:
        return 200 <= self.status_code < 300
