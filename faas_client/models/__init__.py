"""
Data model definitions package.

Aggregates Pydantic models for use in other modules.
"""

from .function import DeployRequest, FunctionDescriptor, RemoveRequest
from .options import CALLBACK_HEADER, DEFAULT_NETWORK, DeployOptions, InvokeOptions
from .result import InvocationResult

__all__ = [
    "DeployRequest",
    "FunctionDescriptor",
    "RemoveRequest",
    "CALLBACK_HEADER",
    "DEFAULT_NETWORK",
    "DeployOptions",
    "InvokeOptions",
    "InvocationResult",
]
