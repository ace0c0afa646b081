"""
Where: faas_client/core/function_name.py
What: Validate function names and build gateway paths from them.
Why: A function name becomes a single URL path segment and must never escape it.
"""

import re
from urllib.parse import quote

from .exceptions import InvalidArgumentError

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_DOT_SEGMENTS = {".", ".."}


def validate_function_name(name: object, field: str = "function name") -> str:
    """
    Check that a function name is usable as one gateway path segment.

    Rejected inputs:
    - non-string values
    - empty or whitespace-only names
    - names containing `/` or `\\`, or control characters
    - the dot segments `.` and `..`
    """
    if not isinstance(name, str):
        raise InvalidArgumentError(f"{field} must be a string", argument=field)
    if not name.strip():
        raise InvalidArgumentError(f"{field} is required", argument=field)
    if "/" in name or "\\" in name:
        raise InvalidArgumentError(f"{field} must not contain path separators", argument=field)
    if _CONTROL_CHARS.search(name):
        raise InvalidArgumentError(f"{field} must not contain control characters", argument=field)
    if name in _DOT_SEGMENTS:
        raise InvalidArgumentError(f"{field} must not be a dot segment", argument=field)
    return name


def function_path(prefix: str, name: object) -> str:
    """
    Join a function name onto a gateway path prefix.

    `function_path("/function", "echo")` -> `/function/echo`
    """
    segment = quote(validate_function_name(name), safe="")
    return f"/{prefix.strip('/')}/{segment}"
