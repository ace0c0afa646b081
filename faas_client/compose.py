"""
Where: faas_client/compose.py
What: Client-side function chaining over GatewayClient.invoke.
Why: Each function's output feeds the next; the first failure stops the chain.
"""

import logging
from typing import TYPE_CHECKING, Any, Optional, Sequence

from .core.exceptions import FaasClientError, InvalidArgumentError
from .core.function_name import validate_function_name
from .models.options import InvokeOptions, coerce_options
from .models.result import InvocationResult

if TYPE_CHECKING:
    from .client import GatewayClient

logger = logging.getLogger("faas_client.compose")


async def compose(
    client: "GatewayClient",
    initial: Any,
    function_names: Sequence[str],
    options: Optional[InvokeOptions] = None,
) -> InvocationResult:
    """
    Run `function_names` left to right, passing each result body to the next.

    Args:
        client: GatewayClient used for every stage
        initial: Input for the first function
        function_names: Ordered function names (may be empty)
        options: InvokeOptions applied to every stage

    Returns:
        The last stage's InvocationResult, or a 200 result wrapping
        `initial` when `function_names` is empty.

    Raises:
        InvalidArgumentError: a name or option is invalid (nothing is sent)
        TransportError / GatewayError: raised unchanged by the failing stage
    """
    if isinstance(function_names, (str, bytes)):
        raise InvalidArgumentError(
            "function_names must be a sequence of names, not a single string",
            argument="function_names",
        )
    names = [validate_function_name(name) for name in function_names]
    invoke_options = coerce_options(InvokeOptions, options)

    result = InvocationResult(status_code=200, body=initial)
    if not names:
        return result

    for stage, name in enumerate(names, start=1):
        logger.debug(
            f"Compose stage {stage}/{len(names)}: {name}",
            extra={"function_name": name, "stage": stage},
        )
        try:
            result = await client.invoke(name, result.body, invoke_options)
        except FaasClientError as e:
            logger.error(
                f"Compose stopped at stage {stage}/{len(names)}",
                extra={
                    "function_name": name,
                    "stage": stage,
                    "error_type": type(e).__name__,
                },
            )
            raise

    return result
