"""Sample Echo — reads requestQuery and echoes its decoded value as JSON.

Invariants:
    - requestQuery is required: absence → MissingParameterError (400), never a crash
    - The echoed value is the percent-decoded string ('+' already decoded to space)
    - No side effects beyond logging
"""

import logging

from fastapi import Request

from query_echo.core.errors import ErrorContext
from query_echo.core.query_params import decode_query, lookup_parameter
from query_echo.schemas.echo import EchoResponse, REQUEST_QUERY_PARAM

logger = logging.getLogger(__name__)


async def sample(request: Request) -> EchoResponse:
    """Echo the requestQuery parameter back to the caller."""
    context = ErrorContext(path=request.url.path)
    raw_query = request.scope.get("query_string", b"").decode("latin-1")
    params = decode_query(raw_query, context)
    value = lookup_parameter(params, REQUEST_QUERY_PARAM, context)
    logger.debug(
        f"Echoing {REQUEST_QUERY_PARAM}={value!r}",
        extra={"path": request.url.path, "parameter": REQUEST_QUERY_PARAM},
    )
    return EchoResponse(received_query=value)
