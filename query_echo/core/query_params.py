"""Query Parameters — strict validation and required-parameter lookup.

Invariants:
    - A '%' must introduce exactly two hex digits; anything else is rejected
    - Percent-escapes must decode to valid UTF-8 (no replacement characters)
    - lookup_parameter never returns a default: absence raises MissingParameterError

Design Decisions:
    - Decoding runs on the raw query string rather than the framework's lenient
      view, so a malformed request is rejected instead of partially decoded
    - Form convention kept: '+' decodes to a space, same as the hosting runtime
"""

import re
from typing import Mapping
from urllib.parse import parse_qsl

from query_echo.core.errors import (
    ErrorContext, MalformedQueryError, MissingParameterError,
)

_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def ensure_well_formed(raw_query: str, context: ErrorContext | None = None) -> None:
    """Raise MalformedQueryError if any '%' is not a complete escape."""
    match = _MALFORMED_ESCAPE.search(raw_query)
    if match:
        raise MalformedQueryError(
            f"invalid percent-escape at offset {match.start()}", context,
        )


def decode_query(
    raw_query: str, context: ErrorContext | None = None,
) -> dict[str, str]:
    """Decode a well-formed query string. Repeated keys: last value wins."""
    ensure_well_formed(raw_query, context)
    try:
        pairs = parse_qsl(raw_query, keep_blank_values=True, errors="strict")
    except UnicodeDecodeError as exc:
        raise MalformedQueryError(
            "percent-escapes are not valid UTF-8", context,
        ) from exc
    return dict(pairs)


def lookup_parameter(
    params: Mapping[str, str], name: str, context: ErrorContext | None = None,
) -> str:
    """Return the decoded value of a required parameter."""
    if name not in params:
        raise MissingParameterError(name, context)
    return params[name]
