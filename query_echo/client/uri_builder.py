"""URI Builder — assembles request URIs from a path, query params and template variables.

Invariants:
    - Literal template text is encoded only where a character is illegal in its
      component: '+', ':' and existing '%XX' escapes pass through untouched,
      a '%' that starts no escape becomes %25
    - Template variable values are strictly encoded: everything outside the
      unreserved set (A-Z a-z 0-9 - . _ ~) becomes %XX, so '+' → %2B
    - Positional values fill variables in order of first appearance; a repeated
      name reuses its value
    - A variable without a value raises MissingTemplateVariableError before any
      URI is returned (no partial results)

Design Decisions:
    - Two encoding strengths mirror the two ways a value enters a URI: written into
      the template by the caller, or substituted into a {placeholder}
    - A literal '+' stays literal; the server reads it as a space under the form
      convention. Callers wanting '+' either use a placeholder, pre-encode it as
      %2B, or install encode_plus_sign on the client
"""

import re
from typing import Any, Iterator, Mapping
from urllib.parse import quote

from query_echo.core.errors import MissingTemplateVariableError

_VARIABLE = re.compile(r"\{([^{}/]+)\}")

_SUB_DELIMS = "!$&'()*+,;="
_PCHAR = _SUB_DELIMS + ":@"
# '%' kept so pre-encoded escapes in literal text survive; stray ones are
# rewritten to %25 first
_PATH_SAFE = _PCHAR + "/%"
_QUERY_PARAM_SAFE = _PCHAR.replace("&", "").replace("=", "") + "/?%"
_STRAY_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")


def encode_literal(text: str, safe: str) -> str:
    """Encode characters that are illegal in the component; keep the rest."""
    return quote(_STRAY_PERCENT.sub("%25", text), safe=safe)


def encode_strict(value: Any) -> str:
    """Encode every character outside the unreserved set."""
    return quote("" if value is None else str(value), safe="")


class _Variables:
    """Resolves template variables from positional values or a single mapping."""

    def __init__(self, values: tuple[Any, ...]):
        self._positional: Iterator[Any] | None
        if len(values) == 1 and isinstance(values[0], Mapping):
            self._resolved = dict(values[0])
            self._positional = None
        else:
            self._resolved = {}
            self._positional = iter(values)

    def resolve(self, name: str) -> Any:
        if name in self._resolved:
            return self._resolved[name]
        if self._positional is None:
            raise MissingTemplateVariableError(name)
        try:
            value = next(self._positional)
        except StopIteration:
            raise MissingTemplateVariableError(name) from None
        self._resolved[name] = value
        return value


def expand(template: str, safe: str, variables: _Variables) -> str:
    """Encode literal text of template and substitute its {variables}."""
    parts = []
    position = 0
    for match in _VARIABLE.finditer(template):
        parts.append(encode_literal(template[position:match.start()], safe))
        parts.append(encode_strict(variables.resolve(match.group(1))))
        position = match.end()
    parts.append(encode_literal(template[position:], safe))
    return "".join(parts)


class UriBuilder:
    """Fluent builder for a request URI (path plus query string).

    Usage:
        UriBuilder.from_path("/api/sample").query_param("requestQuery", "{q}").build("a+b")
        # → "/api/sample?requestQuery=a%2Bb"
    """

    def __init__(self, path: str = ""):
        self._path = path
        self._query: list[tuple[str, str | None]] = []

    @classmethod
    def from_path(cls, path: str) -> "UriBuilder":
        return cls(path)

    def path(self, path: str) -> "UriBuilder":
        """Append to the current path."""
        self._path += path
        return self

    def query_param(self, name: str, *values: Any) -> "UriBuilder":
        """Add a query parameter; no values adds a bare name."""
        if not values:
            self._query.append((name, None))
        for value in values:
            self._query.append((name, str(value)))
        return self

    def build(self, *values: Any) -> str:
        """Expand and encode the URI.

        Args:
            values: positional variable values, or a single name→value mapping.

        Raises:
            MissingTemplateVariableError: a placeholder has no value.
        """
        variables = _Variables(values)
        uri = expand(self._path, _PATH_SAFE, variables)
        pairs = []
        for name, value in self._query:
            encoded_name = expand(name, _QUERY_PARAM_SAFE, variables)
            if value is None:
                pairs.append(encoded_name)
            else:
                pairs.append(
                    f"{encoded_name}={expand(value, _QUERY_PARAM_SAFE, variables)}",
                )
        if pairs:
            uri += "?" + "&".join(pairs)
        return uri
