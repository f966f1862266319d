"""Request Transforms — ordered Request → Request rewrites applied before transmission.

Invariants:
    - Transforms run in declaration order on the fully assembled request
    - encode_plus_sign leaves no literal '+' in the URI and is idempotent
      ('%2B' contains no '+', so a second pass never produces '%252B')
    - Client-side only: the service never sees or depends on these
    - Spaces that httpx form-encodes as '+' (params=) become literal '+'

Design Decisions:
    - Pipeline lives in a wrapping transport rather than event hooks: hooks may
      only mutate a request in place, a transport can hand a new one downstream
"""

import logging
from typing import Callable, Iterable

import httpx

logger = logging.getLogger(__name__)

RequestTransform = Callable[[httpx.Request], httpx.Request]


def with_url(request: httpx.Request, url: str) -> httpx.Request:
    """Copy request with a replaced URL; headers, body and extensions kept."""
    return httpx.Request(
        request.method,
        url,
        headers=request.headers,
        stream=request.stream,
        extensions=request.extensions,
    )


def encode_plus_sign(request: httpx.Request) -> httpx.Request:
    """Rewrite every literal '+' of the serialized URI to %2B.

    The rewrite cannot tell a literal '+' from a form-encoded space: httpx
    serializes spaces in params= as '+', so through this filter
    params={"q": "a b"} arrives as "a+b". Send spaces as %20 (a template
    variable or a pre-encoded value) when the filter is installed.
    """
    url = str(request.url)
    if "+" not in url:
        return request
    encoded = url.replace("+", "%2B")
    logger.debug(f"Rewrote '+' in request URI: {url} -> {encoded}")
    return with_url(request, encoded)


def apply_transforms(
    request: httpx.Request, transforms: Iterable[RequestTransform],
) -> httpx.Request:
    for transform in transforms:
        request = transform(request)
    return request


class TransformingTransport(httpx.AsyncBaseTransport):
    """Applies a transform pipeline, then delegates to the wrapped transport."""

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport,
        transforms: Iterable[RequestTransform],
    ):
        self._transport = transport
        self._transforms = tuple(transforms)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        request = apply_transforms(request, self._transforms)
        return await self._transport.handle_async_request(request)

    async def aclose(self) -> None:
        await self._transport.aclose()


def create_client(
    base_url: str,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    transforms: Iterable[RequestTransform] = (),
    **kwargs,
) -> httpx.AsyncClient:
    """Build an AsyncClient whose requests pass through transforms."""
    transport = transport or httpx.AsyncHTTPTransport()
    transforms = tuple(transforms)
    if transforms:
        transport = TransformingTransport(transport, transforms)
    return httpx.AsyncClient(base_url=base_url, transport=transport, **kwargs)
