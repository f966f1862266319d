"""Client Layer — URI building and the request-transform pipeline.

Invariants:
    - Nothing in the service (api/, core/) imports from client/
"""

from query_echo.client.transforms import (
    RequestTransform,
    TransformingTransport,
    apply_transforms,
    create_client,
    encode_plus_sign,
)
from query_echo.client.uri_builder import UriBuilder

__all__ = [
    "RequestTransform",
    "TransformingTransport",
    "UriBuilder",
    "apply_transforms",
    "create_client",
    "encode_plus_sign",
]
