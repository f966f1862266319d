"""Route Table — the explicit (method, path) → handler mapping of the service.

Invariants:
    - ROUTES is the only source of registered endpoints
    - Unmatched paths and methods fall through to the framework defaults (404/405)

Design Decisions:
    - Explicit table registered by create_app over decorator auto-discovery:
      the full API surface is readable (and testable) in one place
"""

from typing import Any, Awaitable, Callable, Iterable, NamedTuple

from fastapi import FastAPI

from query_echo.api.routes import sample


class Route(NamedTuple):
    method: str
    path: str
    endpoint: Callable[..., Awaitable[Any]]


ROUTES: tuple[Route, ...] = (
    Route("GET", "/api/sample", sample.sample),
)


def register_routes(app: FastAPI, routes: Iterable[Route] = ROUTES) -> None:
    """Register every route of the table on the app."""
    for route in routes:
        app.add_api_route(
            route.path, route.endpoint, methods=[route.method],
        )
