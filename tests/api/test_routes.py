"""Route table — exactly one endpoint, everything else falls through.

Invariants:
    - ROUTES holds a single GET /api/sample entry
    - Unknown paths → 404, other methods on /api/sample → 405
    - No docs or schema endpoints are exposed
"""

import pytest
from fastapi import FastAPI

from query_echo.api.routes import ROUTES, Route, register_routes
from query_echo.api.routes.sample import sample


def test_route_table_has_single_sample_route():
    assert ROUTES == (Route("GET", "/api/sample", sample),)


def test_register_routes_adds_table_entries():
    app = FastAPI()
    register_routes(app)

    registered = {
        (method, route.path)
        for route in app.routes
        if route.path == "/api/sample"
        for method in route.methods
    }
    assert registered == {("GET", "/api/sample")}


async def test_unknown_path_returns_404(client):
    res = await client.get("/api/other?requestQuery=x")
    assert res.status_code == 404


async def test_trailing_segment_is_not_matched(client):
    res = await client.get("/api/sample/extra?requestQuery=x")
    assert res.status_code == 404


@pytest.mark.parametrize("method", ["POST", "PUT", "DELETE"])
async def test_other_methods_return_405(client, method):
    res = await client.request(method, "/api/sample?requestQuery=x")
    assert res.status_code == 405


@pytest.mark.parametrize("path", ["/docs", "/redoc", "/openapi.json"])
async def test_docs_endpoints_are_disabled(client, path):
    res = await client.get(path)
    assert res.status_code == 404
