"""Request transform tests — encode_plus_sign and the transport pipeline.

Tests cover:
    - No literal '+' survives encode_plus_sign; applying it twice changes nothing
    - Requests without '+' pass through untouched
    - TransformingTransport applies transforms in order before transmission
"""

import httpx

from query_echo.client import (
    TransformingTransport, apply_transforms, create_client, encode_plus_sign,
)


def _request(url, **kwargs):
    return httpx.Request("GET", url, **kwargs)


# --- encode_plus_sign ---------------------------------------------------------

def test_literal_plus_is_rewritten():
    req = encode_plus_sign(_request("http://test/api/sample?requestQuery=2022-11-20T00:00:00+09:00"))
    assert str(req.url) == "http://test/api/sample?requestQuery=2022-11-20T00:00:00%2B09:00"
    assert b"+" not in req.url.query


def test_plus_anywhere_in_uri_is_rewritten():
    req = encode_plus_sign(_request("http://test/hotel+list?q=a+b+c"))
    assert "+" not in str(req.url)


def test_idempotent():
    once = encode_plus_sign(_request("http://test/s?q=a+b"))
    twice = encode_plus_sign(once)
    assert str(twice.url) == str(once.url)
    assert "%252B" not in str(twice.url)


def test_request_without_plus_is_returned_unchanged():
    req = _request("http://test/s?q=a%2Bb")
    assert encode_plus_sign(req) is req


def test_method_and_headers_are_preserved():
    req = httpx.Request("DELETE", "http://test/s?q=a+b", headers={"X-Trace": "abc"})
    out = encode_plus_sign(req)
    assert out.method == "DELETE"
    assert out.headers["X-Trace"] == "abc"


def test_form_encoded_space_from_params_becomes_plus():
    req = encode_plus_sign(httpx.Request("GET", "http://test/s", params={"q": "a b+c"}))
    assert req.url.query == b"q=a%2Bb%2Bc"


# --- pipeline -----------------------------------------------------------------

def test_apply_transforms_runs_in_order():
    seen = []

    def tag(name):
        def transform(request):
            seen.append(name)
            return request
        return transform

    apply_transforms(_request("http://test/"), [tag("first"), tag("second")])
    assert seen == ["first", "second"]


async def test_transport_sends_transformed_request():
    sent = []

    def handler(request):
        sent.append(request)
        return httpx.Response(200)

    transport = TransformingTransport(httpx.MockTransport(handler), [encode_plus_sign])
    async with httpx.AsyncClient(base_url="http://test", transport=transport) as c:
        await c.get("/api/sample?requestQuery=2022-11-20T00:00:00+09:00")

    assert str(sent[0].url) == "http://test/api/sample?requestQuery=2022-11-20T00:00:00%2B09:00"


async def test_create_client_without_transforms_sends_plus():
    sent = []

    def handler(request):
        sent.append(request)
        return httpx.Response(200)

    async with create_client("http://test", transport=httpx.MockTransport(handler)) as c:
        await c.get("/s?q=a+b")

    assert sent[0].url.query == b"q=a+b"
