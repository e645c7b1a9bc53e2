from __future__ import annotations

import json

import httpx
import pytest

from spotctl.errors import APIError, ErrorKind, InternalError, TransportError
from spotctl.http import APIVersion, SpotTransport, all_api_versions, build_url, decode_api_error, is_known_api_version

BASE = "https://spot.rackspace.com/apis"


async def _token() -> str:
    return "bearer-token"


def _transport(handler) -> tuple[SpotTransport, httpx.AsyncClient]:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return SpotTransport(base_url=BASE, token_provider=_token, http_client=http_client), http_client


def test_build_url_places_api_version_between_base_and_endpoint() -> None:
    assert build_url(BASE, APIVersion.DEFAULT, "/regions") == f"{BASE}/ngpc.rxt.io/v1/regions"
    assert build_url(BASE + "/", APIVersion.AUTH, "organizations") == f"{BASE}/auth.ngpc.rxt.io/v1/organizations"
    assert build_url(BASE, "metrics.ngpc.rxt.io/v1", "/events") == f"{BASE}/metrics.ngpc.rxt.io/v1/events"


def test_known_api_versions() -> None:
    assert set(all_api_versions()) == {APIVersion.DEFAULT, APIVersion.AUTH}
    assert is_known_api_version("auth.ngpc.rxt.io/v1")
    assert not is_known_api_version("ngpc.rxt.io/v2")


def test_decode_api_error_keeps_server_envelope() -> None:
    error = decode_api_error(
        404,
        b'{"code": 404, "message": "cloudspace not found", "details": "namespace org-x"}',
    )
    assert error.code == 404
    assert error.message == "cloudspace not found"
    assert str(error) == "API error 404: cloudspace not found (namespace org-x)"


def test_decode_api_error_falls_back_to_status_code() -> None:
    error = decode_api_error(409, b'{"message": "already exists"}')
    assert error.code == 409
    assert error.status_code == 409
    assert str(error) == "API error 409: already exists"


def test_decode_api_error_uses_raw_body_when_not_json() -> None:
    error = decode_api_error(502, b"Bad Gateway")
    assert error.code == 502
    assert error.message == "Bad Gateway"

    empty = decode_api_error(500, b"")
    assert empty.message == "HTTP 500"


@pytest.mark.asyncio
async def test_dispatch_sets_auth_and_client_headers() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == f"{BASE}/ngpc.rxt.io/v1/namespaces/org-1/cloudspaces"
        assert request.headers["Authorization"] == "Bearer bearer-token"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["User-Agent"].startswith("spotctl/")
        assert json.loads(request.content) == {"metadata": {"name": "cs1"}}
        return httpx.Response(201, json={"ok": True})

    transport, http_client = _transport(handler)
    async with http_client:
        response = await transport.dispatch("post", "/namespaces/org-1/cloudspaces", body={"metadata": {"name": "cs1"}})
        try:
            assert response.status_code == 201
            assert json.loads(await response.aread()) == {"ok": True}
        finally:
            await response.aclose()


@pytest.mark.asyncio
async def test_dispatch_switches_to_auth_api_without_second_client() -> None:
    urls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        urls.append(str(request.url))
        return httpx.Response(200, json={})

    transport, http_client = _transport(handler)
    async with http_client:
        for version in (APIVersion.DEFAULT, APIVersion.AUTH):
            response = await transport.dispatch("GET", "/organizations", api_version=version)
            await response.aclose()

    assert urls == [
        f"{BASE}/ngpc.rxt.io/v1/organizations",
        f"{BASE}/auth.ngpc.rxt.io/v1/organizations",
    ]


@pytest.mark.asyncio
async def test_dispatch_uses_requested_content_type() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["Content-Type"] == "application/json-patch+json"
        return httpx.Response(200, json={})

    transport, http_client = _transport(handler)
    async with http_client:
        response = await transport.dispatch(
            "PATCH",
            "/namespaces/org-1/cloudspaces/cs1",
            body=[{"op": "remove", "path": "/spec/webhook"}],
            content_type="application/json-patch+json",
        )
        await response.aclose()


@pytest.mark.asyncio
async def test_dispatch_maps_non_2xx_to_api_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"code": 404, "message": "cloudspace not found"})

    transport, http_client = _transport(handler)
    async with http_client:
        with pytest.raises(APIError) as exc_info:
            await transport.dispatch("GET", "/namespaces/org-1/cloudspaces/missing")

    error = exc_info.value
    assert error.kind is ErrorKind.API
    assert error.code == 404
    assert error.message == "cloudspace not found"
    assert error.operation == "GET"
    assert error.endpoint == "/namespaces/org-1/cloudspaces/missing"


@pytest.mark.asyncio
async def test_dispatch_network_failure_has_no_code() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    transport, http_client = _transport(handler)
    async with http_client:
        with pytest.raises(TransportError) as exc_info:
            await transport.dispatch("GET", "/regions")

    assert exc_info.value.code is None
    assert isinstance(exc_info.value.cause, httpx.ReadTimeout)


@pytest.mark.asyncio
async def test_dispatch_unserializable_body_is_internal_error() -> None:
    transport, http_client = _transport(lambda request: httpx.Response(200))
    async with http_client:
        with pytest.raises(InternalError, match="marshal"):
            await transport.dispatch("POST", "/regions", body={"bad": object()})
