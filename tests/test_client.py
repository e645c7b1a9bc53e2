from __future__ import annotations

import os
from pathlib import Path

import httpx
import pytest

from spotctl.client import AsyncSpotClient, SpotClient, connect
from spotctl.config import ClientConfig
from spotctl.errors import ValidationError

REGIONS = {"items": [{"metadata": {"name": "uk-lon-1"}}, {"metadata": {"name": "us-central-dfw-1"}}]}


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in list(os.environ):
        if key.startswith(("SPOTCTL_", "RACKSPACE_SPOT_")):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


def _handler(seen: dict[str, int]):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/oauth/token":
            seen["oauth"] += 1
            return httpx.Response(200, json={"id_token": "id-token", "expires_in": 3600})
        if request.url.path == "/apis/auth.ngpc.rxt.io/v1/organizations":
            seen["orgs"] += 1
            assert request.headers["Authorization"] == "Bearer id-token"
            return httpx.Response(200, json={"organizations": [{"id": "org_1", "name": "acme"}]})
        if request.url.path == "/apis/ngpc.rxt.io/v1/regions":
            return httpx.Response(200, json=REGIONS)
        return httpx.Response(404, json={"code": 404, "message": "not found"})

    return handler


@pytest.mark.asyncio
async def test_async_client_fetches_token_once_and_calls_api() -> None:
    seen = {"oauth": 0, "orgs": 0}
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(_handler(seen)))

    async with AsyncSpotClient(ClientConfig(refresh_token="refresh-token"), http_client=http_client) as client:
        first = await client.organizations.list()
        second = await client.organizations.list()
        token = await client.authenticate()

    assert first.organizations[0].name == "acme"
    assert second == first
    assert token == "id-token"
    assert seen == {"oauth": 1, "orgs": 2}
    assert not http_client.is_closed
    await http_client.aclose()


@pytest.mark.asyncio
async def test_missing_refresh_token_fails_before_network() -> None:
    seen = {"oauth": 0, "orgs": 0}
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(_handler(seen)))

    async with AsyncSpotClient(ClientConfig(), http_client=http_client) as client:
        with pytest.raises(ValidationError, match="refresh token is required"):
            await client.regions.list()

    assert seen == {"oauth": 0, "orgs": 0}
    await http_client.aclose()


@pytest.mark.asyncio
async def test_owned_http_client_uses_configured_timeout() -> None:
    async with connect(ClientConfig(refresh_token="t", timeout=12)) as client:
        http_client = client._http
        assert http_client.timeout == httpx.Timeout(12)

    assert http_client.is_closed


def test_client_resolves_config_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPOTCTL_CONFIG", str(tmp_path / "missing.yaml"))
    monkeypatch.setenv("SPOTCTL_NAMESPACE", "org-env")
    monkeypatch.setenv("SPOTCTL_REGION", "uk-lon-1")

    client = AsyncSpotClient(refresh_token="kwarg-token", region="us-east-iad-1")

    assert client.namespace == "org-env"
    assert client.region == "us-east-iad-1"
    assert client.refresh_token == "kwarg-token"
    assert client.token_manager.is_valid()


def test_keyword_overrides_apply_to_explicit_config() -> None:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200)))

    client = AsyncSpotClient(ClientConfig(namespace="org-a"), http_client=http_client, namespace="org-b")

    assert client.namespace == "org-b"
    assert client.config.namespace == "org-b"


def test_sync_client_wraps_async_services() -> None:
    seen = {"oauth": 0, "orgs": 0}
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(_handler(seen)))

    with SpotClient(ClientConfig(refresh_token="refresh-token", namespace="org-1"), http_client=http_client) as client:
        regions = client.regions.list()
        orgs = client.organizations.list()
        assert client.namespace == "org-1"

    assert [item.metadata.name for item in regions.items] == ["uk-lon-1", "us-central-dfw-1"]
    assert orgs.organizations[0].id == "org_1"
    assert seen["oauth"] == 1


@pytest.mark.asyncio
async def test_sync_client_refuses_to_run_inside_event_loop() -> None:
    seen = {"oauth": 0, "orgs": 0}
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(_handler(seen)))
    client = SpotClient(ClientConfig(refresh_token="t"), http_client=http_client)

    with pytest.raises(RuntimeError, match="active event loop"):
        client.regions.list()

    regions = await client.aregions.list()
    assert len(regions.items) == 2
    await http_client.aclose()
