from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import httpx
import pytest
from typer.testing import CliRunner

from spotctl.cli import CLIState, app
from spotctl.client import AsyncSpotClient
from spotctl.config import ClientConfig

API = "/apis/ngpc.rxt.io/v1"

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in list(os.environ):
        if key.startswith(("SPOTCTL_", "RACKSPACE_SPOT_")):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


class FakeSpotAPI:
    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Any] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, response: Any) -> None:
        self.routes[(method, path)] = response

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.url.path == "/oauth/token":
            return httpx.Response(200, json={"id_token": "id-token", "expires_in": 3600})
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"code": 404, "message": "resource not found"})
        if callable(route):
            return route(request)
        return httpx.Response(200, json=route)

    def state(self) -> CLIState:
        def build(config: ClientConfig) -> AsyncSpotClient:
            client = AsyncSpotClient(config, http_client=httpx.AsyncClient(transport=httpx.MockTransport(self)))
            client._owns_http = True
            return client

        return CLIState(client_factory=build)


@pytest.fixture
def api() -> FakeSpotAPI:
    return FakeSpotAPI()


def _invoke(api: FakeSpotAPI, *args: str, input: str | None = None):
    return runner.invoke(
        app,
        ["--refresh-token", "refresh-token", "--namespace", "org-test", *args],
        input=input,
        obj=api.state(),
    )


def test_version_command() -> None:
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "version: 0.1.0" in result.stdout
    assert "commit hash:" in result.stdout


def test_version_flag() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "spotctl 0.1.0"


def test_regions_get_json(api: FakeSpotAPI) -> None:
    api.add("GET", f"{API}/regions/uk-lon-1", {"metadata": {"name": "uk-lon-1"}, "spec": {"country": "United Kingdom"}})

    result = _invoke(api, "regions", "get", "uk-lon-1", "-o", "json")

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["spec"]["country"] == "United Kingdom"


def test_regions_list_table(api: FakeSpotAPI) -> None:
    api.add(
        "GET",
        f"{API}/regions",
        {"items": [{"metadata": {"name": "uk-lon-1"}, "spec": {"country": "UK", "provider": {"providerType": "ospc"}}}]},
    )

    result = _invoke(api, "--no-pager", "regions", "list")

    assert result.exit_code == 0, result.output
    assert "NAME" in result.stdout
    assert "uk-lon-1" in result.stdout
    assert "ospc" in result.stdout


def test_empty_list_renders_per_format(api: FakeSpotAPI) -> None:
    api.add("GET", f"{API}/namespaces/org-test/cloudspaces", {"items": []})

    as_json = _invoke(api, "cloudspaces", "list", "-o", "json")
    as_table = _invoke(api, "cloudspaces", "list")

    assert json.loads(as_json.stdout) == []
    assert "No cloudspaces found in namespace org-test" in as_table.stdout


def test_global_output_flag_selects_yaml(api: FakeSpotAPI) -> None:
    api.add("GET", f"{API}/namespaces/org-test/spotnodepools/pool-1", {"metadata": {"name": "pool-1"}})

    result = _invoke(api, "-o", "yaml", "spotnodepool", "get", "pool-1")

    assert result.exit_code == 0, result.output
    assert "name: pool-1" in result.stdout


def test_api_error_exits_non_zero(api: FakeSpotAPI) -> None:
    result = _invoke(api, "cloudspaces", "get", "missing")

    assert result.exit_code == 1
    assert "error: API error 404: resource not found" in result.output


def test_missing_refresh_token_is_reported(api: FakeSpotAPI) -> None:
    result = runner.invoke(app, ["regions", "list"], obj=api.state())

    assert result.exit_code == 1
    assert "refresh token is required" in result.output
    assert api.requests == []


def test_edit_prompts_and_can_be_declined(api: FakeSpotAPI, tmp_path: Path) -> None:
    patch_file = tmp_path / "patch.json"
    patch_file.write_text(json.dumps([{"op": "replace", "path": "/spec/desired", "value": 3}]), encoding="utf-8")

    result = _invoke(api, "spotnodepool", "edit", "pool-1", "--file", str(patch_file), input="n\n")

    assert result.exit_code == 0, result.output
    assert "Applying 1 patch operation(s):" in result.stdout
    assert "1. replace /spec/desired = 3" in result.stdout
    assert "Patch operation cancelled." in result.stdout
    assert api.requests == []


def test_edit_with_confirm_sends_patch(api: FakeSpotAPI, tmp_path: Path) -> None:
    patch_file = tmp_path / "patch.json"
    patch_file.write_text(json.dumps([{"op": "replace", "path": "/spec/webhook", "value": "https://x"}]), encoding="utf-8")

    def patch(request: httpx.Request) -> httpx.Response:
        assert request.headers["Content-Type"] == "application/json-patch+json"
        return httpx.Response(200, json={"metadata": {"name": "cs1"}, "spec": {"webhook": "https://x"}})

    api.add("PATCH", f"{API}/namespaces/org-test/cloudspaces/cs1", patch)

    result = _invoke(api, "cloudspaces", "edit", "cs1", "--file", str(patch_file), "--confirm", "-o", "json")

    assert result.exit_code == 0, result.output
    assert len(api.requests) == 1


def test_edit_rejects_bad_patch_file(api: FakeSpotAPI, tmp_path: Path) -> None:
    patch_file = tmp_path / "patch.json"
    patch_file.write_text('{"op": "replace"}', encoding="utf-8")

    result = _invoke(api, "cloudspaces", "edit", "cs1", "--file", str(patch_file), "--confirm")

    assert result.exit_code == 1
    assert "must be an array" in result.output


def test_delete_confirmed(api: FakeSpotAPI) -> None:
    api.add("DELETE", f"{API}/namespaces/org-test/cloudspaces/cs1", lambda request: httpx.Response(204))

    result = _invoke(api, "cloudspaces", "delete", "cs1", "--confirm")

    assert result.exit_code == 0, result.output
    assert "Cloudspace 'cs1' deleted successfully from namespace 'org-test'" in result.stdout


def test_delete_declined(api: FakeSpotAPI) -> None:
    result = _invoke(api, "spotnodepool", "delete", "pool-1", input="n\n")

    assert result.exit_code == 0
    assert "Delete cancelled" in result.stdout
    assert api.requests == []


def test_cloudspace_create_requires_region(api: FakeSpotAPI) -> None:
    result = _invoke(api, "cloudspaces", "create", "cs1", "--kubernetes-version", "1.31.1")

    assert result.exit_code != 0
    assert api.requests == []


def test_spot_nodepool_create_from_flags(api: FakeSpotAPI) -> None:
    sent: dict[str, Any] = {}

    def create(request: httpx.Request) -> httpx.Response:
        sent.update(json.loads(request.content))
        return httpx.Response(201, json=sent)

    api.add("POST", f"{API}/namespaces/org-test/spotnodepools", create)

    result = _invoke(
        api,
        "spotnodepool",
        "create",
        "pool-1",
        "--server-class",
        "gp.vs1.medium-lon",
        "--cloudspace",
        "cs1",
        "--desired",
        "2",
        "--bid-price",
        "$0.05",
        "--autoscaling",
        "--autoscaling-min-nodes",
        "1",
        "--autoscaling-max-nodes",
        "4",
        "-o",
        "json",
    )

    assert result.exit_code == 0, result.output
    assert sent["spec"]["bidPrice"] == "0.05"
    assert sent["spec"]["autoscaling"] == {"enabled": True, "minNodes": 1, "maxNodes": 4}


def test_config_set_and_show(tmp_path: Path) -> None:
    config_file = tmp_path / "config.yaml"

    set_ns = runner.invoke(app, ["--config", str(config_file), "config", "set", "namespace", "org-x"])
    set_token = runner.invoke(app, ["--config", str(config_file), "config", "set", "refresh-token", "abcdefghijkl"])
    show = runner.invoke(app, ["--config", str(config_file), "config", "show"])

    assert set_ns.exit_code == 0, set_ns.output
    assert "Configuration saved: namespace = org-x" in set_ns.stdout
    assert "Configuration saved: refresh-token = abcdefgh***" in set_token.stdout
    assert show.exit_code == 0, show.output
    assert "refresh-token: abcdefgh***" in show.stdout
    assert "namespace: org-x" in show.stdout
    assert f"Config file: {config_file}" in show.stdout
    assert "abcdefghijkl" not in show.stdout


def test_config_set_rejects_unknown_key(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--config", str(tmp_path / "config.yaml"), "config", "set", "colour", "blue"])

    assert result.exit_code == 1
    assert "invalid configuration key 'colour'" in result.output
    assert not (tmp_path / "config.yaml").exists()
