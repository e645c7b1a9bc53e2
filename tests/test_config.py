from __future__ import annotations

import json
import os
import stat
from pathlib import Path

import pytest

from spotctl.config import ClientConfig, load_config, locate_config, resolve_config, save_config
from spotctl.errors import ConfigError


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in list(os.environ):
        if key.startswith(("SPOTCTL_", "RACKSPACE_SPOT_")):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_yaml_config_uses_kebab_case_keys(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "config.yaml",
        "refresh-token: file-token\nregion: uk-lon-1\nnamespace: org-file\nbase-url: https://example.test/apis\n",
    )

    resolved = resolve_config(path)

    assert resolved.source == "explicit-path"
    assert resolved.data.refresh_token_value == "file-token"
    assert resolved.data.region == "uk-lon-1"
    assert resolved.data.namespace == "org-file"
    assert resolved.data.base_url == "https://example.test/apis"
    assert resolved.data.timeout == 30


def test_environment_overrides_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _write(tmp_path / "config.yaml", "refresh-token: file-token\nnamespace: org-file\nregion: uk-lon-1\n")
    monkeypatch.setenv("SPOTCTL_NAMESPACE", "org-env")
    monkeypatch.setenv("RACKSPACE_SPOT_REFRESH_TOKEN", "env-token")
    monkeypatch.setenv("SPOTCTL_TIMEOUT", "12.5")

    data = resolve_config(path).data

    assert data.namespace == "org-env"
    assert data.refresh_token_value == "env-token"
    assert data.timeout == 12.5
    assert data.region == "uk-lon-1"


def test_explicit_overrides_win_and_none_is_ignored(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _write(tmp_path / "config.yaml", "namespace: org-file\nregion: uk-lon-1\n")
    monkeypatch.setenv("SPOTCTL_NAMESPACE", "org-env")

    data = resolve_config(path, {"namespace": "org-flag", "region": None}).data

    assert data.namespace == "org-flag"
    assert data.region == "uk-lon-1"


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    resolved = load_config(tmp_path / "absent.yaml")

    assert resolved.source == "explicit-path:missing"
    assert resolved.data == ClientConfig()
    assert resolved.data.refresh_token_value is None


def test_default_location_is_under_home(tmp_path: Path) -> None:
    path, source = locate_config()

    assert source == "default-path"
    assert path == tmp_path / "home" / ".config" / "spotctl" / "config.yaml"


def test_config_path_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _write(tmp_path / "custom.yaml", "namespace: org-custom\n")
    monkeypatch.setenv("SPOTCTL_CONFIG", str(path))

    resolved = resolve_config()

    assert resolved.source == "env:SPOTCTL_CONFIG"
    assert resolved.data.namespace == "org-custom"


def test_json_config_accepts_camel_case(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "config.json",
        json.dumps({"refreshToken": "json-token", "baseUrl": "https://json.test/apis", "noPager": True}),
    )

    data = resolve_config(path).data

    assert data.refresh_token_value == "json-token"
    assert data.base_url == "https://json.test/apis"
    assert data.no_pager is True


def test_toml_config(tmp_path: Path) -> None:
    path = _write(tmp_path / "config.toml", 'refresh-token = "toml-token"\ntimeout = 10\noutput-format = "yaml"\n')

    data = resolve_config(path).data

    assert data.refresh_token_value == "toml-token"
    assert data.timeout == 10
    assert data.output_format == "yaml"


@pytest.mark.parametrize(
    "text",
    [
        "namespace: [unterminated\n",
        "- just\n- a list\n",
        "timeout: -1\n",
        "output-format: xml\n",
    ],
)
def test_invalid_config_raises_config_error(tmp_path: Path, text: str) -> None:
    with pytest.raises(ConfigError):
        resolve_config(_write(tmp_path / "config.yaml", text))


def test_blank_namespace_is_unset() -> None:
    assert ClientConfig(namespace="  ").namespace is None


def test_require_credentials() -> None:
    with pytest.raises(ConfigError, match="refresh token is required"):
        ClientConfig().require_credentials()

    cfg = ClientConfig(refresh_token="abc")
    assert cfg.require_credentials() is cfg


def test_refresh_token_is_masked_in_repr() -> None:
    assert "super-secret" not in repr(ClientConfig(refresh_token="super-secret"))


@pytest.mark.parametrize("name", ["config.yaml", "config.json", "config.toml"])
def test_save_config_round_trip(tmp_path: Path, name: str) -> None:
    target = tmp_path / "nested" / name
    cfg = ClientConfig(refresh_token="secret-token", namespace="org-save", region="us-east-iad-1")

    written = save_config(cfg, path=target)

    assert written == target.resolve()
    assert stat.S_IMODE(target.stat().st_mode) == 0o600
    reloaded = load_config(target).data
    assert reloaded.refresh_token_value == "secret-token"
    assert reloaded.namespace == "org-save"
    assert reloaded.region == "us-east-iad-1"


def test_saved_yaml_uses_kebab_case(tmp_path: Path) -> None:
    target = save_config(ClientConfig(refresh_token="t", output_format="json"), path=tmp_path / "config.yaml")

    text = target.read_text(encoding="utf-8")

    assert "refresh-token: t" in text
    assert "output-format: json" in text
    assert "namespace" not in text
