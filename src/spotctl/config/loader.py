from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import tomli_w
import yaml
from pydantic import ValidationError as PydanticValidationError

from spotctl.config.models import ClientConfig, ResolvedConfig
from spotctl.constants import DEFAULT_CONFIG_DIR
from spotctl.errors import ConfigError
from spotctl.settings import RuntimeSettings

logger = logging.getLogger(__name__)


def _default_config_dir() -> Path:
    return Path(DEFAULT_CONFIG_DIR).expanduser()


def default_config_candidates() -> list[Path]:
    base = _default_config_dir()
    return [
        base / "config.yaml",
        base / "config.yml",
        base / "config.toml",
        base / "config.json",
    ]


def _decode_raw(raw: str, *, suffix: str) -> dict[str, Any]:
    if suffix in {".yaml", ".yml", ""}:
        parsed = yaml.safe_load(raw) or {}
    elif suffix == ".json":
        parsed = json.loads(raw) if raw.strip() else {}
    elif suffix == ".toml":
        parsed = tomllib.loads(raw)
    else:
        raise ConfigError(f"unsupported config extension: {suffix}")

    if not isinstance(parsed, dict):
        raise ConfigError("config must decode to an object/map")
    return parsed


def parse_config_file(path: Path) -> dict[str, Any]:
    raw = path.read_text(encoding="utf-8")
    return _decode_raw(raw, suffix=path.suffix.lower())


def _load_from_path(path: Path, *, source: str) -> ResolvedConfig:
    try:
        payload = parse_config_file(path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise ConfigError(f"failed to parse config file '{path}': {exc}") from exc

    try:
        data = ClientConfig.model_validate(payload)
    except PydanticValidationError as exc:
        raise ConfigError(f"invalid config structure for '{path}': {exc}") from exc

    logger.debug("Loaded config from %s", path)
    return ResolvedConfig(source=source, path=path.resolve(), data=data)


def locate_config(config_path: str | Path | None = None, *, settings: RuntimeSettings | None = None) -> tuple[Path, str]:
    """Return the config path to use and a label naming where it came from."""

    if config_path is not None:
        return Path(config_path).expanduser(), "explicit-path"

    runtime = settings if settings is not None else RuntimeSettings()
    if runtime.config_file is not None:
        return runtime.config_file.expanduser(), "env:SPOTCTL_CONFIG"

    candidates = default_config_candidates()
    for candidate in candidates:
        if candidate.exists():
            return candidate, "default-path"
    return candidates[0], "default-path"


def load_config(
    config_path: str | Path | None = None,
    *,
    settings: RuntimeSettings | None = None,
) -> ResolvedConfig:
    """Load the config file only. A missing file yields defaults."""

    path, source = locate_config(config_path, settings=settings)
    if not path.exists():
        return ResolvedConfig(source=f"{source}:missing", path=path, data=ClientConfig())
    return _load_from_path(path, source=source)


def resolve_config(
    config_path: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
    *,
    settings: RuntimeSettings | None = None,
) -> ResolvedConfig:
    """Merge defaults, config file, environment and explicit overrides.

    Later layers win. ``None`` override values are ignored so unset CLI flags
    never mask file or environment values.
    """

    runtime = settings if settings is not None else RuntimeSettings()
    loaded = load_config(config_path, settings=runtime)

    merged: dict[str, Any] = loaded.data.model_dump(exclude_unset=True)
    merged.update(runtime.overrides())
    if overrides:
        merged.update({key: value for key, value in overrides.items() if value is not None})

    try:
        data = ClientConfig.model_validate(merged)
    except PydanticValidationError as exc:
        raise ConfigError(f"invalid configuration: {exc}") from exc

    return ResolvedConfig(source=loaded.source, path=loaded.path, data=data)


def save_config(config: ClientConfig, *, path: str | Path | None = None) -> Path:
    target = Path(path).expanduser() if path is not None else default_config_candidates()[0]
    suffix = target.suffix.lower()

    payload = config.to_file_payload()
    if suffix in {"", ".yaml", ".yml"}:
        rendered = yaml.safe_dump(payload, sort_keys=False)
    elif suffix == ".json":
        rendered = json.dumps(payload, indent=2) + "\n"
    elif suffix == ".toml":
        rendered = tomli_w.dumps(payload)
    else:
        raise ConfigError(f"unsupported config extension: {suffix}")

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(rendered, encoding="utf-8")
        target.chmod(0o600)
    except OSError as exc:
        raise ConfigError(f"failed to write config file to {target}") from exc
    return target.resolve()
