from __future__ import annotations

from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from spotctl.errors import ValidationError

M = TypeVar("M", bound=BaseModel)


class ServiceBase:
    """Base type for service classes bound to an AsyncSpotClient instance."""

    def __init__(self, client: Any) -> None:
        self._client = client

    @property
    def _transport(self) -> Any:
        return self._client.transport

    def _namespace(self, namespace: str | None) -> str:
        resolved = namespace or self._client.namespace
        if not resolved:
            raise ValidationError(
                "namespace is required: set it via --namespace flag, config file, "
                "or SPOTCTL_NAMESPACE environment variable"
            )
        return resolved


def require_name(name: str | None, label: str = "name") -> str:
    if not name:
        raise ValidationError(f"{label} is required")
    return name


def load_spec_file(path: str | Path, model_type: type[M], *, label: str) -> M:
    """Read a JSON document from ``path`` into ``model_type``."""

    file_path = Path(path).expanduser()
    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ValidationError(f"failed to read file {file_path}") from exc
    try:
        return model_type.model_validate_json(raw)
    except PydanticValidationError as exc:
        raise ValidationError(f"failed to parse {label} in {file_path}") from exc
