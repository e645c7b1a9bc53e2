"""JSON Patch (RFC 6902) operations used by ``edit`` commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, TextIO

from pydantic import Field
from pydantic import ValidationError as PydanticValidationError

from spotctl.errors import PatchFileError, ValidationError
from spotctl.models.common import SpotModel


class PatchOperation(SpotModel):
    """One patch operation, transmitted to the server as loaded."""

    op: str
    path: str
    value: Any = None
    from_: str | None = Field(default=None, alias="from")


def load_patch_operations(path: str | Path) -> list[PatchOperation]:
    """Load a JSON array of patch operations from ``path``.

    ``[]`` is a valid no-op edit. Any other JSON value, malformed JSON, or an
    element missing ``op``/``path`` raises :class:`PatchFileError`.
    """

    file_path = Path(path).expanduser()
    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PatchFileError(f"failed to read file {file_path}") from exc

    try:
        decoded = json.loads(raw)
    except ValueError as exc:
        raise PatchFileError("failed to parse JSON patch operations") from exc

    if not isinstance(decoded, list):
        raise PatchFileError(f"JSON patch operations must be an array, got {type(decoded).__name__}")

    try:
        return [PatchOperation.model_validate(item) for item in decoded]
    except PydanticValidationError as exc:
        raise PatchFileError("invalid JSON patch operation") from exc


def validate_patch_operations(patch_ops: list[PatchOperation] | None) -> list[PatchOperation]:
    if patch_ops is None:
        raise ValidationError("patch operations are required")
    return patch_ops


def format_patch_value(value: Any) -> str:
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def render_patch_operations(patch_ops: list[PatchOperation]) -> str:
    """Render operations as ``<index>. <op> <path>[ = <value>]`` lines.

    Example:
        >>> ops = [PatchOperation(op="replace", path="/spec/desired", value=5)]
        >>> print(render_patch_operations(ops))
        Applying 1 patch operation(s):
          1. replace /spec/desired = 5
    """

    lines = [f"Applying {len(patch_ops)} patch operation(s):"]
    for index, operation in enumerate(patch_ops, start=1):
        line = f"  {index}. {operation.op} {operation.path}"
        if operation.value is not None:
            line += f" = {format_patch_value(operation.value)}"
        lines.append(line)
    return "\n".join(lines)


def display_patch_operations(patch_ops: list[PatchOperation], *, file: TextIO | None = None) -> None:
    print(render_patch_operations(patch_ops), file=file or sys.stdout)
    print(file=file or sys.stdout)
