from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from pathlib import PurePath
from typing import Any, cast

from pydantic import BaseModel

JsonLike = dict[str, Any] | list[Any] | str | int | float | bool | None


def to_plain_data(value: Any, *, exclude_none: bool = True) -> JsonLike:
    """Flatten resource models and containers into JSON-ready data.

    Models dump by alias so wire names such as ``from`` and ``continue``
    survive. ``None`` fields are dropped from models unless ``exclude_none``
    is false; request bodies and rendered output both rely on that.
    """

    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=exclude_none)
    if isinstance(value, Mapping):
        return {str(key): to_plain_data(item, exclude_none=exclude_none) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain_data(item, exclude_none=exclude_none) for item in value]
    if isinstance(value, Enum):
        return to_plain_data(value.value, exclude_none=exclude_none)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, PurePath):
        return str(value)
    return cast(JsonLike, value)
