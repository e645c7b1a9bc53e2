from __future__ import annotations

from enum import StrEnum


class APIVersion(StrEnum):
    """URL segment selecting which Spot API surface a request targets."""

    DEFAULT = "ngpc.rxt.io/v1"
    AUTH = "auth.ngpc.rxt.io/v1"


def all_api_versions() -> list[APIVersion]:
    return list(APIVersion)


def is_known_api_version(value: APIVersion | str) -> bool:
    return str(value) in {version.value for version in APIVersion}
