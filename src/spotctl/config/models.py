from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr, field_validator

from spotctl.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_CLIENT_ID,
    DEFAULT_OAUTH_URL,
    DEFAULT_TIMEOUT_SECONDS,
)
from spotctl.errors import ConfigError

OutputFormat = Literal["table", "json", "yaml", "wide"]
OUTPUT_FORMATS: tuple[str, ...] = ("table", "json", "yaml", "wide")


def _aliases(name: str) -> dict[str, Any]:
    """Accept snake_case, kebab-case and camelCase keys; write kebab-case."""

    kebab = name.replace("_", "-")
    head, *rest = name.split("_")
    camel = head + "".join(part.title() for part in rest)
    return {
        "validation_alias": AliasChoices(name, kebab, camel),
        "serialization_alias": kebab,
    }


class ClientConfig(BaseModel):
    """Resolved client configuration.

    Built once by :func:`spotctl.config.resolve_config` and passed into the
    client; nothing reads configuration from global state.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    refresh_token: SecretStr | None = Field(default=None, **_aliases("refresh_token"))
    region: str | None = None
    namespace: str | None = None
    base_url: str = Field(default=DEFAULT_BASE_URL, **_aliases("base_url"))
    oauth_url: str = Field(default=DEFAULT_OAUTH_URL, **_aliases("oauth_url"))
    client_id: str = Field(default=DEFAULT_CLIENT_ID, **_aliases("client_id"))
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    debug: bool = False
    output_format: OutputFormat = Field(default="table", **_aliases("output_format"))
    no_pager: bool = Field(default=False, **_aliases("no_pager"))

    @field_validator("region", "namespace", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def refresh_token_value(self) -> str | None:
        if self.refresh_token is None:
            return None
        return self.refresh_token.get_secret_value() or None

    def require_credentials(self) -> ClientConfig:
        if not self.refresh_token_value:
            raise ConfigError(
                "refresh token is required. Set it via --refresh-token flag, config file, "
                "or SPOTCTL_REFRESH_TOKEN environment variable"
            )
        if not self.base_url:
            raise ConfigError("base URL is required. Set it via --base-url flag or in your config file")
        return self

    def to_file_payload(self) -> dict[str, Any]:
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        if self.refresh_token_value:
            payload["refresh-token"] = self.refresh_token_value
        return payload


class ResolvedConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    source: str
    path: Path | None = None
    data: ClientConfig
