from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class RuntimeSettings(BaseSettings):
    """Environment-driven overrides applied on top of the config file."""

    model_config = SettingsConfigDict(
        env_prefix="SPOTCTL_",
        extra="ignore",
        case_sensitive=False,
    )

    config_file: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("SPOTCTL_CONFIG", "SPOTCTL_CONFIG_FILE"),
    )
    refresh_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("SPOTCTL_REFRESH_TOKEN", "RACKSPACE_SPOT_REFRESH_TOKEN"),
    )
    region: str | None = Field(
        default=None,
        validation_alias=AliasChoices("SPOTCTL_REGION", "RACKSPACE_SPOT_REGION"),
    )
    namespace: str | None = Field(
        default=None,
        validation_alias=AliasChoices("SPOTCTL_NAMESPACE", "RACKSPACE_SPOT_NAMESPACE"),
    )
    base_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("SPOTCTL_BASE_URL", "RACKSPACE_SPOT_BASE_URL"),
    )
    oauth_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("SPOTCTL_OAUTH_URL", "RACKSPACE_SPOT_OAUTH_URL"),
    )
    client_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("SPOTCTL_CLIENT_ID", "RACKSPACE_SPOT_CLIENT_ID"),
    )
    timeout: float | None = Field(default=None, validation_alias=AliasChoices("SPOTCTL_TIMEOUT"))
    debug: bool | None = Field(default=None, validation_alias=AliasChoices("SPOTCTL_DEBUG"))
    output_format: str | None = Field(default=None, validation_alias=AliasChoices("SPOTCTL_OUTPUT_FORMAT"))
    no_pager: bool | None = Field(default=None, validation_alias=AliasChoices("SPOTCTL_NO_PAGER"))

    def overrides(self) -> dict[str, Any]:
        """Return the config keys set in the environment."""

        values: dict[str, Any] = {}
        for key in (
            "region",
            "namespace",
            "base_url",
            "oauth_url",
            "client_id",
            "timeout",
            "debug",
            "output_format",
            "no_pager",
        ):
            value = getattr(self, key)
            if value is not None and value != "":
                values[key] = value
        if self.refresh_token is not None and self.refresh_token.get_secret_value():
            values["refresh_token"] = self.refresh_token.get_secret_value()
        return values
