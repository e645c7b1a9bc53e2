from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from spotctl.auth import TokenManager
from spotctl.config import ClientConfig, resolve_config
from spotctl.errors import ConfigError
from spotctl.http import SpotTransport
from spotctl.services import (
    CloudspacesService,
    OnDemandNodePoolsService,
    OrganizationsService,
    RegionsService,
    ServerClassesService,
    SpotNodePoolsService,
)

logger = logging.getLogger(__name__)


def _apply_overrides(config: ClientConfig, overrides: dict[str, Any]) -> ClientConfig:
    values = {key: value for key, value in overrides.items() if value is not None}
    if not values:
        return config
    merged = config.model_dump(exclude_unset=True)
    merged.update(values)
    try:
        return ClientConfig.model_validate(merged)
    except PydanticValidationError as exc:
        raise ConfigError(f"invalid configuration: {exc}") from exc


class AsyncSpotClient:
    """Async Rackspace Spot API client.

    When ``config`` is omitted it is resolved from the config file and the
    environment; keyword overrides (``refresh_token=...``, ``namespace=...``)
    win over both. An injected ``http_client`` is used as-is and left open on
    :meth:`aclose`.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        **overrides: Any,
    ) -> None:
        if config is None:
            config = resolve_config(overrides=overrides).data
        else:
            config = _apply_overrides(config, overrides)
        self.config = config

        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=httpx.Timeout(config.timeout))

        self._token_manager = TokenManager(
            config.refresh_token_value,
            self._http,
            oauth_url=config.oauth_url,
            client_id=config.client_id,
        )
        self._transport = SpotTransport(
            base_url=config.base_url,
            token_provider=self._token_manager.get_valid_access_token,
            http_client=self._http,
        )

        self._organizations: OrganizationsService | None = None
        self._regions: RegionsService | None = None
        self._server_classes: ServerClassesService | None = None
        self._cloudspaces: CloudspacesService | None = None
        self._spot_nodepools: SpotNodePoolsService | None = None
        self._ondemand_nodepools: OnDemandNodePoolsService | None = None

    @property
    def namespace(self) -> str | None:
        return self.config.namespace

    @property
    def region(self) -> str | None:
        return self.config.region

    @property
    def refresh_token(self) -> str | None:
        return self.config.refresh_token_value

    @property
    def transport(self) -> SpotTransport:
        return self._transport

    @property
    def token_manager(self) -> TokenManager:
        return self._token_manager

    @property
    def organizations(self) -> OrganizationsService:
        if self._organizations is None:
            self._organizations = OrganizationsService(self)
        return self._organizations

    @property
    def regions(self) -> RegionsService:
        if self._regions is None:
            self._regions = RegionsService(self)
        return self._regions

    @property
    def server_classes(self) -> ServerClassesService:
        if self._server_classes is None:
            self._server_classes = ServerClassesService(self)
        return self._server_classes

    @property
    def cloudspaces(self) -> CloudspacesService:
        if self._cloudspaces is None:
            self._cloudspaces = CloudspacesService(self)
        return self._cloudspaces

    @property
    def spot_nodepools(self) -> SpotNodePoolsService:
        if self._spot_nodepools is None:
            self._spot_nodepools = SpotNodePoolsService(self)
        return self._spot_nodepools

    @property
    def ondemand_nodepools(self) -> OnDemandNodePoolsService:
        if self._ondemand_nodepools is None:
            self._ondemand_nodepools = OnDemandNodePoolsService(self)
        return self._ondemand_nodepools

    async def __aenter__(self) -> AsyncSpotClient:
        return self

    async def __aexit__(self, exc_type: object, exc: object, tb: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def authenticate(self) -> str:
        """Return a valid bearer token, refreshing lazily when needed."""

        return await self._token_manager.get_valid_access_token()


@asynccontextmanager
async def connect(*args: Any, **kwargs: Any) -> AsyncIterator[AsyncSpotClient]:
    client = AsyncSpotClient(*args, **kwargs)
    try:
        yield client
    finally:
        await client.aclose()
