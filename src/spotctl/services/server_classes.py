from __future__ import annotations

from spotctl.crud import get_resource, list_resources
from spotctl.models.server_classes import ServerClass, ServerClassList
from spotctl.services.base import ServiceBase, require_name


class ServerClassesService(ServiceBase):
    """Server class API operations."""

    async def list(self) -> ServerClassList:
        return await list_resources(self._transport, "/serverclasses", ServerClassList)

    async def get(self, name: str) -> ServerClass:
        require_name(name, "server class name")
        return await get_resource(self._transport, f"/serverclasses/{name}", ServerClass)
