from __future__ import annotations

from spotctl.crud import get_resource, list_resources
from spotctl.models.regions import Region, RegionList
from spotctl.services.base import ServiceBase, require_name


class RegionsService(ServiceBase):
    """Region API operations."""

    async def list(self) -> RegionList:
        return await list_resources(self._transport, "/regions", RegionList)

    async def get(self, name: str) -> Region:
        require_name(name, "region name")
        return await get_resource(self._transport, f"/regions/{name}", Region)
