from __future__ import annotations

from spotctl.crud import list_resources
from spotctl.http.versions import APIVersion
from spotctl.models.organizations import Organization, OrganizationList
from spotctl.services.base import ServiceBase, require_name


class OrganizationsService(ServiceBase):
    """Organization API operations (served by the auth API)."""

    async def list(self) -> OrganizationList:
        return await list_resources(
            self._transport,
            "/organizations",
            OrganizationList,
            api_version=APIVersion.AUTH,
        )

    async def find(self, name_or_id: str) -> Organization | None:
        """Return the organization whose name, id or namespace matches, if any."""

        require_name(name_or_id, "organization")
        orgs = await self.list()
        for org in orgs.organizations:
            if name_or_id in (org.name, org.id, org.metadata.namespace):
                return org
        return None
