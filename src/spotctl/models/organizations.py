from __future__ import annotations

from pydantic import Field

from spotctl.models.common import SpotModel


class OrganizationMetadata(SpotModel):
    namespace: str | None = None


class Organization(SpotModel):
    id: str
    name: str
    display_name: str | None = None
    metadata: OrganizationMetadata = Field(default_factory=OrganizationMetadata)


class OrganizationList(SpotModel):
    """Flat, paginated organization listing served by the auth API.

    Unlike the other resources this is not a Kubernetes-style list envelope.
    """

    start: int = 0
    limit: int = 0
    length: int = 0
    total: int = 0
    organizations: list[Organization] = Field(default_factory=list)
