from __future__ import annotations

from pydantic import Field

from spotctl.models.common import ListMeta, ObjectMeta, SpotModel


class RegionProvider(SpotModel):
    providerRegionName: str | None = None
    providerType: str | None = None


class RegionSpec(SpotModel):
    country: str | None = None
    description: str | None = None
    provider: RegionProvider = Field(default_factory=RegionProvider)


class Region(SpotModel):
    apiVersion: str | None = None
    kind: str | None = None
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: RegionSpec = Field(default_factory=RegionSpec)


class RegionList(SpotModel):
    apiVersion: str | None = None
    kind: str | None = None
    metadata: ListMeta = Field(default_factory=ListMeta)
    items: list[Region] = Field(default_factory=list)
