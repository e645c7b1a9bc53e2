from __future__ import annotations

from pydantic import Field

from spotctl.models.common import ListMeta, ObjectMeta, SpotModel


class ServerClassResources(SpotModel):
    cpu: str | None = None
    memory: str | None = None
    gpu: str | None = None


class ServerClassOnDemandPricing(SpotModel):
    cost: str | None = None
    description: str | None = None


class ServerClassProvider(SpotModel):
    providerType: str | None = None
    providerFlavorID: str | None = None
    flavorType: str | None = None


class ServerClassSpec(SpotModel):
    availability: str | None = None
    displayName: str | None = None
    category: str | None = None
    flavorType: str | None = None
    region: str | None = None
    minBidPricePerHour: str | None = None
    onDemandPricing: ServerClassOnDemandPricing | None = None
    provider: ServerClassProvider = Field(default_factory=ServerClassProvider)
    resources: ServerClassResources = Field(default_factory=ServerClassResources)


class ServerClassSpotPricing(SpotModel):
    marketPricePerHour: str | None = None
    hammerPricePerHour: str | None = None


class ServerClassCapacity(SpotModel):
    available: int | None = None
    total: int | None = None


class ServerClassStatus(SpotModel):
    spotPricing: ServerClassSpotPricing | None = None
    capacity: ServerClassCapacity | None = None
    available: int | None = None
    reserved: int | None = None


class ServerClass(SpotModel):
    apiVersion: str | None = None
    kind: str | None = None
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: ServerClassSpec = Field(default_factory=ServerClassSpec)
    status: ServerClassStatus | None = None


class ServerClassList(SpotModel):
    apiVersion: str | None = None
    kind: str | None = None
    metadata: ListMeta = Field(default_factory=ListMeta)
    items: list[ServerClass] = Field(default_factory=list)
