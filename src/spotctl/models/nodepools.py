from __future__ import annotations

from pydantic import Field

from spotctl.models.common import ListMeta, ObjectMeta, SpotModel


class Autoscaling(SpotModel):
    enabled: bool = False
    minNodes: int = 0
    maxNodes: int = 0


class CustomMetadataStatus(SpotModel):
    annotations: list[str] = Field(default_factory=list)
    labels: list[str] = Field(default_factory=list)
    taints: list[str] = Field(default_factory=list)


class SpotNodePoolSpec(SpotModel):
    serverClass: str | None = None
    desired: int | None = None
    cloudSpace: str | None = None
    bidPrice: str | None = None
    customAnnotations: dict[str, str] = Field(default_factory=dict)
    customLabels: dict[str, str] = Field(default_factory=dict)
    customTaints: list[dict[str, str]] = Field(default_factory=list)
    autoscaling: Autoscaling | None = None


class SpotNodePoolStatus(SpotModel):
    bidStatus: str | None = None
    wonCount: int | None = None
    customMetadataStatus: CustomMetadataStatus | None = None


class SpotNodePool(SpotModel):
    apiVersion: str | None = None
    kind: str | None = None
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: SpotNodePoolSpec = Field(default_factory=SpotNodePoolSpec)
    status: SpotNodePoolStatus | None = None


class SpotNodePoolList(SpotModel):
    apiVersion: str | None = None
    kind: str | None = None
    metadata: ListMeta = Field(default_factory=ListMeta)
    items: list[SpotNodePool] = Field(default_factory=list)


class OnDemandNodePoolSpec(SpotModel):
    serverClass: str | None = None
    desired: int | None = None
    cloudSpace: str | None = None
    customAnnotations: dict[str, str] = Field(default_factory=dict)
    customLabels: dict[str, str] = Field(default_factory=dict)
    customTaints: list[dict[str, str]] = Field(default_factory=list)
    autoscaling: Autoscaling | None = None


class OnDemandNodePoolStatus(SpotModel):
    reservedStatus: str | None = None
    reservedCount: int | None = None


class OnDemandNodePool(SpotModel):
    apiVersion: str | None = None
    kind: str | None = None
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: OnDemandNodePoolSpec = Field(default_factory=OnDemandNodePoolSpec)
    status: OnDemandNodePoolStatus | None = None


class OnDemandNodePoolList(SpotModel):
    apiVersion: str | None = None
    kind: str | None = None
    metadata: ListMeta = Field(default_factory=ListMeta)
    items: list[OnDemandNodePool] = Field(default_factory=list)
