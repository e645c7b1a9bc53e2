from __future__ import annotations

from datetime import datetime

from pydantic import Field

from spotctl.models.common import Condition, ListMeta, ObjectMeta, SpotModel


class AssignedServer(SpotModel):
    cpu: str | None = None
    displayName: str | None = None
    ipAddress: str | None = None
    nodePoolName: str | None = None
    serverClassName: str | None = None
    serverName: str | None = None
    serverType: str | None = None


class CloudSpaceSpec(SpotModel):
    region: str | None = None
    kubernetesVersion: str | None = None
    webhook: str | None = None
    HAControlPlane: bool | None = None
    cloud: str | None = None
    cni: str | None = None
    deploymentType: str | None = None
    gpuEnabled: bool | None = None
    bidRequests: list[str] = Field(default_factory=list)


class CloudSpaceStatus(SpotModel):
    apiServerEndpoint: str | None = None
    assignedServers: dict[str, AssignedServer] = Field(default_factory=dict)
    conditions: list[Condition] = Field(default_factory=list)
    currentKubernetesVersion: str | None = None
    health: str | None = None
    phase: str | None = None
    reason: str | None = None
    firstReadyTimestamp: datetime | None = None


class CloudSpace(SpotModel):
    apiVersion: str | None = None
    kind: str | None = None
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: CloudSpaceSpec = Field(default_factory=CloudSpaceSpec)
    status: CloudSpaceStatus | None = None


class CloudSpaceList(SpotModel):
    apiVersion: str | None = None
    kind: str | None = None
    metadata: ListMeta = Field(default_factory=ListMeta)
    items: list[CloudSpace] = Field(default_factory=list)


class KubeconfigData(SpotModel):
    kubeconfig: str


class KubeconfigResponse(SpotModel):
    data: KubeconfigData
