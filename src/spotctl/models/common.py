from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SpotModel(BaseModel):
    """Base model with permissive extra handling for upstream compatibility."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class OwnerReference(SpotModel):
    apiVersion: str
    kind: str
    name: str
    uid: str
    blockOwnerDeletion: bool | None = None
    controller: bool | None = None


class ManagedFieldsEntry(SpotModel):
    apiVersion: str | None = None
    fieldsType: str | None = None
    fieldsV1: dict[str, Any] | None = None
    manager: str | None = None
    operation: str | None = None
    subresource: str | None = None
    time: datetime | None = None


class ObjectMeta(SpotModel):
    """Kubernetes-style object metadata shared by every resource envelope."""

    name: str | None = None
    namespace: str | None = None
    uid: str | None = None
    generateName: str | None = None
    generation: int | None = None
    resourceVersion: str | None = None
    selfLink: str | None = None
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)
    finalizers: list[str] = Field(default_factory=list)
    ownerReferences: list[OwnerReference] = Field(default_factory=list)
    managedFields: list[ManagedFieldsEntry] = Field(default_factory=list)
    creationTimestamp: datetime | None = None
    deletionTimestamp: datetime | None = None
    deletionGracePeriodSeconds: int | None = None


class ListMeta(SpotModel):
    continue_: str | None = Field(default=None, alias="continue")
    remainingItemCount: int | None = None
    resourceVersion: str | None = None
    selfLink: str | None = None


class Condition(SpotModel):
    type: str
    status: str
    reason: str | None = None
    message: str | None = None
    lastTransitionTime: datetime | None = None


class DeleteResponse(SpotModel):
    """Outcome of a delete call.

    The API may answer with a Kubernetes ``Status`` object, the deleted
    resource, or nothing at all; the latter two collapse to a synthesized
    ``status="Success"`` value.
    """

    status: str
    message: str | None = None
    reason: str | None = None
    code: int | None = None
