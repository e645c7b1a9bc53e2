from __future__ import annotations

from pathlib import Path

from spotctl.crud import create_resource, delete_resource, edit_resource, get_resource, list_resources
from spotctl.errors import ValidationError
from spotctl.http.versions import APIVersion
from spotctl.models.common import DeleteResponse
from spotctl.models.nodepools import (
    OnDemandNodePool,
    OnDemandNodePoolList,
    SpotNodePool,
    SpotNodePoolList,
    SpotNodePoolSpec,
)
from spotctl.patch import PatchOperation, validate_patch_operations
from spotctl.services.base import ServiceBase, load_spec_file, require_name

SPOT_KIND = "SpotNodePool"


def load_spot_nodepool_spec(path: str | Path) -> SpotNodePoolSpec:
    return load_spec_file(path, SpotNodePoolSpec, label="spot node pool spec")


class SpotNodePoolsService(ServiceBase):
    """Spot nodepool CRUD operations."""

    def _endpoint(self, namespace: str | None) -> str:
        return f"/namespaces/{self._namespace(namespace)}/spotnodepools"

    def _item_endpoint(self, namespace: str | None, name: str) -> str:
        return f"{self._endpoint(namespace)}/{require_name(name, 'spot node pool name')}"

    async def list(self, namespace: str | None = None) -> SpotNodePoolList:
        return await list_resources(self._transport, self._endpoint(namespace), SpotNodePoolList)

    async def get(self, name: str, *, namespace: str | None = None) -> SpotNodePool:
        return await get_resource(self._transport, self._item_endpoint(namespace, name), SpotNodePool)

    async def create(self, nodepool: SpotNodePool, *, namespace: str | None = None) -> SpotNodePool:
        if nodepool is None:
            raise ValidationError("spot node pool configuration is required")
        endpoint = self._endpoint(namespace)
        ns = self._namespace(namespace)

        body = nodepool.model_copy(deep=True)
        body.apiVersion = body.apiVersion or APIVersion.DEFAULT.value
        body.kind = body.kind or SPOT_KIND
        body.metadata.namespace = body.metadata.namespace or ns
        require_name(body.metadata.name, "spot node pool name")
        if body.spec.bidPrice:
            body.spec.bidPrice = body.spec.bidPrice.removeprefix("$")
        return await create_resource(self._transport, endpoint, body, SpotNodePool)

    async def edit(
        self,
        name: str,
        patch_ops: list[PatchOperation],
        *,
        namespace: str | None = None,
    ) -> SpotNodePool:
        endpoint = self._item_endpoint(namespace, name)
        validate_patch_operations(patch_ops)
        return await edit_resource(self._transport, endpoint, patch_ops, SpotNodePool)

    async def delete(self, name: str, *, namespace: str | None = None) -> DeleteResponse:
        return await delete_resource(
            self._transport,
            self._item_endpoint(namespace, name),
            DeleteResponse,
            resource_type=SPOT_KIND,
        )

    async def delete_all(self, namespace: str | None = None) -> DeleteResponse:
        """Delete every spot nodepool in the namespace with one collection DELETE."""

        return await delete_resource(
            self._transport,
            self._endpoint(namespace),
            DeleteResponse,
            resource_type="SpotNodePools",
        )


class OnDemandNodePoolsService(ServiceBase):
    """On-demand nodepool read operations."""

    def _endpoint(self, namespace: str | None) -> str:
        return f"/namespaces/{self._namespace(namespace)}/ondemandnodepools"

    def _item_endpoint(self, namespace: str | None, name: str) -> str:
        return f"{self._endpoint(namespace)}/{require_name(name, 'on-demand node pool name')}"

    async def list(self, namespace: str | None = None) -> OnDemandNodePoolList:
        return await list_resources(self._transport, self._endpoint(namespace), OnDemandNodePoolList)

    async def get(self, name: str, *, namespace: str | None = None) -> OnDemandNodePool:
        return await get_resource(self._transport, self._item_endpoint(namespace, name), OnDemandNodePool)
