from __future__ import annotations

from pathlib import Path

from spotctl.crud import create_resource, delete_resource, edit_resource, get_resource, list_resources
from spotctl.errors import ValidationError
from spotctl.http.versions import APIVersion
from spotctl.models.cloudspaces import CloudSpace, CloudSpaceList, CloudSpaceSpec, KubeconfigResponse
from spotctl.models.common import DeleteResponse
from spotctl.patch import PatchOperation, validate_patch_operations
from spotctl.services.base import ServiceBase, load_spec_file, require_name

KIND = "CloudSpace"


def load_cloudspace_spec(path: str | Path) -> CloudSpaceSpec:
    """Read a cloudspace ``spec`` object from a JSON file."""

    return load_spec_file(path, CloudSpaceSpec, label="cloudspace spec")


class CloudspacesService(ServiceBase):
    """Cloudspace API operations."""

    def _endpoint(self, namespace: str | None) -> str:
        return f"/namespaces/{self._namespace(namespace)}/cloudspaces"

    def _item_endpoint(self, namespace: str | None, name: str) -> str:
        return f"{self._endpoint(namespace)}/{require_name(name, 'cloudspace name')}"

    async def list(self, namespace: str | None = None) -> CloudSpaceList:
        return await list_resources(self._transport, self._endpoint(namespace), CloudSpaceList)

    async def get(self, name: str, *, namespace: str | None = None) -> CloudSpace:
        return await get_resource(self._transport, self._item_endpoint(namespace, name), CloudSpace)

    async def create(self, cloudspace: CloudSpace, *, namespace: str | None = None) -> CloudSpace:
        if cloudspace is None:
            raise ValidationError("cloudspace configuration is required")
        endpoint = self._endpoint(namespace)
        ns = self._namespace(namespace)

        body = cloudspace.model_copy(deep=True)
        body.apiVersion = body.apiVersion or APIVersion.DEFAULT.value
        body.kind = body.kind or KIND
        body.metadata.namespace = body.metadata.namespace or ns
        require_name(body.metadata.name, "cloudspace name")
        return await create_resource(self._transport, endpoint, body, CloudSpace)

    async def edit(
        self,
        name: str,
        patch_ops: list[PatchOperation],
        *,
        namespace: str | None = None,
    ) -> CloudSpace:
        endpoint = self._item_endpoint(namespace, name)
        validate_patch_operations(patch_ops)
        return await edit_resource(self._transport, endpoint, patch_ops, CloudSpace)

    async def delete(self, name: str, *, namespace: str | None = None) -> DeleteResponse:
        return await delete_resource(
            self._transport,
            self._item_endpoint(namespace, name),
            DeleteResponse,
            resource_type=KIND,
        )

    async def generate_kubeconfig(self, name: str, *, organization: str) -> str:
        """Return kubeconfig YAML for a cloudspace from the auth API."""

        require_name(name, "cloudspace name")
        require_name(organization, "organization name")
        refresh = self._client.refresh_token
        if not refresh:
            raise ValidationError("refresh token is required to generate kubeconfig")

        payload = {
            "organization_name": organization,
            "cloudspace_name": name,
            "refresh_token": refresh,
        }
        response = await create_resource(
            self._transport,
            "/generate-kubeconfig",
            payload,
            KubeconfigResponse,
            api_version=APIVersion.AUTH,
        )
        return response.data.kubeconfig
