"""Generic list/get/create/edit/delete operations.

Each operation dispatches one request and decodes the response body into the
caller-supplied result type. The response is closed exactly once on every
path, and a body that fails to decode voids the whole result.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from spotctl.constants import CONTENT_TYPE_JSON_PATCH
from spotctl.errors import InternalError, TransportError
from spotctl.http.transport import SpotTransport
from spotctl.http.versions import APIVersion
from spotctl.patch import PatchOperation

logger = logging.getLogger(__name__)

T = TypeVar("T")

DELETE_SUCCESS_STATUSES = frozenset({200, 202, 204})


@lru_cache(maxsize=64)
def _adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


async def _read_body(response: httpx.Response, *, method: str, endpoint: str) -> bytes:
    try:
        return await response.aread()
    except httpx.HTTPError as exc:
        raise TransportError("failed to read response body", operation=method, endpoint=endpoint) from exc
    finally:
        await response.aclose()


def _decode(raw: bytes, result_type: type[T], *, method: str, endpoint: str) -> T:
    try:
        return _adapter(result_type).validate_json(raw)
    except PydanticValidationError as exc:
        raise InternalError("failed to decode response", operation=method, endpoint=endpoint) from exc


async def _call(
    transport: SpotTransport,
    method: str,
    endpoint: str,
    result_type: type[T],
    *,
    body: Any = None,
    api_version: APIVersion | str,
    content_type: str | None = None,
) -> T:
    response = await transport.dispatch(
        method,
        endpoint,
        body=body,
        api_version=api_version,
        content_type=content_type,
    )
    raw = await _read_body(response, method=method, endpoint=endpoint)
    return _decode(raw, result_type, method=method, endpoint=endpoint)


async def list_resources(
    transport: SpotTransport,
    endpoint: str,
    result_type: type[T],
    *,
    api_version: APIVersion | str = APIVersion.DEFAULT,
) -> T:
    """GET a list envelope."""

    return await _call(transport, "GET", endpoint, result_type, api_version=api_version)


async def get_resource(
    transport: SpotTransport,
    endpoint: str,
    result_type: type[T],
    *,
    api_version: APIVersion | str = APIVersion.DEFAULT,
) -> T:
    """GET a single envelope. Callers validate the resource name beforehand."""

    return await _call(transport, "GET", endpoint, result_type, api_version=api_version)


async def create_resource(
    transport: SpotTransport,
    endpoint: str,
    body: Any,
    result_type: type[T],
    *,
    api_version: APIVersion | str = APIVersion.DEFAULT,
) -> T:
    """POST ``body`` and decode the created envelope."""

    return await _call(transport, "POST", endpoint, result_type, body=body, api_version=api_version)


async def edit_resource(
    transport: SpotTransport,
    endpoint: str,
    patch_ops: list[PatchOperation],
    result_type: type[T],
    *,
    api_version: APIVersion | str = APIVersion.DEFAULT,
) -> T:
    """PATCH with a JSON Patch body and decode the updated envelope.

    Each operation is sent with exactly the keys it was given, so an explicit
    ``"value": null`` survives.
    """

    body = [op.model_dump(mode="json", by_alias=True, exclude_unset=True) for op in patch_ops]
    return await _call(
        transport,
        "PATCH",
        endpoint,
        result_type,
        body=body,
        api_version=api_version,
        content_type=CONTENT_TYPE_JSON_PATCH,
    )


async def delete_resource(
    transport: SpotTransport,
    endpoint: str,
    result_type: type[T],
    *,
    resource_type: str | None = None,
    api_version: APIVersion | str = APIVersion.DEFAULT,
) -> T:
    """DELETE and decode the response.

    An empty or undecodable success body yields ``{"status": "Success"}``
    validated into ``result_type`` instead of an error. With ``resource_type``
    set this holds for every 2xx status; without it only for 200, 202 and 204.
    """

    response = await transport.dispatch("DELETE", endpoint, api_version=api_version)
    status_code = response.status_code
    raw = await _read_body(response, method="DELETE", endpoint=endpoint)

    decode_error: PydanticValidationError | None = None
    if raw.strip():
        try:
            return _adapter(result_type).validate_json(raw)
        except PydanticValidationError as exc:
            decode_error = exc
            logger.debug("DELETE %s returned HTTP %d with an undecodable body", endpoint, status_code)

    if resource_type is None and status_code not in DELETE_SUCCESS_STATUSES:
        raise InternalError("failed to decode response", operation="DELETE", endpoint=endpoint) from decode_error

    default = {"status": "Success", "message": f"{resource_type or 'Resource'} deleted successfully"}
    try:
        return _adapter(result_type).validate_python(default)
    except PydanticValidationError as exc:
        raise InternalError("failed to decode response", operation="DELETE", endpoint=endpoint) from exc
