"""Authenticated request dispatch for Spot API calls."""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from spotctl.constants import CONTENT_TYPE_JSON, USER_AGENT
from spotctl.errors import APIError, InternalError, TransportError
from spotctl.http.versions import APIVersion
from spotctl.utils.serialization import to_plain_data

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], Awaitable[str]]


def build_url(base_url: str, api_version: APIVersion | str, endpoint: str) -> str:
    """Compose ``<base>/<api version><endpoint>``.

    Example:
        >>> build_url("https://spot.rackspace.com/apis", APIVersion.AUTH, "/organizations")
        'https://spot.rackspace.com/apis/auth.ngpc.rxt.io/v1/organizations'
    """

    if endpoint and not endpoint.startswith("/"):
        endpoint = f"/{endpoint}"
    return f"{base_url.rstrip('/')}/{str(api_version).strip('/')}{endpoint}"


def encode_body(body: Any) -> bytes:
    try:
        return json.dumps(to_plain_data(body)).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise InternalError("failed to marshal request body") from exc


def decode_api_error(
    status_code: int,
    raw: bytes,
    *,
    operation: str | None = None,
    endpoint: str | None = None,
) -> APIError:
    """Map a non-2xx response body onto an :class:`APIError`.

    The server's ``{code, message, details}`` envelope is kept verbatim; a
    missing code falls back to the HTTP status and a non-JSON body becomes the
    message.
    """

    text = raw.decode("utf-8", errors="replace").strip()
    try:
        payload = json.loads(text) if text else None
    except ValueError:
        payload = None

    if not isinstance(payload, dict):
        logger.debug("HTTP %d error body was not a JSON object", status_code)
        return APIError(
            status_code,
            text or f"HTTP {status_code}",
            status_code=status_code,
            operation=operation,
            endpoint=endpoint,
        )

    code = payload.get("code")
    if not isinstance(code, int) or isinstance(code, bool) or code == 0:
        code = status_code

    message = payload.get("message")
    if not isinstance(message, str) or not message:
        fallback = payload.get("error")
        message = fallback if isinstance(fallback, str) and fallback else f"HTTP {status_code}"

    return APIError(
        code,
        message,
        payload.get("details") or None,
        status_code=status_code,
        operation=operation,
        endpoint=endpoint,
    )


class SpotTransport:
    """Async dispatcher attaching bearer auth and mapping failures to typed errors.

    There is deliberately no retry loop: each call is attempted once.
    """

    def __init__(
        self,
        *,
        base_url: str,
        token_provider: TokenProvider,
        http_client: httpx.AsyncClient,
        user_agent: str = USER_AGENT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self._token_provider = token_provider
        self._client = http_client

    async def dispatch(
        self,
        method: str,
        endpoint: str,
        *,
        body: Any = None,
        api_version: APIVersion | str = APIVersion.DEFAULT,
        content_type: str | None = None,
    ) -> httpx.Response:
        """Send one request and return the open 2xx response.

        The caller owns the returned response and must close it. Non-2xx
        responses are read, closed and raised as :class:`APIError`.
        """

        method_upper = method.upper()
        url = build_url(self.base_url, api_version, endpoint)
        content = encode_body(body) if body is not None else None

        token = await self._token_provider()

        ct = content_type or CONTENT_TYPE_JSON
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": ct,
            "User-Agent": self.user_agent,
        }

        try:
            request = self._client.build_request(method_upper, url, content=content, headers=headers)
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise InternalError("failed to create request", operation=method_upper, endpoint=endpoint) from exc

        if ct != CONTENT_TYPE_JSON:
            logger.debug("Making %s request to %s (API: %s, Content-Type: %s)", method_upper, url, api_version, ct)
        else:
            logger.debug("Making %s request to %s (API: %s)", method_upper, url, api_version)

        try:
            response = await self._client.send(request, stream=True)
        except httpx.HTTPError as exc:
            raise TransportError("request failed", operation=method_upper, endpoint=endpoint) from exc

        if response.is_success:
            return response

        try:
            raw = await response.aread()
        except httpx.HTTPError as exc:
            raise APIError(
                response.status_code,
                "failed to read error response",
                operation=method_upper,
                endpoint=endpoint,
            ) from exc
        finally:
            await response.aclose()

        raise decode_api_error(response.status_code, raw, operation=method_upper, endpoint=endpoint)
