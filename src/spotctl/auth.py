"""OAuth2 refresh-token lifecycle for the Spot API."""

from __future__ import annotations

import asyncio
import base64
import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import httpx
from pydantic import ValidationError as PydanticValidationError

from spotctl.constants import (
    CONTENT_TYPE_FORM,
    DEFAULT_CLIENT_ID,
    DEFAULT_OAUTH_URL,
    TOKEN_EXPIRY_BUFFER_SECONDS,
    USER_AGENT,
)
from spotctl.errors import APIError, TransportError, ValidationError
from spotctl.models.tokens import TokenResponse

logger = logging.getLogger(__name__)

GRANT_TYPE = "refresh_token"

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(UTC)


def decode_jwt_expiry(token: str) -> datetime | None:
    """Decode JWT `exp` claim without verifying the signature.

    Example:
        >>> decode_jwt_expiry("eyJ...token") is None
        True
    """

    if not token:
        return None

    parts = token.split(".")
    if len(parts) != 3:
        return None

    payload = parts[1]
    padding = "=" * (-len(payload) % 4)
    try:
        decoded = base64.urlsafe_b64decode(payload + padding)
        claims = json.loads(decoded.decode("utf-8"))
    except (ValueError, UnicodeDecodeError, json.JSONDecodeError):
        return None

    if not isinstance(claims, dict):
        return None

    exp = claims.get("exp")
    if not isinstance(exp, (int, float)):
        return None

    return datetime.fromtimestamp(float(exp), tz=UTC)


@dataclass(frozen=True, slots=True)
class CachedToken:
    access_token: str
    expires_at: datetime

    def is_valid(self, now: datetime, *, buffer_seconds: int = TOKEN_EXPIRY_BUFFER_SECONDS) -> bool:
        return bool(self.access_token) and now + timedelta(seconds=buffer_seconds) < self.expires_at


class TokenManager:
    """Exchange a long-lived refresh token for short-lived bearer tokens.

    The cached token is replaced as a whole, so the fast path reads it without
    taking the lock. Refreshes are serialized by an ``asyncio.Lock`` and the
    cache is re-checked under the lock, so concurrent callers waiting on an
    expired token share a single refresh exchange.

    A refresh interrupted by cancellation or a failure leaves the previous
    cache untouched.
    """

    def __init__(
        self,
        refresh_token: str | None,
        http_client: httpx.AsyncClient,
        *,
        oauth_url: str = DEFAULT_OAUTH_URL,
        client_id: str = DEFAULT_CLIENT_ID,
        buffer_seconds: int = TOKEN_EXPIRY_BUFFER_SECONDS,
        access_token: str | None = None,
        expires_at: datetime | None = None,
        clock: Clock = _utcnow,
    ) -> None:
        self._refresh_token = refresh_token or ""
        self._http = http_client
        self.oauth_url = oauth_url
        self.client_id = client_id
        self.buffer_seconds = buffer_seconds
        self._clock = clock
        self._lock = asyncio.Lock()
        self._cached: CachedToken | None = None
        self._generation = 0

        if access_token:
            seeded_expiry = expires_at or decode_jwt_expiry(access_token)
            if seeded_expiry is not None:
                self._cached = CachedToken(access_token, seeded_expiry)

    def is_valid(self) -> bool:
        """Return True when a refresh token is available for exchanges."""

        return bool(self._refresh_token)

    @property
    def cached_token(self) -> CachedToken | None:
        return self._cached

    def _usable(self, cached: CachedToken | None) -> str | None:
        if cached is not None and cached.is_valid(self._clock(), buffer_seconds=self.buffer_seconds):
            return cached.access_token
        return None

    async def get_valid_access_token(self) -> str:
        """Return a bearer token, refreshing when the cached one is inside the expiry buffer."""

        token = self._usable(self._cached)
        if token is not None:
            return token

        generation = self._generation
        async with self._lock:
            # Another caller refreshed while this one waited; reuse that token.
            if self._generation != generation and self._cached is not None:
                return self._cached.access_token
            token = self._usable(self._cached)
            if token is not None:
                return token
            self._cached = await self._exchange()
            self._generation += 1
            return self._cached.access_token

    async def _exchange(self) -> CachedToken:
        if not self._refresh_token:
            raise ValidationError("refresh token is required to authenticate", operation="POST", endpoint=self.oauth_url)

        logger.debug("Refreshing OAuth access token")
        payload = {
            "grant_type": GRANT_TYPE,
            "client_id": self.client_id,
            "refresh_token": self._refresh_token,
        }
        try:
            response = await self._http.post(
                self.oauth_url,
                data=payload,
                headers={"Content-Type": CONTENT_TYPE_FORM, "User-Agent": USER_AGENT},
            )
        except httpx.HTTPError as exc:
            raise TransportError("token request failed", operation="POST", endpoint=self.oauth_url) from exc

        if response.status_code != 200:
            raise APIError(
                response.status_code,
                "token request failed",
                response.text.strip() or None,
                operation="POST",
                endpoint=self.oauth_url,
            )

        try:
            decoded = TokenResponse.model_validate_json(response.content)
        except PydanticValidationError as exc:
            raise APIError(
                response.status_code,
                "failed to decode token response",
                operation="POST",
                endpoint=self.oauth_url,
            ) from exc

        token = decoded.bearer
        if not token:
            raise APIError(
                response.status_code,
                "token response missing id_token",
                operation="POST",
                endpoint=self.oauth_url,
            )

        if decoded.expires_in > 0:
            expires_at = self._clock() + timedelta(seconds=decoded.expires_in)
        else:
            expires_at = decode_jwt_expiry(token) or self._clock()

        logger.debug("Access token refreshed, expires at %s", expires_at.isoformat())
        return CachedToken(token, expires_at)
