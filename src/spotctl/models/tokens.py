from __future__ import annotations

from spotctl.models.common import SpotModel


class TokenResponse(SpotModel):
    access_token: str | None = None
    id_token: str | None = None
    expires_in: int = 0
    token_type: str | None = None
    scope: str | None = None

    @property
    def bearer(self) -> str | None:
        # The Spot IdP authorizes API calls with the id_token, not access_token.
        return self.id_token or self.access_token
