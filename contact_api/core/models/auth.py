"""Authentication models shared by the token engine and the HTTP layer."""

import time
from datetime import UTC, datetime

from pydantic import BaseModel, Field

from contact_api.entities.role import RoleName


class TokenClaims(BaseModel):
    """Verified claims of a bearer token issued by this service."""

    raw_token: str = Field(description="The compact JWT", repr=False)
    subject: str = Field(description="Username the token was issued to")
    roles: list[str] = Field(default_factory=list, description="Role names granted")
    issued_at: int = Field(description="Issued-at timestamp (seconds)")
    expires_at: int = Field(description="Expiration timestamp (seconds)")

    def is_expired(self, leeway: int = 0, now: float | None = None) -> bool:
        """Check whether the token's expiry lies in the past."""
        current = time.time() if now is None else now
        return self.expires_at < current - leeway

    @property
    def expired(self) -> bool:
        return self.is_expired()

    @property
    def expires_at_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.expires_at, tz=UTC)


class Principal(BaseModel):
    """Authenticated caller, threaded explicitly through request handling."""

    user_id: int
    username: str
    roles: frozenset[RoleName] = Field(default_factory=frozenset)

    def has_any_role(self, *roles: RoleName) -> bool:
        return any(role in self.roles for role in roles)
