"""Session token issuing and verification.

Tokens are stateless HS256 JWTs carrying the caller's identity, tenant and
role. Nothing is stored server-side; a token is valid until its ``exp``.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Callable, Dict, Optional
from uuid import UUID

from jose import JWTError, jwt

from ..config import Settings, get_settings
from ..core.exceptions import InvalidTokenError

TOKEN_TYPE = "access"


@dataclass(frozen=True)
class SessionClaims:
    """Identity context reconstructed from a verified token."""

    user_id: UUID
    email: str
    role: str
    tenant_id: UUID
    expires_at: datetime


class TokenService:
    """Issues and verifies signed session tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_delta: timedelta = timedelta(hours=8),
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret_key=settings.secret_key,
            algorithm=settings.algorithm,
            expires_delta=timedelta(hours=settings.access_token_expire_hours),
        )

    @property
    def expires_in_seconds(self) -> int:
        return int(self.expires_delta.total_seconds())

    def issue(self, user_id: UUID, email: str, role: str, tenant_id: UUID) -> str:
        """Sign a token for the given identity, valid for ``expires_delta``."""
        now = self._clock()
        to_encode: Dict[str, Any] = {
            "sub": str(user_id),
            "email": email,
            "role": role,
            "tenant_id": str(tenant_id),
            "type": TOKEN_TYPE,
            "iat": int(now.timestamp()),
            "exp": int((now + self.expires_delta).timestamp()),
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> SessionClaims:
        """Decode and validate a token.

        Raises InvalidTokenError for bad signatures, malformed structure,
        missing claims or expiry; never anything else.
        """
        payload = self._decode(token)
        if payload is None:
            raise InvalidTokenError()

        if payload.get("type") != TOKEN_TYPE:
            raise InvalidTokenError()

        try:
            exp = datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc)
            claims = SessionClaims(
                user_id=UUID(str(payload["sub"])),
                email=str(payload["email"]),
                role=str(payload["role"]),
                tenant_id=UUID(str(payload["tenant_id"])),
                expires_at=exp,
            )
        except (KeyError, TypeError, ValueError, OverflowError):
            raise InvalidTokenError()

        if claims.expires_at <= self._clock():
            raise InvalidTokenError("Token expired")
        return claims

    def _decode(self, token: str) -> Optional[Dict[str, Any]]:
        # expiry is checked against our own clock in verify()
        if not isinstance(token, str) or not token:
            return None
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except (JWTError, ValueError, TypeError):
            return None


@lru_cache
def _token_service_for(secret_key: str, algorithm: str, expire_hours: int) -> TokenService:
    return TokenService(secret_key, algorithm, timedelta(hours=expire_hours))


def get_token_service() -> TokenService:
    """Process-wide token service built from settings."""
    settings = get_settings()
    return _token_service_for(
        settings.secret_key, settings.algorithm, settings.access_token_expire_hours
    )
