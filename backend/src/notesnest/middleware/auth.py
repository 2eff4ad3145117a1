"""Authentication and role gating.

Two stages per request: ``JWTBearer`` turns the ``Authorization: Bearer``
header into verified ``SessionClaims`` (or 401), then ``require_role`` may
narrow access to one role (or 403). The role gate only ever sees an
authenticated identity.
"""

from typing import Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..core.exceptions import ForbiddenError, InvalidTokenError, UnauthenticatedError
from ..core.logging import get_logger
from ..security import SessionClaims, TokenService, get_token_service

logger = get_logger("auth")


class JWTBearer(HTTPBearer):
    """JWT Bearer token authentication."""

    def __init__(self):
        # we raise our own 401s instead of FastAPI's defaults
        super().__init__(auto_error=False)

    async def __call__(
        self,
        request: Request,
        token_service: TokenService = Depends(get_token_service),
    ) -> SessionClaims:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if not credentials or not credentials.credentials:
            raise UnauthenticatedError("No token")

        try:
            claims = token_service.verify(credentials.credentials)
        except InvalidTokenError:
            logger.info("Rejected invalid token", extra={"path": request.url.path})
            raise

        request.state.identity = claims
        return claims


jwt_bearer = JWTBearer()


async def get_current_identity(claims: SessionClaims = Depends(jwt_bearer)) -> SessionClaims:
    """Get the authenticated caller's identity context."""
    return claims


def require_role(role: str) -> Callable:
    """Dependency factory: only callers with ``role`` get through."""

    async def _role_gate(identity: SessionClaims = Depends(get_current_identity)) -> SessionClaims:
        if identity.role != role:
            raise ForbiddenError()
        return identity

    return _role_gate
