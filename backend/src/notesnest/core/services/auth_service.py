"""Authentication service implementation."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...security import TokenService, verify_password
from ..exceptions import NotFoundError, ValidationError
from ..logging import get_logger
from ..models.user import User
from ..repositories.user_repository import UserRepository
from ..schemas.auth import LoginRequest, LoginResponse, MeResponse, UserSummary
from .interfaces import IAuthService

logger = get_logger("auth")


def _summarize(user: User) -> UserSummary:
    return UserSummary(
        email=user.email,
        role=user.role,
        tenant=user.tenant.slug,
        plan=user.tenant.plan,
    )


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession, token_service: TokenService):
        self.session = session
        self.user_repo = UserRepository(session)
        self.token_service = token_service

    async def authenticate_user(self, request: LoginRequest) -> LoginResponse:
        """Login user and return a session token."""
        user = await self.user_repo.get_by_email(request.email)
        # same message for unknown email and wrong password
        if not user or not verify_password(request.password, user.password_hash):
            raise ValidationError("Invalid credentials")

        token = self.token_service.issue(
            user_id=user.id,
            email=user.email,
            role=user.role,
            tenant_id=user.tenant_id,
        )
        logger.info("User logged in", extra={"user_id": str(user.id), "tenant": user.tenant.slug})

        return LoginResponse(
            token=token,
            expires_in=self.token_service.expires_in_seconds,
            user=_summarize(user),
        )

    async def get_current_user(self, user_id: UUID) -> MeResponse:
        """Get user by ID."""
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return MeResponse(user=_summarize(user))
