"""Authentication API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.auth import LoginRequest, LoginResponse, MeResponse
from ..core.services import AuthService
from ..database import get_db_session
from ..middleware.auth import get_current_identity
from ..security import SessionClaims, TokenService, get_token_service

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    session: AsyncSession = Depends(get_db_session),
    token_service: TokenService = Depends(get_token_service),
):
    """Exchange email + password for a session token."""
    auth_service = AuthService(session, token_service)
    return await auth_service.authenticate_user(request)


@router.get("/me", response_model=MeResponse)
async def get_current_user(
    identity: SessionClaims = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
    token_service: TokenService = Depends(get_token_service),
):
    """Get current user profile."""
    auth_service = AuthService(session, token_service)
    return await auth_service.get_current_user(identity.user_id)
