"""Tenant API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.tenants import UpgradeResponse
from ..core.services import TenantService
from ..database import get_db_session
from ..middleware.auth import get_current_identity
from ..security import SessionClaims

router = APIRouter(prefix="/tenants", tags=["tenants"])


@router.post("/{slug}/upgrade", response_model=UpgradeResponse)
async def upgrade_tenant(
    slug: str,
    identity: SessionClaims = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Upgrade your own tenant to the pro plan (admins only)."""
    tenant_service = TenantService(session)
    return await tenant_service.upgrade(identity.user_id, slug)
