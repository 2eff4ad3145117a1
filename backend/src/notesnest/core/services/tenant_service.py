"""Tenant plan management."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import ForbiddenError, NotFoundError, UnauthenticatedError
from ..logging import get_logger
from ..models.tenant import TenantPlan
from ..repositories.tenant_repository import TenantRepository
from ..repositories.user_repository import UserRepository
from ..schemas.tenants import TenantSummary, UpgradeResponse
from .interfaces import ITenantService

logger = get_logger("tenants")


class TenantService(ITenantService):
    def __init__(self, session: AsyncSession):
        self.session = session
        self.tenant_repo = TenantRepository(session)
        self.user_repo = UserRepository(session)

    async def upgrade(self, requester_user_id: UUID, slug: str) -> UpgradeResponse:
        """Upgrade ``slug`` to pro.

        Only an admin of that same tenant may do it. Role and tenant come
        from the stored user, not from token claims. Upgrading a tenant
        that is already pro succeeds without changes.
        """
        tenant = await self.tenant_repo.get_by_slug(slug)
        if not tenant:
            raise NotFoundError("Tenant not found")

        requester = await self.user_repo.get_by_id(requester_user_id)
        if not requester:
            raise UnauthenticatedError()

        if requester.tenant_id != tenant.id:
            raise ForbiddenError("Cannot upgrade another tenant")

        if not requester.is_admin:
            raise ForbiddenError("Admin only")

        if not tenant.is_pro:
            tenant = await self.tenant_repo.set_plan(tenant, TenantPlan.PRO)
            logger.info("Tenant upgraded", extra={"tenant": tenant.slug, "by": str(requester.id)})

        return UpgradeResponse(tenant=TenantSummary(slug=tenant.slug, plan=tenant.plan))
