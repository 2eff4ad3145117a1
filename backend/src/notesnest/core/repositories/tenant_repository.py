"""Tenant repository for database operations."""

from typing import Optional
from uuid import UUID

from sqlalchemy import or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.tenant import Tenant, TenantPlan


class TenantRepository:
    """Repository for tenant database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_tenant(self, tenant_data: dict) -> Tenant:
        """Create new tenant."""
        tenant = Tenant(**tenant_data)
        self.session.add(tenant)
        await self.session.commit()
        await self.session.refresh(tenant)
        return tenant

    async def get_by_id(self, tenant_id: UUID) -> Optional[Tenant]:
        """Get tenant by ID."""
        stmt = select(Tenant).where(Tenant.id == tenant_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_slug(self, slug: str) -> Optional[Tenant]:
        """Get tenant by slug."""
        stmt = select(Tenant).where(Tenant.slug == slug)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def set_plan(self, tenant: Tenant, plan: TenantPlan) -> Tenant:
        """Change a tenant's plan and persist it."""
        tenant.plan = plan.value
        await self.session.commit()
        await self.session.refresh(tenant)
        return tenant

    async def reserve_note_slot(self, tenant_id: UUID, limit: int) -> bool:
        """Atomically bump the tenant's note counter if the plan allows one more.

        A single conditional UPDATE: the row lock taken by the database makes
        concurrent reservations on the same tenant serialize, so a free tenant
        can never be pushed past ``limit``. Not committed here; the caller
        commits together with the note insert.
        """
        stmt = (
            update(Tenant)
            .where(Tenant.id == tenant_id)
            .where(or_(Tenant.plan == TenantPlan.PRO.value, Tenant.note_count < limit))
            .values(note_count=Tenant.note_count + 1)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def release_note_slot(self, tenant_id: UUID) -> None:
        """Give back one slot after a note is deleted. Not committed here."""
        stmt = (
            update(Tenant)
            .where(Tenant.id == tenant_id)
            .where(Tenant.note_count > 0)
            .values(note_count=Tenant.note_count - 1)
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)
