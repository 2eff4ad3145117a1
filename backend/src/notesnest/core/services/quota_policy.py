"""Plan quota enforcement for note creation."""

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import QuotaExceededError
from ..logging import get_logger
from ..models.tenant import Tenant
from ..repositories.note_repository import NoteRepository
from ..repositories.tenant_repository import TenantRepository
from .interfaces import IQuotaPolicy

FREE_PLAN_NOTE_LIMIT = 3

logger = get_logger("quota")


class QuotaPolicy(IQuotaPolicy):
    """Pro tenants are unlimited; free tenants may hold ``limit`` notes.

    ``can_create`` is a read-only check. ``acquire`` is the enforcing step:
    it claims a slot with a conditional write so two concurrent creations
    cannot both squeeze past the limit.
    """

    def __init__(self, session: AsyncSession, limit: int = FREE_PLAN_NOTE_LIMIT):
        self.session = session
        self.limit = limit
        self.note_repo = NoteRepository(session)
        self.tenant_repo = TenantRepository(session)

    async def can_create(self, tenant: Tenant) -> bool:
        if tenant.is_pro:
            return True
        count = await self.note_repo.count_by_tenant(tenant.id)
        return count < self.limit

    async def acquire(self, tenant: Tenant) -> None:
        if not await self.tenant_repo.reserve_note_slot(tenant.id, self.limit):
            logger.warning(
                "Note quota exceeded",
                extra={"tenant": tenant.slug, "plan": tenant.plan, "limit": self.limit},
            )
            raise QuotaExceededError()
