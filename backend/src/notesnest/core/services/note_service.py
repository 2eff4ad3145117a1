"""Note service implementation."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ...security import SessionClaims
from ..exceptions import NotFoundError, QuotaExceededError
from ..logging import get_logger
from ..repositories.note_repository import NoteRepository
from ..repositories.tenant_repository import TenantRepository
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate
from .interfaces import INoteService
from .quota_policy import QuotaPolicy

logger = get_logger("notes")


class NoteService(INoteService):
    """Note service implementation. Scope is always ``identity.tenant_id``."""

    def __init__(self, session: AsyncSession, note_limit: Optional[int] = None):
        self.session = session
        self.note_repo = NoteRepository(session)
        self.tenant_repo = TenantRepository(session)
        if note_limit is None:
            note_limit = get_settings().free_plan_note_limit
        self.quota = QuotaPolicy(session, limit=note_limit)

    async def list_notes(self, identity: SessionClaims) -> List[NoteResponse]:
        """List the caller's tenant notes, newest first."""
        notes = await self.note_repo.list_by_tenant(identity.tenant_id)
        return [NoteResponse.model_validate(note) for note in notes]

    async def create_note(self, identity: SessionClaims, request: NoteCreate) -> NoteResponse:
        """Create a note, subject to the tenant's plan quota."""
        tenant = await self.tenant_repo.get_by_id(identity.tenant_id)
        if not tenant:
            raise NotFoundError("Tenant not found")

        if not await self.quota.can_create(tenant):
            logger.warning("Note quota exceeded", extra={"tenant": tenant.slug})
            raise QuotaExceededError()

        note_data = {
            "title": request.title,
            "details": request.details,
            "tenant_id": tenant.id,
            "user_id": identity.user_id,
        }
        try:
            # slot claim and insert commit together
            await self.quota.acquire(tenant)
            note = await self.note_repo.create_note(note_data)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Note created", extra={"note_id": str(note.id), "tenant": tenant.slug})
        return NoteResponse.model_validate(note)

    async def get_note(self, identity: SessionClaims, note_id: UUID) -> NoteResponse:
        """Get note by ID. Other tenants' notes look like missing ones."""
        note = await self.note_repo.get_by_id_and_tenant(note_id, identity.tenant_id)
        if not note:
            raise NotFoundError()
        return NoteResponse.model_validate(note)

    async def update_note(
        self, identity: SessionClaims, note_id: UUID, request: NoteUpdate
    ) -> NoteResponse:
        """Update title and/or details."""
        update_data = request.model_dump(exclude_none=True)
        note = await self.note_repo.update_note(note_id, identity.tenant_id, update_data)
        if not note:
            raise NotFoundError()
        return NoteResponse.model_validate(note)

    async def delete_note(self, identity: SessionClaims, note_id: UUID) -> bool:
        """Delete note."""
        deleted = await self.note_repo.delete_note(note_id, identity.tenant_id)
        if not deleted:
            raise NotFoundError()
        logger.info("Note deleted", extra={"note_id": str(note_id)})
        return True
