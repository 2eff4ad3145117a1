"""Note repository for database operations.

Every query here carries the tenant predicate. A note id from another tenant
behaves exactly like an id that does not exist.
"""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.note import Note
from .tenant_repository import TenantRepository

logger = logging.getLogger(__name__)


class NoteRepository:
    """Tenant-scoped repository for note database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.tenant_repo = TenantRepository(session)

    async def create_note(self, note_data: dict) -> Note:
        """Create new note. ``note_data`` must include ``tenant_id``."""
        if note_data.get("tenant_id") is None:
            raise ValueError("tenant_id is required")

        note = Note(**note_data)
        self.session.add(note)
        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def get_by_id_and_tenant(self, note_id: UUID, tenant_id: UUID) -> Optional[Note]:
        """Get note by ID if owned by tenant."""
        stmt = select(Note).where(and_(Note.id == note_id, Note.tenant_id == tenant_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_tenant(self, tenant_id: UUID) -> List[Note]:
        """All tenant notes, newest created first."""
        stmt = (
            select(Note)
            .where(Note.tenant_id == tenant_id)
            .order_by(desc(Note.created_at), desc(Note.id))
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_tenant(self, tenant_id: UUID) -> int:
        """Number of notes the tenant owns."""
        stmt = select(func.count(Note.id)).where(Note.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def update_note(
        self, note_id: UUID, tenant_id: UUID, update_data: dict
    ) -> Optional[Note]:
        """Update note if owned by tenant."""
        note = await self.get_by_id_and_tenant(note_id, tenant_id)
        if not note:
            return None

        for key, value in update_data.items():
            if key in ("id", "tenant_id"):
                continue
            setattr(note, key, value)

        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def delete_note(self, note_id: UUID, tenant_id: UUID) -> bool:
        """Delete note if owned by tenant, returning its quota slot."""
        note = await self.get_by_id_and_tenant(note_id, tenant_id)
        if not note:
            logger.debug(f"Note {note_id} not found in tenant {tenant_id}")
            return False

        try:
            await self.session.delete(note)
            await self.tenant_repo.release_note_slot(tenant_id)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return True
