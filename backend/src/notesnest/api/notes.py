"""Notes API endpoints - all scoped to the caller's tenant."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.notes import NoteCreate, NoteDeleteResponse, NoteResponse, NoteUpdate
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import get_current_identity
from ..security import SessionClaims

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("", response_model=List[NoteResponse])
async def list_notes(
    identity: SessionClaims = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """List notes for the caller's tenant, newest first."""
    note_service = NoteService(session)
    return await note_service.list_notes(identity)


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: NoteCreate,
    identity: SessionClaims = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note (free plan: limited)."""
    note_service = NoteService(session)
    return await note_service.create_note(identity, request)


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: UUID,
    identity: SessionClaims = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific note by ID."""
    note_service = NoteService(session)
    return await note_service.get_note(identity, note_id)


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: UUID,
    request: NoteUpdate,
    identity: SessionClaims = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Update a note."""
    note_service = NoteService(session)
    return await note_service.update_note(identity, note_id, request)


@router.delete("/{note_id}", response_model=NoteDeleteResponse)
async def delete_note(
    note_id: UUID,
    identity: SessionClaims = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note."""
    note_service = NoteService(session)
    await note_service.delete_note(identity, note_id)
    return NoteDeleteResponse(ok=True)
