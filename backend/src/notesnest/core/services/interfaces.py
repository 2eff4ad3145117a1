"""
Service interfaces for NotesNest.

Every note/tenant operation takes the caller's verified identity; tenant
scoping comes from it, never from request input.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
from uuid import UUID

from ...security import SessionClaims
from ..models.tenant import Tenant
from ..schemas.auth import LoginRequest, LoginResponse, MeResponse
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate
from ..schemas.tenants import UpgradeResponse


class IAuthService(ABC):
    """Login and identity lookup."""

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> LoginResponse:
        """Check credentials and issue a session token."""
        pass

    @abstractmethod
    async def get_current_user(self, user_id: UUID) -> MeResponse:
        """Describe the user behind a token."""
        pass


class INoteService(ABC):
    """Tenant-scoped note CRUD."""

    @abstractmethod
    async def list_notes(self, identity: SessionClaims) -> List[NoteResponse]:
        pass

    @abstractmethod
    async def create_note(self, identity: SessionClaims, request: NoteCreate) -> NoteResponse:
        pass

    @abstractmethod
    async def get_note(self, identity: SessionClaims, note_id: UUID) -> NoteResponse:
        pass

    @abstractmethod
    async def update_note(
        self, identity: SessionClaims, note_id: UUID, request: NoteUpdate
    ) -> NoteResponse:
        pass

    @abstractmethod
    async def delete_note(self, identity: SessionClaims, note_id: UUID) -> bool:
        pass


class IQuotaPolicy(ABC):
    """Plan-based note creation limits."""

    @abstractmethod
    async def can_create(self, tenant: Tenant) -> bool:
        """Whether the tenant may create one more note right now."""
        pass

    @abstractmethod
    async def acquire(self, tenant: Tenant) -> None:
        """Atomically claim a note slot or raise QuotaExceededError."""
        pass


class ITenantService(ABC):
    """Tenant plan management."""

    @abstractmethod
    async def upgrade(self, requester_user_id: UUID, slug: str) -> UpgradeResponse:
        """Move a tenant to the pro plan."""
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        pass
