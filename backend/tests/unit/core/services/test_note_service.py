"""NoteService: tenant isolation and quota behaviour, SQLite-backed."""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from notesnest.core.exceptions import NotFoundError, QuotaExceededError
from notesnest.core.models.tenant import TenantPlan
from notesnest.core.repositories.note_repository import NoteRepository
from notesnest.core.repositories.tenant_repository import TenantRepository
from notesnest.core.repositories.user_repository import UserRepository
from notesnest.core.schemas.notes import NoteCreate, NoteUpdate
from notesnest.core.services.note_service import NoteService
from notesnest.security import SessionClaims


async def _identity(session, email) -> SessionClaims:
    user = await UserRepository(session).get_by_email(email)
    return SessionClaims(
        user_id=user.id,
        email=user.email,
        role=user.role,
        tenant_id=user.tenant_id,
        expires_at=datetime.now(timezone.utc) + timedelta(hours=8),
    )


@pytest.fixture
async def acme_admin(test_session, demo_tenants):
    return await _identity(test_session, "admin@acme.test")


@pytest.fixture
async def globex_user(test_session, demo_tenants):
    return await _identity(test_session, "user@globex.test")


@pytest.fixture
def service(test_session):
    return NoteService(test_session, note_limit=3)


async def test_create_attributes_note_to_caller(service, acme_admin):
    note = await service.create_note(acme_admin, NoteCreate(title="Hello", details="World"))

    assert note.tenant_id == acme_admin.tenant_id
    assert note.user_id == acme_admin.user_id
    assert note.title == "Hello"


async def test_fourth_note_on_free_plan_is_rejected_and_not_persisted(
    service, test_session, acme_admin
):
    for i in range(3):
        await service.create_note(acme_admin, NoteCreate(title=f"note {i}"))

    with pytest.raises(QuotaExceededError):
        await service.create_note(acme_admin, NoteCreate(title="one too many"))

    notes = await NoteRepository(test_session).list_by_tenant(acme_admin.tenant_id)
    assert len(notes) == 3
    assert "one too many" not in {n.title for n in notes}


async def test_pro_plan_ignores_quota(service, test_session, demo_tenants, acme_admin):
    await TenantRepository(test_session).set_plan(demo_tenants["acme"], TenantPlan.PRO)

    for i in range(6):
        await service.create_note(acme_admin, NoteCreate(title=f"note {i}"))

    assert len(await service.list_notes(acme_admin)) == 6


async def test_deleting_frees_a_slot(service, acme_admin):
    created = [await service.create_note(acme_admin, NoteCreate(title=f"n{i}")) for i in range(3)]

    await service.delete_note(acme_admin, created[0].id)
    replacement = await service.create_note(acme_admin, NoteCreate(title="replacement"))

    assert replacement.title == "replacement"


async def test_other_tenant_sees_nothing(service, acme_admin, globex_user):
    note = await service.create_note(acme_admin, NoteCreate(title="secret"))

    assert await service.list_notes(globex_user) == []
    with pytest.raises(NotFoundError):
        await service.get_note(globex_user, note.id)
    with pytest.raises(NotFoundError):
        await service.update_note(globex_user, note.id, NoteUpdate(title="pwned"))
    with pytest.raises(NotFoundError):
        await service.delete_note(globex_user, note.id)

    still_there = await service.get_note(acme_admin, note.id)
    assert still_there.title == "secret"


async def test_update_only_touches_given_fields(service, acme_admin):
    note = await service.create_note(acme_admin, NoteCreate(title="t", details="keep me"))

    updated = await service.update_note(acme_admin, note.id, NoteUpdate(title="t2"))

    assert updated.title == "t2"
    assert updated.details == "keep me"


async def test_missing_note_is_not_found(service, acme_admin):
    with pytest.raises(NotFoundError):
        await service.get_note(acme_admin, uuid.uuid4())
