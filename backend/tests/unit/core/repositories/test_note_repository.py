"""Tenant scoping tests for NoteRepository against SQLite."""

import uuid

import pytest

from notesnest.core.repositories.note_repository import NoteRepository
from notesnest.core.repositories.tenant_repository import TenantRepository


@pytest.fixture
def repo(test_session):
    return NoteRepository(test_session)


async def _note(repo, tenant, title="t"):
    return await repo.create_note({"title": title, "details": "d", "tenant_id": tenant.id})


async def test_create_requires_tenant(repo):
    with pytest.raises(ValueError):
        await repo.create_note({"title": "orphan", "details": ""})


async def test_create_assigns_id_and_timestamps(repo, demo_tenants):
    note = await _note(repo, demo_tenants["acme"])
    assert isinstance(note.id, uuid.UUID)
    assert note.created_at is not None
    assert note.tenant_id == demo_tenants["acme"].id


async def test_list_is_scoped_and_newest_first(repo, demo_tenants):
    acme, globex = demo_tenants["acme"], demo_tenants["globex"]
    first = await _note(repo, acme, "first")
    second = await _note(repo, acme, "second")
    await _note(repo, globex, "elsewhere")

    notes = await repo.list_by_tenant(acme.id)

    assert [n.id for n in notes] == [second.id, first.id]
    assert all(n.tenant_id == acme.id for n in notes)


async def test_get_from_other_tenant_is_none(repo, demo_tenants):
    note = await _note(repo, demo_tenants["acme"])

    assert await repo.get_by_id_and_tenant(note.id, demo_tenants["acme"].id) is not None
    assert await repo.get_by_id_and_tenant(note.id, demo_tenants["globex"].id) is None


async def test_update_from_other_tenant_changes_nothing(repo, demo_tenants):
    note = await _note(repo, demo_tenants["acme"], "original")

    result = await repo.update_note(note.id, demo_tenants["globex"].id, {"title": "hijacked"})

    assert result is None
    fresh = await repo.get_by_id_and_tenant(note.id, demo_tenants["acme"].id)
    assert fresh.title == "original"


async def test_update_cannot_move_note_between_tenants(repo, demo_tenants):
    note = await _note(repo, demo_tenants["acme"])
    updated = await repo.update_note(
        note.id, demo_tenants["acme"].id, {"title": "new", "tenant_id": demo_tenants["globex"].id}
    )
    assert updated.title == "new"
    assert updated.tenant_id == demo_tenants["acme"].id


async def test_delete_from_other_tenant_is_false(repo, demo_tenants):
    note = await _note(repo, demo_tenants["acme"])

    assert await repo.delete_note(note.id, demo_tenants["globex"].id) is False
    assert await repo.count_by_tenant(demo_tenants["acme"].id) == 1


async def test_delete_releases_quota_slot(repo, test_session, demo_tenants):
    acme = demo_tenants["acme"]
    tenants = TenantRepository(test_session)
    assert await tenants.reserve_note_slot(acme.id, limit=3)
    note = await _note(repo, acme)

    assert await repo.delete_note(note.id, acme.id) is True
    assert await repo.count_by_tenant(acme.id) == 0

    await test_session.refresh(acme)
    assert acme.note_count == 0


async def test_unknown_id_behaves_like_other_tenant(repo, demo_tenants):
    missing = uuid.uuid4()
    assert await repo.get_by_id_and_tenant(missing, demo_tenants["acme"].id) is None
    assert await repo.update_note(missing, demo_tenants["acme"].id, {"title": "x"}) is None
    assert await repo.delete_note(missing, demo_tenants["acme"].id) is False
