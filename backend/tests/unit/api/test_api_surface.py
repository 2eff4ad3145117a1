"""Routing, status codes and error bodies of the HTTP API."""

import pytest


async def test_health(async_client):
    resp = await async_client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


async def test_database_health(async_client):
    resp = await async_client.get("/health/database")
    assert resp.status_code == 200
    body = resp.json()
    assert body["connected"] is True
    assert body["status"] == "healthy"


def test_routes_registered(test_app):
    paths = test_app.openapi()["paths"]
    routes = {(method.upper(), path) for path, ops in paths.items() for method in ops}
    expected = {
        ("POST", "/auth/login"),
        ("GET", "/auth/me"),
        ("GET", "/api/notes"),
        ("POST", "/api/notes"),
        ("GET", "/api/notes/{note_id}"),
        ("PUT", "/api/notes/{note_id}"),
        ("DELETE", "/api/notes/{note_id}"),
        ("POST", "/tenants/{slug}/upgrade"),
        ("GET", "/health"),
    }
    assert expected <= routes


@pytest.mark.parametrize(
    "payload",
    [{}, {"email": "admin@acme.test"}, {"password": "password"}, {"email": "", "password": ""}],
)
async def test_login_missing_fields_is_400(async_client, payload):
    resp = await async_client.post("/auth/login", json=payload)
    assert resp.status_code == 400
    assert resp.json()["error"] == "ValidationError"


async def test_login_bad_credentials_is_400(async_client, demo_tenants):
    resp = await async_client.post(
        "/auth/login", json={"email": "admin@acme.test", "password": "wrong"}
    )
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid credentials"


async def test_login_response_shape(async_client, demo_tenants):
    resp = await async_client.post(
        "/auth/login", json={"email": "user@globex.test", "password": "password"}
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["token"]
    assert body["token_type"] == "bearer"
    assert body["user"] == {
        "email": "user@globex.test",
        "role": "member",
        "tenant": "globex",
        "plan": "free",
    }


@pytest.mark.parametrize(
    "method,path",
    [
        ("GET", "/auth/me"),
        ("GET", "/api/notes"),
        ("POST", "/api/notes"),
        ("GET", "/api/notes/00000000-0000-0000-0000-000000000000"),
        ("PUT", "/api/notes/00000000-0000-0000-0000-000000000000"),
        ("DELETE", "/api/notes/00000000-0000-0000-0000-000000000000"),
        ("POST", "/tenants/acme/upgrade"),
    ],
)
async def test_protected_routes_require_token(async_client, method, path):
    resp = await async_client.request(method, path)
    assert resp.status_code == 401
    body = resp.json()
    assert body["error"] == "Unauthenticated"
    assert "timestamp" in body


async def test_token_from_other_secret_rejected(async_client, demo_tenants):
    from notesnest.security import TokenService

    acme = demo_tenants["acme"]
    forged = TokenService("attacker").issue(acme.id, "admin@acme.test", "admin", acme.id)
    resp = await async_client.get("/api/notes", headers={"Authorization": f"Bearer {forged}"})
    assert resp.status_code == 401


async def test_me_for_vanished_user_is_404(async_client, token_service, demo_tenants):
    import uuid

    token = token_service.issue(uuid.uuid4(), "gone@acme.test", "member", demo_tenants["acme"].id)
    resp = await async_client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 404
    assert resp.json()["error"] == "NotFound"


async def test_create_note_requires_title(async_client, login_as):
    headers = await login_as("user@acme.test")
    resp = await async_client.post("/api/notes", json={"details": "no title"}, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["error"] == "ValidationError"


async def test_malformed_note_id_is_400(async_client, login_as):
    headers = await login_as("user@acme.test")
    resp = await async_client.get("/api/notes/not-a-uuid", headers=headers)
    assert resp.status_code == 400


async def test_unknown_route_uses_error_body(async_client):
    resp = await async_client.get("/nope")
    assert resp.status_code == 404
    assert resp.json()["error"] == "NotFound"
