"""End-to-end tests for the user endpoints against in-memory SQLite."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from shop_api.infrastructure.database import Base, UserModel, get_db_session
from shop_api.infrastructure.database.session import build_engine, build_session_factory
from shop_api.infrastructure.dependencies import get_password_hasher
from shop_api.infrastructure.security.werkzeug_password_hasher import WerkzeugPasswordHasher
from shop_api.main import app

ANN = {
    "name": "Ann",
    "surname": "Lee",
    "email": "ann@x.io",
    "username": "ann",
    "password": "secret",
}

# Cheap hashing keeps the suite fast.
_HASHER = WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")


@pytest_asyncio.fixture
async def session_factory():
    engine = build_engine("sqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield build_session_factory(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncIterator[AsyncClient]:
    async def _session_override():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _session_override
    app.dependency_overrides[get_password_hasher] = lambda: _HASHER
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as http:
            yield http
    finally:
        app.dependency_overrides.clear()


async def _stored_password(session_factory, user_id: int) -> str:
    async with session_factory() as session:
        model = await session.get(UserModel, user_id)
        return model.password


@pytest.mark.asyncio
async def test_create_user(client: AsyncClient, session_factory):
    response = await client.post("/api/v1/users", json=ANN)

    assert response.status_code == 201
    body = response.json()
    assert body["role"] == "user"
    assert body["state"] == 1
    assert body["fullname"] == "Ann Lee"
    assert "password" not in body
    assert "apikey" not in body

    stored = await _stored_password(session_factory, body["id"])
    assert stored != "secret"
    assert _HASHER.verify("secret", stored)


@pytest.mark.asyncio
async def test_create_user_without_password(client: AsyncClient):
    payload = {k: v for k, v in ANN.items() if k != "password"}
    response = await client.post("/api/v1/users", json=payload)
    assert response.status_code == 400
    assert response.json()["detail"] == "Password cannot be null"


@pytest.mark.asyncio
async def test_create_user_duplicate_email_is_server_error(client: AsyncClient):
    await client.post("/api/v1/users", json=ANN)
    response = await client.post("/api/v1/users", json={**ANN, "username": "ann2"})
    assert response.status_code == 500
    assert response.json()["detail"] == "Cannot create user"


@pytest.mark.asyncio
async def test_patch_user_name_only(client: AsyncClient, session_factory):
    created = (await client.post("/api/v1/users", json={**ANN, "name": "Anna"})).json()
    stored_before = await _stored_password(session_factory, created["id"])

    response = await client.patch(f"/api/v1/users/{created['id']}", json={"name": "Ann"})

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Ann"
    assert body["surname"] == "Lee"
    assert body["email"] == "ann@x.io"
    assert body["updated_at"] is not None
    assert await _stored_password(session_factory, created["id"]) == stored_before


@pytest.mark.asyncio
async def test_patch_user_unchanged_keeps_timestamp(client: AsyncClient):
    created = (await client.post("/api/v1/users", json=ANN)).json()

    response = await client.patch(
        f"/api/v1/users/{created['id']}", json={"name": "Ann", "password": "secret"}
    )

    assert response.status_code == 200
    assert response.json()["updated_at"] is None


@pytest.mark.asyncio
async def test_patch_user_password(client: AsyncClient, session_factory):
    created = (await client.post("/api/v1/users", json=ANN)).json()

    response = await client.patch(f"/api/v1/users/{created['id']}", json={"password": "n3w"})

    assert response.status_code == 200
    stored = await _stored_password(session_factory, created["id"])
    assert _HASHER.verify("n3w", stored)


@pytest.mark.asyncio
async def test_patch_user_rejects_bad_email(client: AsyncClient):
    created = (await client.post("/api/v1/users", json=ANN)).json()
    response = await client.patch(f"/api/v1/users/{created['id']}", json={"email": "nope"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_user_not_found(client: AsyncClient):
    assert (await client.get("/api/v1/users/5")).status_code == 404
    assert (await client.patch("/api/v1/users/5", json={"name": "Ann"})).status_code == 404
    assert (await client.delete("/api/v1/users/5")).status_code == 404


@pytest.mark.asyncio
async def test_list_users(client: AsyncClient):
    await client.post("/api/v1/users", json=ANN)
    await client.post("/api/v1/users", json={**ANN, "email": "bob@x.io", "username": "bob"})

    response = await client.get("/api/v1/users")

    assert response.status_code == 200
    assert [u["username"] for u in response.json()] == ["ann", "bob"]


@pytest.mark.asyncio
async def test_get_user_by_email(client: AsyncClient):
    created = (await client.post("/api/v1/users", json=ANN)).json()

    response = await client.get("/api/v1/users/email", params={"email": "ann@x.io"})

    assert response.status_code == 200
    assert response.json()["id"] == created["id"]
    assert response.json()["username"] == "ann"


@pytest.mark.asyncio
async def test_get_user_by_email_missing(client: AsyncClient):
    await client.post("/api/v1/users", json=ANN)

    response = await client.get("/api/v1/users/email", params={"email": "bob@x.io"})

    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"


@pytest.mark.asyncio
async def test_get_user_by_email_requires_parameter(client: AsyncClient):
    response = await client.get("/api/v1/users/email")
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_patch_with_unknown_field_is_rejected(client: AsyncClient):
    created = (await client.post("/api/v1/users", json=ANN)).json()
    response = await client.patch(f"/api/v1/users/{created['id']}", json={"state": 99})
    assert response.status_code == 422
