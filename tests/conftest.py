import asyncio
import os

# Settings are read at import time, so the environment is prepared first
os.environ.setdefault("JWT_SECRET_KEY", "test-access-secret")
os.environ.setdefault("JWT_REFRESH_SECRET_KEY", "test-refresh-secret")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ["OTEL_ENABLED"] = "false"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from homedecor.main import app  # noqa: E402
from homedecor.services.auth_service.service import AuthService  # noqa: E402
from homedecor.shared.config.database import Base, get_db  # noqa: E402
from homedecor.shared.media import CloudinaryClient, get_media_client  # noqa: E402

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin-pass"


@pytest.fixture()
def session_factory(tmp_path):
    # A file database with NullPool: every request runs on its own event loop
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'store.db'}", poolclass=NullPool)

    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, _record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async def create_tables():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(create_tables())
    yield async_sessionmaker(engine, expire_on_commit=False)
    asyncio.run(engine.dispose())


@pytest.fixture()
def run_db(session_factory):
    """Runs `operation(session)` to completion against the test database."""

    def run(operation):
        async def _run():
            async with session_factory() as session:
                return await operation(session)

        return asyncio.run(_run())

    return run


@pytest.fixture()
def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def media_calls():
    return []


@pytest.fixture()
def media_client(media_calls):
    """Media client on a mock transport that records each request path and form body."""

    def handler(request: httpx.Request) -> httpx.Response:
        media_calls.append((request.url.path, request.content))
        if request.url.path.endswith("/destroy"):
            return httpx.Response(200, json={"result": "ok"})
        return httpx.Response(
            200,
            json={"secure_url": "https://res.cloudinary.com/demo/image/upload/v1700000000/uploaded.jpg"},
        )

    return CloudinaryClient(
        cloud_name="demo",
        api_key="key",
        api_secret="secret",
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture()
def use_media(client, media_client):
    app.dependency_overrides[get_media_client] = lambda: media_client
    return media_client


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def register(client):
    """Registers an account and returns the auth response body."""

    def _register(email="shopper@example.com", name="Shopper", password="secret123"):
        resp = client.post("/api/auth/register", json={"name": name, "email": email, "password": password})
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _register


@pytest.fixture()
def user_headers(register):
    return bearer(register()["access_token"])


@pytest.fixture()
def other_user_headers(register):
    return bearer(register(email="neighbour@example.com", name="Neighbour")["access_token"])


@pytest.fixture()
def admin_headers(client, run_db):
    run_db(lambda db: AuthService.ensure_admin(db, ADMIN_EMAIL, ADMIN_PASSWORD, "Admin"))
    resp = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200, resp.text
    return bearer(resp.json()["access_token"])


@pytest.fixture()
def make_product(client, admin_headers):
    def _make(**overrides):
        payload = {
            "name": "Oak Side Table",
            "description": "Solid oak with a matte finish",
            "price": 100.0,
            "category": "furniture",
            "stock": 5,
        }
        payload.update(overrides)
        resp = client.post("/api/products", json=payload, headers=admin_headers)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make


@pytest.fixture()
def address():
    return {
        "name": "Sam Shopper",
        "address": "1 Main Street",
        "city": "Springfield",
        "state": "IL",
        "zip_code": "62701",
        "country": "US",
        "phone": "555-0100",
    }
