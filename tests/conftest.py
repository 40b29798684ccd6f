"""Shared fixtures: an in-memory database and an app wired to it."""

import pytest
from httpx import ASGITransport, AsyncClient

from confsite.config import Settings
from confsite.db import Database
from confsite.main import create_app
from confsite.services.auth import AdminAccountService, AuthService

ADMIN_EMAIL = "admin@harmun.org"
ADMIN_PASSWORD = "correct-horse-42"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        app_env="development",
        database_uri="sqlite+aiosqlite:///:memory:",
        jwt_secret_key="test-secret-key",
        log_level="WARNING",
    )


@pytest.fixture
async def database(settings):
    database = Database.from_settings(settings)
    await database.create_all()
    yield database
    await database.dispose()


@pytest.fixture
async def session(database):
    async with database.session_maker() as session:
        yield session


@pytest.fixture
def app(settings, database):
    return create_app(settings, database)


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def admin(database, settings):
    async with database.session_maker() as session:
        user = await AdminAccountService(session, AuthService(settings)).create(
            ADMIN_EMAIL, ADMIN_PASSWORD
        )
        await session.commit()
    return user


@pytest.fixture
async def admin_client(client, admin):
    """Client carrying the auth cookies of a signed-in admin."""
    response = await client.post(
        "/api/v1/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return client
