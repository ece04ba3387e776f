"""Shared test fixtures and utilities for all tests."""
import pytest
import pytest_asyncio
from dependency_injector import providers
from httpx import ASGITransport, AsyncClient

from src.app.containers import Container
from src.app.core.services.clock import FixedClock
from src.client import ClientesClient
from src.shared.database.database import Database, Base, DatabaseSettings
from tests.helpers import NOW


@pytest.fixture
def fixed_clock():
    """Clock frozen at NOW."""
    return FixedClock(NOW)


@pytest.fixture
def async_db_url(tmp_path):
    """SQLite database file private to the test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'clientes.db'}"


@pytest_asyncio.fixture(scope="function")
async def db(async_db_url):
    """
    Create database instance with test database.
    Function-scoped for test isolation.
    """
    db = Database(DatabaseSettings(db_url=async_db_url))
    yield db
    await db.dispose()


@pytest_asyncio.fixture(scope="function")
async def clean_database(db):
    """
    Clean the database before each test.
    Drops and recreates all tables.
    """
    async with db._engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield db


@pytest.fixture
def settings_override():
    """Settings to run the container with; None keeps the environment's settings."""
    return None


@pytest.fixture(scope="function")
def test_container(clean_database, fixed_clock, settings_override):
    """
    Create a test container with database and clock overrides.
    Function-scoped to ensure each test gets a fresh container.
    """
    container = Container()

    container.database.override(providers.Object(clean_database))
    container.clock.override(providers.Object(fixed_clock))
    if settings_override is not None:
        container.config.override(providers.Object(settings_override))

    container.wire(modules=["src.app.api.clients"])
    yield container
    container.config.reset_override()
    container.clock.reset_override()
    container.database.reset_override()
    container.unwire()


@pytest_asyncio.fixture(scope="function")
async def test_app(test_container):
    """
    Create test application with container.
    Tables are already created by the clean_database fixture.
    """
    from contextlib import asynccontextmanager
    from fastapi import FastAPI
    from src.app.main import create_app

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield

    yield create_app(test_container, lifespan=lifespan)


@pytest_asyncio.fixture
async def http_client(test_app):
    """Raw httpx client bound to the test application."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def clientes_client(http_client, test_container):
    """Clientes SDK client talking to the test application."""
    client = ClientesClient(
        base_url="http://test",
        client=http_client,
        api_prefix=test_container.config().api_prefix,
    )
    async with client:
        yield client


# =========================================================================
# Common repository and service fixtures
# =========================================================================

@pytest.fixture
def client_repository(test_container):
    """Get client repository from container."""
    return test_container.client_repository()


@pytest.fixture
def client_service(test_container):
    """Get client service from container."""
    return test_container.client_service()
