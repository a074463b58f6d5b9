"""Shared test fixtures and utilities for all tests."""
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from dependency_injector import providers
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.app.config import get_settings
from src.app.containers import API_MODULES, Container
from src.client import PortfolioClient
from src.shared.database.database import Database, DatabaseSettings
from src.shared.database.unit_of_work import UnitOfWork


@pytest.fixture
def async_db_url(tmp_path):
    """SQLite database file private to the test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'portfolio.db'}"


@pytest.fixture
def test_settings_override(async_db_url, monkeypatch):
    """
    Centralized settings override for all test configurations.

    Points DATABASE_URL at the test database and clears the settings cache so
    the new environment is picked up.
    """
    monkeypatch.setenv("DATABASE_URL", async_db_url)
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


@pytest_asyncio.fixture
async def db(async_db_url):
    """
    Create database instance with test database.
    Function-scoped for test isolation.
    """
    db = Database(DatabaseSettings(db_url=async_db_url))
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def clean_database(db):
    """Drop and recreate all tables before the test."""
    await db.drop_tables()
    await db.create_tables()
    yield db


@pytest.fixture
def test_container(test_settings_override, clean_database):
    """
    Create a test container with database override for proper test isolation.
    Function-scoped to ensure each test gets a fresh container.
    """
    container = Container()

    # Override the database singleton with the test database instance
    container.database.override(providers.Object(clean_database))

    container.wire(modules=API_MODULES)
    yield container
    container.database.reset_override()
    container.unwire()


@pytest_asyncio.fixture
async def test_app(test_container):
    """Create the application around the test container."""
    from src.app.main import create_app

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Database tables are already created by clean_database fixture
        yield

    yield create_app(test_container, lifespan=lifespan)


@pytest_asyncio.fixture
async def http_client(test_app):
    """Raw httpx client bound to the application, for payloads the typed client cannot build."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def portfolio_client(http_client):
    """Typed Portfolio API client sharing the raw client's transport."""
    client = PortfolioClient(base_url="http://test", client=http_client)

    async with client:
        yield client


# =========================================================================
# Repository and service fixtures from the container
# =========================================================================

@pytest.fixture
def unit_of_work(test_container) -> UnitOfWork:
    """Get unit of work from container."""
    return test_container.unit_of_work()


@pytest.fixture
def client_repository(test_container):
    """Get client repository from container."""
    return test_container.client_repository()


@pytest.fixture
def asset_repository(test_container):
    """Get asset repository from container."""
    return test_container.asset_repository()


@pytest.fixture
def client_service(test_container):
    """Get client service from container."""
    return test_container.client_service()


@pytest.fixture
def asset_service(test_container):
    """Get asset service from container."""
    return test_container.asset_service()
