from uuid import uuid4
from datetime import datetime, timedelta, UTC

import pytest

from src.app.core.domain.models import Client


def make_client(name: str = "John Doe", email: str = "john.doe@example.com", **kwargs) -> Client:
    return Client(id=uuid4(), name=name, email=email, **kwargs)


@pytest.mark.asyncio
async def test_get_client_by_id(client_repository, unit_of_work):
    """Test retrieving a client by ID."""
    # Arrange - Create a client
    client = make_client(active=False)

    async with unit_of_work:
        unit_of_work.add(client)

    # Act - Retrieve by ID
    retrieved_client = await client_repository.get_by_id(client.id)

    # Assert
    assert retrieved_client is not None
    assert retrieved_client.id == client.id
    assert retrieved_client.name == "John Doe"
    assert retrieved_client.email == "john.doe@example.com"
    assert retrieved_client.active is False


@pytest.mark.asyncio
async def test_get_client_by_id_not_found(client_repository):
    assert await client_repository.get_by_id(uuid4()) is None


@pytest.mark.asyncio
async def test_get_client_by_email(client_repository, unit_of_work):
    client = make_client(name="Jane Doe", email="jane@example.com")
    async with unit_of_work:
        unit_of_work.add(client)

    retrieved_client = await client_repository.get_by_email("jane@example.com")

    assert retrieved_client is not None
    assert retrieved_client.id == client.id
    assert await client_repository.get_by_email("nobody@example.com") is None


@pytest.mark.asyncio
async def test_get_all_clients_oldest_first(client_repository, unit_of_work):
    now = datetime.now(UTC)
    newer = make_client(name="Newer Client", email="newer@example.com", created_at=now)
    older = make_client(name="Older Client", email="older@example.com", created_at=now - timedelta(days=1))
    async with unit_of_work:
        unit_of_work.add(newer)
        unit_of_work.add(older)

    clients = await client_repository.get_all()

    assert [c.name for c in clients] == ["Older Client", "Newer Client"]


@pytest.mark.asyncio
async def test_get_all_clients_empty(client_repository):
    assert await client_repository.get_all() == []


@pytest.mark.asyncio
async def test_created_at_is_read_back_in_utc(client_repository, unit_of_work):
    client = make_client(created_at=datetime(2024, 5, 1, 12, 30, tzinfo=UTC))

    async with unit_of_work:
        unit_of_work.add(client)

    retrieved = await client_repository.get_by_id(client.id)

    assert retrieved.created_at.tzinfo == UTC
    assert retrieved.created_at == client.created_at
